import math

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bench_king.domain.bench import Standing
from bench_king.domain.bench_report import RecordsReport, SeasonBenchReport, WeekBenchReport

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(message)}")


def round_points(value: float) -> int:
    """Round half away from zero, so 3.5 shows as 4 and -3.5 as -4."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _team_name(team_names: dict[int, str], team_id: int) -> str:
    return escape(team_names.get(team_id, f"Team {team_id}"))


def _standings_table(standings: list[Standing], team_names: dict[int, str], *, approx: bool) -> Table:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Team")
    table.add_column("Actual", justify="right")
    table.add_column("Optimal", justify="right")
    table.add_column("Benched", justify="right")
    table.add_column("0-pt starters", justify="right")
    prefix = "~" if approx else ""
    for place, standing in enumerate(standings, start=1):
        result = standing.result
        table.add_row(
            str(place),
            _team_name(team_names, standing.team_id),
            f"{result.actual_points:.2f}",
            f"{result.optimal_points:.2f}",
            f"{prefix}{round_points(result.suboptimal_points)}",
            str(result.zero_point_starters),
        )
    return table


def print_week_report(report: WeekBenchReport) -> None:
    king = report.king
    console.print(
        f"[bold]Bench King for Week {report.week}[/bold] was "
        f"[bold yellow]{_team_name(report.team_names, king.team_id)}[/bold yellow] "
        f"with {king.result.suboptimal_points:.2f} points left benched."
    )
    console.print()
    console.print("[bold]Week Standings[/bold]")
    console.print(_standings_table(report.standings, report.team_names, approx=False))


def print_season_report(report: SeasonBenchReport) -> None:
    king = report.king
    console.print(
        f"[bold]Bench King through week {report.through_week}[/bold] was "
        f"[bold yellow]{_team_name(report.team_names, king.team_id)}[/bold yellow] "
        f"with {king.result.suboptimal_points:.2f} points left benched."
    )
    if report.skipped_weeks:
        weeks = ", ".join(str(w) for w in sorted(report.skipped_weeks))
        console.print(f"[yellow]Skipped week(s) {weeks}: roster data unavailable[/yellow]")
    console.print()
    console.print("[bold]Overall Standings[/bold]")
    console.print(_standings_table(report.standings, report.team_names, approx=True))


def print_records_report(report: RecordsReport) -> None:
    console.print(f"[bold]Matchup standings for {report.season}[/bold]")
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("#", justify="right")
    table.add_column("Team")
    table.add_column("Record", justify="right")
    table.add_column("PF", justify="right")
    table.add_column("PA", justify="right")
    for place, (team_id, record) in enumerate(report.standings, start=1):
        table.add_row(
            str(place),
            _team_name(report.team_names, team_id),
            f"{record.wins}-{record.losses}-{record.ties}",
            f"{record.points_for:.2f}",
            f"{record.points_against:.2f}",
        )
    console.print(table)
