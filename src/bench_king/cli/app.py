from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import httpx
import typer

from bench_king.cli._logging import configure_logging
from bench_king.cli._output import print_error, print_records_report, print_season_report, print_week_report
from bench_king.cli.factory import build_report_service
from bench_king.config import load_config
from bench_king.exceptions import BenchKingException
from bench_king.services.lineup_optimizer import LineupMethod

app = typer.Typer(name="bench-king", help="Bench King: points left on the bench in ESPN fantasy football leagues")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors")] = False,
) -> None:
    """Bench King: points left on the bench in ESPN fantasy football leagues."""
    configure_logging(verbose=verbose, quiet=quiet)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_SeasonOpt = Annotated[int, typer.Option("--season", "-s", help="The year of the season")]
_LeagueOpt = Annotated[int | None, typer.Option("--league", "-l", help="ESPN fantasy league id")]
_SwidOpt = Annotated[str | None, typer.Option("--swid", help="SWID cookie value from espn.com")]
_EspnS2Opt = Annotated[str | None, typer.Option("--espn-s2", help="espn_s2 cookie value from espn.com")]
_MethodOpt = Annotated[
    LineupMethod | None, typer.Option("--method", help="Lineup solver: greedy (slot priority) or exact (matching)")
]
_ConfigDirOpt = Annotated[Path, typer.Option("--config-dir", help="Directory containing bench_king.toml")]


@contextmanager
def _report_errors() -> Iterator[None]:
    try:
        yield
    except BenchKingException as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except httpx.HTTPStatusError as e:
        print_error(f"ESPN returned {e.response.status_code} for {e.request.url}")
        raise typer.Exit(code=1)
    except httpx.TransportError as e:
        print_error(f"could not reach ESPN: {e}")
        raise typer.Exit(code=1)


@app.command()
def week(
    season: _SeasonOpt,
    week: Annotated[int, typer.Option("--week", "-w", min=1, help="The week of the season")],
    league: _LeagueOpt = None,
    swid: _SwidOpt = None,
    espn_s2: _EspnS2Opt = None,
    method: _MethodOpt = None,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Report the bench king for a single week."""
    with _report_errors():
        config = load_config(config_dir, league_id=league, swid=swid, espn_s2=espn_s2, method=method)
        with build_report_service(config) as service:
            report = service.week_report(season, week)
        print_week_report(report)


@app.command()
def season(
    season: _SeasonOpt,
    through_week: Annotated[int, typer.Option("--through-week", "-w", min=1, help="Last week to include")],
    strict: Annotated[bool, typer.Option("--strict", help="Abort when a week's roster data is unavailable")] = False,
    league: _LeagueOpt = None,
    swid: _SwidOpt = None,
    espn_s2: _EspnS2Opt = None,
    method: _MethodOpt = None,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Report the bench king across every week up to and including --through-week."""
    with _report_errors():
        config = load_config(config_dir, league_id=league, swid=swid, espn_s2=espn_s2, method=method)
        if strict:
            config = config.with_strict_weeks()
        with build_report_service(config) as service:
            report = service.season_report(season, through_week)
        print_season_report(report)


@app.command()
def records(
    season: _SeasonOpt,
    league: _LeagueOpt = None,
    swid: _SwidOpt = None,
    espn_s2: _EspnS2Opt = None,
    config_dir: _ConfigDirOpt = Path("."),
) -> None:
    """Win/loss standings from head-to-head matchups only."""
    with _report_errors():
        config = load_config(config_dir, league_id=league, swid=swid, espn_s2=espn_s2)
        with build_report_service(config) as service:
            report = service.records_report(season)
        print_records_report(report)
