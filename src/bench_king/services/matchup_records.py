from collections.abc import Iterable

from bench_king.domain.bench import MatchupRecord
from bench_king.domain.performance import Matchup, MatchupWinner, Team


def _record(points_for: float, points_against: float, won: bool, lost: bool, tied: bool) -> MatchupRecord:
    return MatchupRecord(
        wins=int(won),
        losses=int(lost),
        ties=int(tied),
        points_for=points_for,
        points_against=points_against,
    )


def compute_records(teams: Iterable[Team], matchups: Iterable[Matchup]) -> dict[int, MatchupRecord]:
    """Head-to-head records from decided matchups only.

    Byes and undecided (in progress or future) matchups are ignored. Every
    team starts at 0-0-0 so teams without a decided game still appear.
    """
    records = {team.id: MatchupRecord() for team in teams}
    for matchup in matchups:
        away, home = matchup.away, matchup.home
        if matchup.winner is MatchupWinner.UNDECIDED or away is None or home is None:
            continue
        away_won = matchup.winner is MatchupWinner.AWAY
        home_won = matchup.winner is MatchupWinner.HOME
        tied = matchup.winner is MatchupWinner.TIE
        records[away.team_id] = records.get(away.team_id, MatchupRecord()) + _record(
            away.total_points, home.total_points, away_won, home_won, tied
        )
        records[home.team_id] = records.get(home.team_id, MatchupRecord()) + _record(
            home.total_points, away.total_points, home_won, away_won, tied
        )
    return records


def rank_records(records: dict[int, MatchupRecord]) -> list[tuple[int, MatchupRecord]]:
    """Order by wins, then points for, then points against, all descending."""
    return sorted(
        records.items(),
        key=lambda item: (-item[1].wins, -item[1].points_for, -item[1].points_against, item[0]),
    )
