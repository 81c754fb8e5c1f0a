import logging
from collections.abc import Iterable, Mapping
from functools import reduce
from operator import add

from bench_king.domain.bench import Standing, TeamWeekResult
from bench_king.domain.performance import Matchup
from bench_king.domain.slots import PrioritizedSlots
from bench_king.exceptions import NoStandingsError
from bench_king.services.lineup_optimizer import LineupMethod, analyze_performance

logger = logging.getLogger(__name__)


def details_for_week(
    matchups: Iterable[Matchup],
    slots: PrioritizedSlots,
    method: LineupMethod = LineupMethod.GREEDY,
) -> dict[int, TeamWeekResult]:
    """Run the lineup optimizer for every team side of a week's matchups.

    A team id seen twice keeps its first result. DataUnavailableError from
    any side propagates to the caller.
    """
    week_data: dict[int, TeamWeekResult] = {}
    for matchup in matchups:
        for side in matchup.sides:
            if side.team_id in week_data:
                logger.warning("Team %d appears twice in week %d; keeping first result", side.team_id, matchup.week)
                continue
            week_data[side.team_id] = analyze_performance(side, slots, method, week=matchup.week)
    return week_data


def aggregate(per_week: Mapping[int, Mapping[int, TeamWeekResult]]) -> dict[int, TeamWeekResult]:
    """Sum each team's weekly results into one season-to-date result.

    Weeks are added in week order so float totals do not depend on the order
    results were collected in. A team with no weeks totals to zero.
    """
    return {
        team_id: reduce(add, (weeks[week] for week in sorted(weeks)), TeamWeekResult())
        for team_id, weeks in per_week.items()
    }


def by_team(per_week: Mapping[int, Mapping[int, TeamWeekResult]]) -> dict[int, dict[int, TeamWeekResult]]:
    """Pivot week -> team -> result into team -> week -> result."""
    pivoted: dict[int, dict[int, TeamWeekResult]] = {}
    for week, teams in sorted(per_week.items()):
        for team_id, result in teams.items():
            pivoted.setdefault(team_id, {})[week] = result
    return pivoted


def rank(results: Mapping[int, TeamWeekResult]) -> list[Standing]:
    standings = [Standing(team_id=team_id, result=result) for team_id, result in results.items()]
    standings.sort(key=lambda s: s.sort_key)
    return standings


def bench_king(standings: list[Standing]) -> Standing:
    """Return the team that left the most points on the bench."""
    if not standings:
        raise NoStandingsError("No standings to crown a bench king from")
    return standings[0]
