"""Best-lineup estimation for a single team-week.

The greedy method walks the prioritized slots and gives each seat to the
highest scoring undrafted player eligible for it. It is exact when slot
eligibility is nested in priority order (QB, RB, WR, TE, then FLEX) and can
under-estimate the optimum otherwise. The exact method solves the underlying
assignment problem with scipy and is only used when asked for by name.
"""

import logging
from collections.abc import Sequence
from enum import StrEnum

import numpy as np
from scipy.optimize import linear_sum_assignment

from bench_king.domain.bench import TeamWeekResult
from bench_king.domain.performance import PlayerPerformance, TeamWeekPerformance
from bench_king.domain.slots import NON_SCORING_SLOT_IDS, PrioritizedSlots
from bench_king.exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


class LineupMethod(StrEnum):
    GREEDY = "greedy"
    EXACT = "exact"


def count_zero_point_starters(performances: Sequence[PlayerPerformance]) -> int:
    """Count players the manager actually started who scored exactly zero."""
    return sum(1 for p in performances if p.lineup_slot_id not in NON_SCORING_SLOT_IDS and p.points == 0.0)


def _by_points(performances: Sequence[PlayerPerformance]) -> list[PlayerPerformance]:
    return sorted(performances, key=lambda p: (-p.points, p.player_id))


def optimize(
    performances: Sequence[PlayerPerformance],
    slots: PrioritizedSlots,
    actual_total: float,
) -> TeamWeekResult:
    ranked = _by_points(performances)
    drafted: set[int] = set()
    optimal_points = 0.0

    for slot_count in slots:
        slot_id = slot_count.slot.id
        for _ in range(slot_count.count):
            pick = next((p for p in ranked if p.player_id not in drafted and slot_id in p.eligible_slots), None)
            if pick is None:
                logger.debug("No eligible player left for %s", slot_count.slot.name)
                continue
            if pick.points < 0:
                # An empty seat scores zero, which beats every remaining candidate.
                continue
            drafted.add(pick.player_id)
            optimal_points += pick.points

    return TeamWeekResult(
        actual_points=actual_total,
        optimal_points=optimal_points,
        zero_point_starters=count_zero_point_starters(performances),
    )


def optimize_exact(
    performances: Sequence[PlayerPerformance],
    slots: PrioritizedSlots,
    actual_total: float,
) -> TeamWeekResult:
    seats = [slot_count.slot.id for slot_count in slots for _ in range(slot_count.count)]
    ranked = _by_points(performances)
    optimal_points = 0.0

    if ranked and seats:
        weights = np.zeros((len(ranked), len(seats)))
        for row, perf in enumerate(ranked):
            for col, slot_id in enumerate(seats):
                if slot_id in perf.eligible_slots and perf.points > 0:
                    weights[row, col] = perf.points
        rows, cols = linear_sum_assignment(weights, maximize=True)
        optimal_points = float(weights[rows, cols].sum())

    return TeamWeekResult(
        actual_points=actual_total,
        optimal_points=optimal_points,
        zero_point_starters=count_zero_point_starters(performances),
    )


_OPTIMIZERS = {
    LineupMethod.GREEDY: optimize,
    LineupMethod.EXACT: optimize_exact,
}


def analyze_performance(
    performance: TeamWeekPerformance,
    slots: PrioritizedSlots,
    method: LineupMethod = LineupMethod.GREEDY,
    *,
    week: int | None = None,
) -> TeamWeekResult:
    """Score one team's week against its best possible lineup.

    Raises DataUnavailableError when the source did not include the team's
    roster for the scoring period.
    """
    if performance.roster is None:
        raise DataUnavailableError(performance.team_id, week)
    return _OPTIMIZERS[method](performance.roster, slots, performance.total_points)
