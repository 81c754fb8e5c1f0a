from bench_king.domain.performance import Matchup, MatchupWinner, PlayerPerformance, TeamWeekPerformance
from bench_king.domain.slots import BENCH_SLOT_ID, SlotCount, slot_type

QB = 0
RB = 2
WR = 4
TE = 6
DST = 16
K = 17
BENCH = BENCH_SLOT_ID
IR = 21
FLEX = 23


def make_performance(
    player_id: int,
    points: float,
    eligible: tuple[int, ...] = (),
    *,
    lineup_slot: int = BENCH,
    name: str = "",
) -> PlayerPerformance:
    """Build a player line; the player is always bench-eligible like on ESPN."""
    return PlayerPerformance(
        player_id=player_id,
        points=points,
        eligible_slots=frozenset((*eligible, BENCH)),
        lineup_slot_id=lineup_slot,
        name=name or f"Player {player_id}",
    )


def make_slots(*pairs: tuple[int, int]) -> tuple[SlotCount, ...]:
    """Prioritized slots in exactly the given order."""
    return tuple(SlotCount(slot=slot_type(slot_id), count=count) for slot_id, count in pairs)


def make_team_week(
    team_id: int,
    total_points: float,
    roster: tuple[PlayerPerformance, ...] | None = (),
) -> TeamWeekPerformance:
    return TeamWeekPerformance(team_id=team_id, total_points=total_points, roster=roster)


def make_matchup(
    week: int,
    away: TeamWeekPerformance | None,
    home: TeamWeekPerformance | None,
    winner: MatchupWinner = MatchupWinner.UNDECIDED,
) -> Matchup:
    return Matchup(week=week, away=away, home=home, winner=winner)
