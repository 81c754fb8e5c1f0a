from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class PlayerPerformance:
    player_id: int
    points: float
    eligible_slots: frozenset[int]
    lineup_slot_id: int
    name: str = ""


@dataclass(frozen=True)
class TeamWeekPerformance:
    team_id: int
    total_points: float
    roster: tuple[PlayerPerformance, ...] | None


class MatchupWinner(StrEnum):
    HOME = "HOME"
    AWAY = "AWAY"
    TIE = "TIE"
    UNDECIDED = "UNDECIDED"


@dataclass(frozen=True)
class Matchup:
    week: int
    away: TeamWeekPerformance | None
    home: TeamWeekPerformance | None
    winner: MatchupWinner = MatchupWinner.UNDECIDED

    @property
    def sides(self) -> tuple[TeamWeekPerformance, ...]:
        return tuple(side for side in (self.away, self.home) if side is not None)


@dataclass(frozen=True)
class Team:
    id: int
    name: str
    abbrev: str = ""
