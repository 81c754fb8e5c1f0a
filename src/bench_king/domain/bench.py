from dataclasses import dataclass


@dataclass(frozen=True)
class TeamWeekResult:
    actual_points: float = 0.0
    optimal_points: float = 0.0
    zero_point_starters: int = 0

    @property
    def suboptimal_points(self) -> float:
        return self.optimal_points - self.actual_points

    def __add__(self, other: "TeamWeekResult") -> "TeamWeekResult":
        if not isinstance(other, TeamWeekResult):
            return NotImplemented
        return TeamWeekResult(
            actual_points=self.actual_points + other.actual_points,
            optimal_points=self.optimal_points + other.optimal_points,
            zero_point_starters=self.zero_point_starters + other.zero_point_starters,
        )


@dataclass(frozen=True)
class Standing:
    team_id: int
    result: TeamWeekResult

    @property
    def sort_key(self) -> tuple[float, int]:
        """Most points left on the bench first, then lowest team id."""
        return (-self.result.suboptimal_points, self.team_id)


@dataclass(frozen=True)
class MatchupRecord:
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: float = 0.0
    points_against: float = 0.0

    def __add__(self, other: "MatchupRecord") -> "MatchupRecord":
        if not isinstance(other, MatchupRecord):
            return NotImplemented
        return MatchupRecord(
            wins=self.wins + other.wins,
            losses=self.losses + other.losses,
            ties=self.ties + other.ties,
            points_for=self.points_for + other.points_for,
            points_against=self.points_against + other.points_against,
        )
