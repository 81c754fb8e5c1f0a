from bench_king.domain.performance import Matchup, Team
from bench_king.domain.slots import RosterConfiguration


class FakeLeagueSource:
    """In-memory LeagueSource keyed by week."""

    def __init__(
        self,
        roster_configuration: RosterConfiguration,
        teams: list[Team] | None = None,
        weeks: dict[int, list[Matchup]] | None = None,
        schedule: list[Matchup] | None = None,
    ) -> None:
        self._roster_configuration = roster_configuration
        self._teams = teams or []
        self._weeks = weeks or {}
        self._schedule = schedule
        self.requested_weeks: list[int] = []

    def roster_configuration(self, season: int) -> RosterConfiguration:
        return dict(self._roster_configuration)

    def teams(self, season: int) -> list[Team]:
        return list(self._teams)

    def week_matchups(self, season: int, week: int) -> list[Matchup]:
        self.requested_weeks.append(week)
        return list(self._weeks.get(week, []))

    def season_matchups(self, season: int) -> list[Matchup]:
        if self._schedule is not None:
            return list(self._schedule)
        return [m for week in sorted(self._weeks) for m in self._weeks[week]]
