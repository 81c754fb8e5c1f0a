from typing import Protocol

from bench_king.domain.performance import Matchup, Team
from bench_king.domain.slots import RosterConfiguration


class LeagueSource(Protocol):
    def roster_configuration(self, season: int) -> RosterConfiguration: ...

    def teams(self, season: int) -> list[Team]: ...

    def week_matchups(self, season: int, week: int) -> list[Matchup]: ...

    def season_matchups(self, season: int) -> list[Matchup]: ...
