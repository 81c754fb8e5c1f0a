from dataclasses import dataclass, field

from bench_king.domain.bench import MatchupRecord, Standing


@dataclass(frozen=True)
class WeekBenchReport:
    season: int
    week: int
    standings: list[Standing]
    king: Standing
    team_names: dict[int, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SeasonBenchReport:
    season: int
    through_week: int
    standings: list[Standing]
    king: Standing
    weeks_counted: tuple[int, ...]
    skipped_weeks: dict[int, str] = field(default_factory=dict)
    team_names: dict[int, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RecordsReport:
    season: int
    standings: list[tuple[int, MatchupRecord]]
    team_names: dict[int, str] = field(default_factory=dict)
