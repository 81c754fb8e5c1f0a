import logging

from bench_king.domain.bench import TeamWeekResult
from bench_king.domain.bench_report import RecordsReport, SeasonBenchReport, WeekBenchReport
from bench_king.domain.result import Err, Ok, Result, partition
from bench_king.domain.slots import PrioritizedSlots
from bench_king.exceptions import DataUnavailableError
from bench_king.services.lineup_optimizer import LineupMethod
from bench_king.services.matchup_records import compute_records, rank_records
from bench_king.services.slot_prioritizer import prioritize
from bench_king.services.standings import aggregate, bench_king, by_team, details_for_week, rank
from bench_king.sources import LeagueSource

logger = logging.getLogger(__name__)

type WeekOutcome = Result[dict[int, TeamWeekResult], DataUnavailableError]


class BenchReportService:
    def __init__(
        self,
        source: LeagueSource,
        *,
        method: LineupMethod = LineupMethod.GREEDY,
        skip_unavailable_weeks: bool = True,
    ) -> None:
        self._source = source
        self._method = method
        self._skip_unavailable_weeks = skip_unavailable_weeks

    def week_report(self, season: int, week: int) -> WeekBenchReport:
        slots = self._slots(season)
        results = details_for_week(self._source.week_matchups(season, week), slots, self._method)
        standings = rank(results)
        return WeekBenchReport(
            season=season,
            week=week,
            standings=standings,
            king=bench_king(standings),
            team_names=self._team_names(season),
        )

    def season_report(self, season: int, through_week: int) -> SeasonBenchReport:
        """Cumulative standings for weeks 1 through *through_week*.

        A week with a missing roster is skipped and listed in
        ``skipped_weeks`` when skipping is enabled; otherwise its
        DataUnavailableError is raised and nothing is reported.
        """
        slots = self._slots(season)
        outcomes: dict[int, WeekOutcome] = {}
        for week in range(1, through_week + 1):
            outcome = self._evaluate_week(season, week, slots)
            if isinstance(outcome, Err):
                if not self._skip_unavailable_weeks:
                    raise outcome.error
                logger.warning("Skipping week %d: %s", week, outcome.error)
            outcomes[week] = outcome
        per_week, failures = partition(outcomes)

        standings = rank(aggregate(by_team(per_week)))
        return SeasonBenchReport(
            season=season,
            through_week=through_week,
            standings=standings,
            king=bench_king(standings),
            weeks_counted=tuple(sorted(per_week)),
            skipped_weeks={week: str(error) for week, error in failures.items()},
            team_names=self._team_names(season),
        )

    def records_report(self, season: int) -> RecordsReport:
        teams = self._source.teams(season)
        records = compute_records(teams, self._source.season_matchups(season))
        return RecordsReport(
            season=season,
            standings=rank_records(records),
            team_names={team.id: team.name for team in teams},
        )

    def _evaluate_week(self, season: int, week: int, slots: PrioritizedSlots) -> WeekOutcome:
        logger.info("Evaluating season %d week %d", season, week)
        try:
            return Ok(details_for_week(self._source.week_matchups(season, week), slots, self._method))
        except DataUnavailableError as e:
            return Err(e)

    def _slots(self, season: int) -> PrioritizedSlots:
        return prioritize(self._source.roster_configuration(season))

    def _team_names(self, season: int) -> dict[int, str]:
        return {team.id: team.name for team in self._source.teams(season)}
