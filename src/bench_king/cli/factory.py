import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from bench_king.config import BenchKingConfig
from bench_king.espn.client import EspnFantasyClient
from bench_king.espn.league_source import EspnLeagueSource
from bench_king.services.bench_report import BenchReportService
from bench_king.sources import LeagueSource

logger = logging.getLogger(__name__)

# Module-level DI factory for testing
_league_source_factory: Callable[[BenchKingConfig], LeagueSource] | None = None


def set_league_source_factory(factory: Callable[[BenchKingConfig], LeagueSource] | None) -> None:
    global _league_source_factory
    _league_source_factory = factory


@contextmanager
def build_report_service(config: BenchKingConfig) -> Iterator[BenchReportService]:
    """Yield a report service backed by ESPN, closing the HTTP client on exit."""
    if _league_source_factory is not None:
        source = _league_source_factory(config)
        yield BenchReportService(
            source,
            method=config.report.method,
            skip_unavailable_weeks=config.report.skip_unavailable_weeks,
        )
        return

    if config.espn.swid is None:
        logger.debug("No ESPN cookies configured; only public leagues will be readable")
    client = EspnFantasyClient(config.espn.league_id, swid=config.espn.swid, espn_s2=config.espn.espn_s2)
    try:
        yield BenchReportService(
            EspnLeagueSource(client),
            method=config.report.method,
            skip_unavailable_weeks=config.report.skip_unavailable_weeks,
        )
    finally:
        client.close()
