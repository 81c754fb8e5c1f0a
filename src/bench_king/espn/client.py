import json
import logging
from collections.abc import Callable, Sequence
from typing import Any

import httpx

from bench_king.espn._retry import default_http_retry
from bench_king.exceptions import BenchKingException

logger = logging.getLogger(__name__)

_BASE_URL = "https://lm-api-reads.fantasy.espn.com/apis/v3/games/ffl/"
_DEFAULT_RETRY = default_http_retry("espn_api")
_DENIED_STATUS = frozenset({401, 403})


class EspnApiError(BenchKingException):
    """Raised when ESPN rejects a request or returns an unexpected payload."""


class EspnFantasyClient:
    """Thin HTTP client for the ESPN fantasy football league endpoint.

    Private leagues need the ``SWID`` and ``espn_s2`` cookies from a logged-in
    browser session; public leagues work without them.
    """

    def __init__(
        self,
        league_id: int,
        *,
        swid: str | None = None,
        espn_s2: str | None = None,
        client: httpx.Client | None = None,
        retry: Callable[..., Callable[..., Any]] = _DEFAULT_RETRY,
    ) -> None:
        self._league_id = league_id
        self._client = client or httpx.Client(timeout=httpx.Timeout(30.0, connect=10.0))
        if swid and espn_s2:
            self._client.cookies.update({"SWID": swid, "espn_s2": espn_s2})
        self._get_with_retry = retry(self._do_get)

    @property
    def league_id(self) -> int:
        return self._league_id

    def get_league_settings(self, season: int) -> dict[str, Any]:
        return self._get_league(season, ["mSettings"])

    def get_teams(self, season: int) -> dict[str, Any]:
        return self._get_league(season, ["mTeam"])

    def get_schedule(self, season: int) -> dict[str, Any]:
        return self._get_league(season, ["mMatchupScore"])

    def get_boxscores(self, season: int, week: int) -> dict[str, Any]:
        """Matchups for one week with each side's roster for that scoring period."""
        fantasy_filter = {"schedule": {"filterMatchupPeriodIds": {"value": [week]}}}
        return self._get_league(
            season,
            ["mMatchupScore", "mBoxscore"],
            params={"scoringPeriodId": week},
            headers={"x-fantasy-filter": json.dumps(fantasy_filter)},
        )

    def close(self) -> None:
        self._client.close()

    def _get_league(
        self,
        season: int,
        views: Sequence[str],
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        url = f"{_BASE_URL}seasons/{season}/segments/0/leagues/{self._league_id}"
        query: list[tuple[str, Any]] = [("view", view) for view in views]
        query.extend((params or {}).items())
        logger.debug("GET %s views=%s", url, ",".join(views))
        return self._get_with_retry(url, query, headers or {})

    def _do_get(self, url: str, params: list[tuple[str, Any]], headers: dict[str, str]) -> dict[str, Any]:
        response = self._client.get(url, params=params, headers=headers)
        if response.status_code in _DENIED_STATUS:
            raise EspnApiError(
                f"ESPN denied access to league {self._league_id} ({response.status_code}); "
                "private leagues need the SWID and espn_s2 cookies"
            )
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise EspnApiError(f"Unexpected ESPN response for league {self._league_id}: {type(data).__name__}")
        return data
