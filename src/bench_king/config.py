import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from bench_king.exceptions import BenchKingException
from bench_king.services.lineup_optimizer import LineupMethod

_CONFIG_FILENAME = "bench_king.toml"


class BenchKingConfigError(BenchKingException):
    """Raised when bench king configuration is invalid or missing."""


@dataclass(frozen=True)
class EspnConfig:
    league_id: int
    swid: str | None = None
    espn_s2: str | None = None


@dataclass(frozen=True)
class ReportConfig:
    method: LineupMethod = LineupMethod.GREEDY
    skip_unavailable_weeks: bool = True


@dataclass(frozen=True)
class BenchKingConfig:
    espn: EspnConfig
    report: ReportConfig = ReportConfig()

    def with_strict_weeks(self) -> "BenchKingConfig":
        return replace(self, report=replace(self.report, skip_unavailable_weeks=False))


def _read_toml(config_dir: Path) -> dict[str, Any]:
    toml_path = config_dir / _CONFIG_FILENAME
    if not toml_path.exists():
        return {}
    with toml_path.open("rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise BenchKingConfigError(f"Invalid {_CONFIG_FILENAME}: {e}") from e


def _parse_league_id(raw: object, context: str) -> int:
    try:
        return int(str(raw))
    except ValueError:
        raise BenchKingConfigError(f"{context}: league id must be an integer, got {raw!r}")


def parse_report(raw: dict[str, Any]) -> ReportConfig:
    raw_method = raw.get("method", LineupMethod.GREEDY.value)
    try:
        method = LineupMethod(raw_method)
    except ValueError:
        raise BenchKingConfigError(f"[report]: invalid method '{raw_method}'")

    skip = raw.get("skip_unavailable_weeks", True)
    if not isinstance(skip, bool):
        raise BenchKingConfigError(f"[report]: skip_unavailable_weeks must be true or false, got {skip!r}")
    return ReportConfig(method=method, skip_unavailable_weeks=skip)


def load_config(
    config_dir: Path = Path("."),
    *,
    league_id: int | None = None,
    swid: str | None = None,
    espn_s2: str | None = None,
    method: LineupMethod | None = None,
) -> BenchKingConfig:
    """Load configuration from bench_king.toml, the environment, and explicit overrides.

    Priority (highest to lowest): explicit arguments > ESPN_LEAGUE_ID / SWID /
    ESPN_S2 environment variables > bench_king.toml. The file is optional; a
    league id must come from somewhere.
    """
    data = _read_toml(config_dir)
    espn_raw: dict[str, Any] = data.get("espn", {})

    raw_league: object = league_id
    context = "--league"
    if raw_league is None and "ESPN_LEAGUE_ID" in os.environ:
        raw_league, context = os.environ["ESPN_LEAGUE_ID"], "ESPN_LEAGUE_ID"
    if raw_league is None and "league_id" in espn_raw:
        raw_league, context = espn_raw["league_id"], f"[espn] in {_CONFIG_FILENAME}"
    if raw_league is None:
        raise BenchKingConfigError(
            f"No ESPN league configured. Pass --league, set ESPN_LEAGUE_ID, or add league_id to {_CONFIG_FILENAME}"
        )

    espn = EspnConfig(
        league_id=_parse_league_id(raw_league, context),
        swid=swid or os.environ.get("SWID") or espn_raw.get("swid"),
        espn_s2=espn_s2 or os.environ.get("ESPN_S2") or espn_raw.get("espn_s2"),
    )
    if bool(espn.swid) != bool(espn.espn_s2):
        raise BenchKingConfigError("SWID and ESPN_S2 must be provided together")

    report = parse_report(data.get("report", {}))
    if method is not None:
        report = replace(report, method=method)
    return BenchKingConfig(espn=espn, report=report)
