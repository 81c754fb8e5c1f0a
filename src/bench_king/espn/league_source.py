import logging
from typing import Any

from bench_king.domain.performance import Matchup, MatchupWinner, PlayerPerformance, Team, TeamWeekPerformance
from bench_king.domain.slots import RosterConfiguration, slot_type
from bench_king.espn.client import EspnApiError, EspnFantasyClient

logger = logging.getLogger(__name__)


class EspnLeagueSource:
    """Maps ESPN league payloads onto roster configurations, teams and matchups."""

    def __init__(self, client: EspnFantasyClient) -> None:
        self._client = client

    def roster_configuration(self, season: int) -> RosterConfiguration:
        data = self._client.get_league_settings(season)
        return self._parse_roster_configuration(data)

    def teams(self, season: int) -> list[Team]:
        data = self._client.get_teams(season)
        return self._parse_teams(data)

    def week_matchups(self, season: int, week: int) -> list[Matchup]:
        data = self._client.get_boxscores(season, week)
        matchups = [m for m in self._parse_schedule(data) if m.week == week]
        logger.debug("Parsed %d matchups for season %d week %d", len(matchups), season, week)
        return matchups

    def season_matchups(self, season: int) -> list[Matchup]:
        data = self._client.get_schedule(season)
        return self._parse_schedule(data)

    @staticmethod
    def _parse_roster_configuration(data: dict[str, Any]) -> RosterConfiguration:
        try:
            counts = data["settings"]["rosterSettings"]["lineupSlotCounts"]
        except KeyError as e:
            raise EspnApiError(f"League settings missing {e}") from e
        return {slot_type(int(slot_id)): int(count) for slot_id, count in counts.items()}

    @staticmethod
    def _parse_teams(data: dict[str, Any]) -> list[Team]:
        teams: list[Team] = []
        for raw in data.get("teams", []):
            # Older seasons split the name into location + nickname.
            name = raw.get("name") or f"{raw.get('location', '')} {raw.get('nickname', '')}".strip()
            teams.append(Team(id=int(raw["id"]), name=name or f"Team {raw['id']}", abbrev=raw.get("abbrev", "")))
        return teams

    @classmethod
    def _parse_schedule(cls, data: dict[str, Any]) -> list[Matchup]:
        matchups: list[Matchup] = []
        for raw in data.get("schedule", []):
            try:
                winner = MatchupWinner(raw.get("winner", MatchupWinner.UNDECIDED))
            except ValueError:
                logger.warning("Unknown matchup winner %r, treating as undecided", raw.get("winner"))
                winner = MatchupWinner.UNDECIDED
            matchups.append(
                Matchup(
                    week=int(raw["matchupPeriodId"]),
                    away=cls._parse_side(raw.get("away")),
                    home=cls._parse_side(raw.get("home")),
                    winner=winner,
                )
            )
        return matchups

    @classmethod
    def _parse_side(cls, raw: dict[str, Any] | None) -> TeamWeekPerformance | None:
        if raw is None:
            return None
        roster_raw = raw.get("rosterForCurrentScoringPeriod")
        roster = None
        if roster_raw is not None:
            roster = tuple(cls._parse_entry(entry) for entry in roster_raw.get("entries", []))
        return TeamWeekPerformance(
            team_id=int(raw["teamId"]),
            total_points=float(raw.get("totalPoints", 0.0)),
            roster=roster,
        )

    @staticmethod
    def _parse_entry(entry: dict[str, Any]) -> PlayerPerformance:
        pool_entry = entry["playerPoolEntry"]
        player = pool_entry.get("player", {})
        return PlayerPerformance(
            player_id=int(entry["playerId"]),
            points=float(pool_entry.get("appliedStatTotal", 0.0)),
            eligible_slots=frozenset(int(s) for s in player.get("eligibleSlots", [])),
            lineup_slot_id=int(entry["lineupSlotId"]),
            name=player.get("fullName", ""),
        )
