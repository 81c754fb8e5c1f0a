from typing import Any

import pytest

from bench_king.domain.performance import MatchupWinner, PlayerPerformance, Team
from bench_king.domain.slots import slot_type
from bench_king.espn.client import EspnApiError
from bench_king.espn.league_source import EspnLeagueSource

_SETTINGS_RESPONSE = {
    "id": 123456,
    "settings": {
        "rosterSettings": {
            "lineupSlotCounts": {"0": 1, "2": 2, "4": 2, "6": 1, "16": 1, "17": 1, "20": 7, "21": 1, "23": 1, "7": 0}
        }
    },
}

_TEAMS_RESPONSE = {
    "teams": [
        {"id": 1, "abbrev": "GRNK", "name": "Gronk Smash"},
        {"id": 2, "abbrev": "OLD", "location": "Old", "nickname": "Timers"},
    ]
}


def _entry(player_id: int, slot: int, points: float, eligible: list[int], name: str) -> dict[str, Any]:
    return {
        "playerId": player_id,
        "lineupSlotId": slot,
        "playerPoolEntry": {
            "id": player_id,
            "appliedStatTotal": points,
            "player": {"id": player_id, "fullName": name, "eligibleSlots": eligible},
        },
    }


_BOXSCORE_RESPONSE = {
    "schedule": [
        {
            "id": 13,
            "matchupPeriodId": 2,
            "winner": "AWAY",
            "away": {
                "teamId": 1,
                "totalPoints": 101.5,
                "rosterForCurrentScoringPeriod": {
                    "entries": [
                        _entry(3139477, 0, 22.3, [0, 7, 20, 21], "Patrick Mahomes"),
                        _entry(4241457, 20, 14.0, [2, 3, 23, 7, 20, 21], "Najee Harris"),
                    ]
                },
            },
            "home": {
                "teamId": 2,
                "totalPoints": 88.0,
                "rosterForCurrentScoringPeriod": {"entries": []},
            },
        },
        {
            "id": 14,
            "matchupPeriodId": 2,
            "winner": "UNDECIDED",
            "home": {"teamId": 3, "totalPoints": 0.0},
        },
        {
            "id": 1,
            "matchupPeriodId": 1,
            "winner": "HOME",
            "away": {"teamId": 1, "totalPoints": 90.0},
            "home": {"teamId": 2, "totalPoints": 95.0},
        },
    ]
}


class FakeClient:
    def __init__(self, response: dict[str, Any]) -> None:
        self._response = response
        self.calls: list[tuple[str, tuple[int, ...]]] = []

    def get_league_settings(self, season: int) -> dict[str, Any]:
        self.calls.append(("settings", (season,)))
        return self._response

    def get_teams(self, season: int) -> dict[str, Any]:
        self.calls.append(("teams", (season,)))
        return self._response

    def get_schedule(self, season: int) -> dict[str, Any]:
        self.calls.append(("schedule", (season,)))
        return self._response

    def get_boxscores(self, season: int, week: int) -> dict[str, Any]:
        self.calls.append(("boxscores", (season, week)))
        return self._response


def _source(response: dict[str, Any]) -> tuple[EspnLeagueSource, FakeClient]:
    client = FakeClient(response)
    return EspnLeagueSource(client), client  # type: ignore[arg-type]


class TestRosterConfiguration:
    def test_parses_slot_counts(self) -> None:
        source, _ = _source(_SETTINGS_RESPONSE)
        config = source.roster_configuration(2024)
        assert config[slot_type(0)] == 1
        assert config[slot_type(2)] == 2
        assert config[slot_type(23)] == 1
        assert config[slot_type(20)] == 7
        assert config[slot_type(7)] == 0
        assert len(config) == 10

    def test_missing_settings_raises(self) -> None:
        source, _ = _source({"id": 123456})
        with pytest.raises(EspnApiError, match="settings"):
            source.roster_configuration(2024)


class TestTeams:
    def test_parses_names(self) -> None:
        source, _ = _source(_TEAMS_RESPONSE)
        assert source.teams(2024) == [
            Team(id=1, name="Gronk Smash", abbrev="GRNK"),
            Team(id=2, name="Old Timers", abbrev="OLD"),
        ]

    def test_no_teams(self) -> None:
        source, _ = _source({})
        assert source.teams(2024) == []


class TestWeekMatchups:
    def test_requests_boxscores_for_week(self) -> None:
        source, client = _source(_BOXSCORE_RESPONSE)
        source.week_matchups(2024, 2)
        assert client.calls == [("boxscores", (2024, 2))]

    def test_filters_to_week(self) -> None:
        source, _ = _source(_BOXSCORE_RESPONSE)
        matchups = source.week_matchups(2024, 2)
        assert [m.week for m in matchups] == [2, 2]

    def test_parses_sides_and_rosters(self) -> None:
        source, _ = _source(_BOXSCORE_RESPONSE)
        matchup = source.week_matchups(2024, 2)[0]
        assert matchup.winner is MatchupWinner.AWAY
        assert matchup.away is not None
        assert matchup.away.team_id == 1
        assert matchup.away.total_points == 101.5
        assert matchup.away.roster is not None
        assert matchup.away.roster[0] == PlayerPerformance(
            player_id=3139477,
            points=22.3,
            eligible_slots=frozenset({0, 7, 20, 21}),
            lineup_slot_id=0,
            name="Patrick Mahomes",
        )
        assert matchup.home is not None
        assert matchup.home.roster == ()

    def test_bye_and_missing_roster(self) -> None:
        source, _ = _source(_BOXSCORE_RESPONSE)
        bye = source.week_matchups(2024, 2)[1]
        assert bye.away is None
        assert bye.home is not None
        assert bye.home.roster is None
        assert bye.winner is MatchupWinner.UNDECIDED


class TestSeasonMatchups:
    def test_returns_every_week(self) -> None:
        source, client = _source(_BOXSCORE_RESPONSE)
        matchups = source.season_matchups(2024)
        assert client.calls == [("schedule", (2024,))]
        assert [m.week for m in matchups] == [2, 2, 1]
        assert matchups[2].winner is MatchupWinner.HOME

    def test_unknown_winner_treated_as_undecided(self) -> None:
        source, _ = _source({"schedule": [{"matchupPeriodId": 1, "winner": "SOMETHING", "home": {"teamId": 1}}]})
        assert source.season_matchups(2024)[0].winner is MatchupWinner.UNDECIDED
