class BenchKingException(Exception):
    """Base class for errors raised by bench king."""


class DataUnavailableError(BenchKingException):
    """Raised when a team's roster for the scoring period is missing."""

    def __init__(self, team_id: int, week: int | None = None) -> None:
        self.team_id = team_id
        self.week = week
        where = f" for week {week}" if week is not None else ""
        super().__init__(f"No roster available for team {team_id}{where}")


class EmptyConfigurationError(BenchKingException):
    """Raised when a roster configuration has no scoring slots."""


class NoStandingsError(BenchKingException):
    """Raised when a bench king is requested from an empty ranking."""
