"""Domain errors raised by the tournament services.

Both kinds are terminal for the current operation. Services never catch them;
the transport layer decides how they are shown to the caller.
"""


class TournamentError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TournamentError):
    """Caller-supplied input violates a precondition."""


class NotFoundError(TournamentError):
    """A referenced entity identifier does not resolve."""
