"""Domain exceptions raised by services and mapped to HTTP responses in league.main."""

from fastapi import status


class LeagueError(Exception):
    """Base for errors that carry a client-facing message and an HTTP classification."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class ValidationError(LeagueError):
    """A required field is missing or empty, or a value conflicts with stored data."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(LeagueError):
    """
    Credential lookup or verification failed.

    The message never distinguishes an unknown username from a wrong password.
    """

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message)


class NotFoundError(LeagueError):
    """The addressed record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class DependencyError(LeagueError):
    """The database could not be reached or rejected the statement. Not retried."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
