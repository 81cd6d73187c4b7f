"""Application errors. Each carries the HTTP status it is surfaced with."""

from fastapi import status


class SunflixError(Exception):
    """Base class for errors that are reported to the client as {"error": message}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(SunflixError):
    """Malformed or incomplete request input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(SunflixError):
    """State precondition violated, e.g. duplicate email."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(SunflixError):
    """Credential or token verification failed. Messages stay generic."""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthzError(SunflixError):
    """Authenticated but not allowed."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(SunflixError):
    status_code = status.HTTP_404_NOT_FOUND
