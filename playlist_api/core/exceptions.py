"""
Domain errors raised by services and auth dependencies.

Each error carries the HTTP status it maps to; main.py registers a single
handler that renders any of them as {"detail": message}.
"""

from fastapi import status


class PlaylistApiError(Exception):
    """Base class for errors surfaced directly to the API caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentialsFormat(PlaylistApiError):
    """Email is not a valid address or password length is out of bounds."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Invalid email or password format."


class Unauthorized(PlaylistApiError):
    """Authentication failed. Messages stay generic (no account enumeration)."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class Forbidden(PlaylistApiError):
    """Authenticated, but not allowed to perform the operation."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied"


class Conflict(PlaylistApiError):
    """A unique field (email) is already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"


class NotFound(PlaylistApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
