"""Core app configuration, database and domain errors."""

from playlist_api.core.config import get_settings, settings
from playlist_api.core.database import get_db
from playlist_api.core.exceptions import (
    Conflict,
    Forbidden,
    InvalidCredentialsFormat,
    NotFound,
    PlaylistApiError,
    Unauthorized,
)

__all__ = [
    "Conflict",
    "Forbidden",
    "InvalidCredentialsFormat",
    "NotFound",
    "PlaylistApiError",
    "Unauthorized",
    "get_db",
    "get_settings",
    "settings",
]
