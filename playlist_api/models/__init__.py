"""SQLAlchemy ORM models."""

from playlist_api.models.base import Base
from playlist_api.models.playlist import Playlist
from playlist_api.models.song import Song
from playlist_api.models.user import User, UserCredentials

__all__ = ["Base", "Playlist", "Song", "User", "UserCredentials"]
