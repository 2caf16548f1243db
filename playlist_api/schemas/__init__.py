"""Pydantic request/response schemas."""

from playlist_api.schemas.auth import LoginRequest, SecurityProfile, TokenResponse
from playlist_api.schemas.common import CountResponse, HealthResponse
from playlist_api.schemas.playlist import PlaylistCreate, PlaylistResponse, PlaylistUpdate
from playlist_api.schemas.song import SongCreate, SongResponse, SongUpdate
from playlist_api.schemas.user import (
    Name,
    UserAdminUpdate,
    UserCreate,
    UserResponse,
    UserSignUpRequest,
    UserUpdate,
)

__all__ = [
    "CountResponse",
    "HealthResponse",
    "LoginRequest",
    "Name",
    "PlaylistCreate",
    "PlaylistResponse",
    "PlaylistUpdate",
    "SecurityProfile",
    "SongCreate",
    "SongResponse",
    "SongUpdate",
    "TokenResponse",
    "UserAdminUpdate",
    "UserCreate",
    "UserResponse",
    "UserSignUpRequest",
    "UserUpdate",
]
