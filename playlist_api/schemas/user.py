"""Pydantic schemas for users, sign-up and profile updates."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from playlist_api.schemas.common import reject_null

NAME_PART_MAX_LENGTH = 100
PHOTO_PATH_MAX_LENGTH = 2048
FAVORITE_PLAYLISTS_MAX = 500


class Name(BaseModel):
    """Person name embedded in the user document."""

    first: str = Field(..., min_length=1, max_length=NAME_PART_MAX_LENGTH)
    middle: str | None = Field(default=None, max_length=NAME_PART_MAX_LENGTH)
    last: str | None = Field(default=None, max_length=NAME_PART_MAX_LENGTH)


class UserCreate(BaseModel):
    """
    Profile fields accepted at sign-up.

    Unknown fields (including role) are ignored; the endpoint decides the role.
    """

    name: Name
    email: str = Field(..., min_length=1, max_length=320)
    age: int = Field(..., ge=0, le=150)
    photo_path: str = Field(default="", max_length=PHOTO_PATH_MAX_LENGTH)


class UserCredentialsIn(BaseModel):
    password: str = Field(..., description="Plain-text password (8-128 characters)")


class UserSignUpRequest(BaseModel):
    """Request body for POST /users/sign-up and /users/sign-up/admin."""

    user: UserCreate
    user_credentials: UserCredentialsIn


class UserUpdate(BaseModel):
    """Partial self-service update; role and counters are not client-writable."""

    name: Name | None = None
    email: str | None = Field(default=None, min_length=1, max_length=320)
    age: int | None = Field(default=None, ge=0, le=150)
    photo_path: str | None = Field(default=None, max_length=PHOTO_PATH_MAX_LENGTH)
    favorite_playlists: list[dict[str, Any]] | None = Field(
        default=None, max_length=FAVORITE_PLAYLISTS_MAX
    )

    @field_validator("name", "email", "age", "photo_path", "favorite_playlists")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        return reject_null(v)


class UserAdminUpdate(UserUpdate):
    """Partial update by an admin; may also change the role."""

    role: Literal["user", "admin"] | None = None

    @field_validator("role")
    @classmethod
    def role_not_null(cls, v: str | None) -> str:
        return reject_null(v)


class UserResponse(BaseModel):
    """User profile as returned by the API (no credentials)."""

    id: int
    name: Name
    email: str
    age: int
    role: str
    photo_path: str
    number_of_songs_submitted: int
    number_of_playlists_created: int
    favorite_playlists: list[dict[str, Any]]

    class Config:
        from_attributes = True
