"""Pydantic schemas for playlists."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from playlist_api.schemas.common import reject_null

NAME_MAX_LENGTH = 255
TAG_MAX_LENGTH = 64
MAX_TAGS = 50
MAX_SONGS = 1000
# Bounds for the free-form attribute map.
EXTRA_MAX_KEYS = 32
EXTRA_KEY_MAX_LENGTH = 64


def _validate_tags(v: list[str] | None) -> list[str] | None:
    if v is None:
        return v
    for tag in v:
        if not tag.strip() or len(tag) > TAG_MAX_LENGTH:
            raise ValueError(f"tags must be non-empty strings of at most {TAG_MAX_LENGTH} chars.")
    return v


def _validate_extra(v: dict[str, Any] | None) -> dict[str, Any] | None:
    if v is None:
        return v
    if len(v) > EXTRA_MAX_KEYS:
        raise ValueError(f"extra may hold at most {EXTRA_MAX_KEYS} attributes.")
    for key in v:
        if not key.strip() or len(key) > EXTRA_KEY_MAX_LENGTH:
            raise ValueError(
                f"extra keys must be non-empty strings of at most {EXTRA_KEY_MAX_LENGTH} chars."
            )
    return v


class PlaylistCreate(BaseModel):
    """
    Playlist fields for create and full replace.

    owner may be sent but is always overwritten with the caller's id.
    """

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    tags: list[str] = Field(..., max_length=MAX_TAGS)
    songs: list[dict[str, Any]] = Field(..., max_length=MAX_SONGS)
    owner: int | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        return _validate_tags(v)

    @field_validator("extra")
    @classmethod
    def validate_extra(cls, v: dict[str, Any]) -> dict[str, Any]:
        return _validate_extra(v)


class PlaylistUpdate(BaseModel):
    """Partial playlist update."""

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    tags: list[str] | None = Field(default=None, max_length=MAX_TAGS)
    songs: list[dict[str, Any]] | None = Field(default=None, max_length=MAX_SONGS)
    owner: int | None = None
    extra: dict[str, Any] | None = None

    @field_validator("name", "tags", "songs", "extra")
    @classmethod
    def not_null(cls, v: Any) -> Any:
        return reject_null(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str] | None) -> list[str] | None:
        return _validate_tags(v)

    @field_validator("extra")
    @classmethod
    def validate_extra(cls, v: dict[str, Any] | None) -> dict[str, Any] | None:
        return _validate_extra(v)


class PlaylistResponse(BaseModel):
    id: int
    name: str
    tags: list[str]
    songs: list[dict[str, Any]]
    owner: int
    extra: dict[str, Any]

    class Config:
        from_attributes = True
