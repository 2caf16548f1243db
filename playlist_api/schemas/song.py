"""Pydantic schemas for songs."""

from pydantic import BaseModel, Field, field_validator

from playlist_api.schemas.common import reject_null

TITLE_MAX_LENGTH = 255
LINK_MAX_LENGTH = 2048


class SongCreate(BaseModel):
    """
    Song fields for create and full replace.

    owner may be sent but is always overwritten with the caller's id.
    """

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    album: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    genre: str = Field(..., min_length=1, max_length=64)
    youtube_link: str | None = Field(default=None, max_length=LINK_MAX_LENGTH)
    spotify_link: str | None = Field(default=None, max_length=LINK_MAX_LENGTH)
    owner: int | None = None


class SongUpdate(BaseModel):
    """Partial song update. Links may be cleared with null; title, album and genre may not."""

    title: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    album: str | None = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    genre: str | None = Field(default=None, min_length=1, max_length=64)
    youtube_link: str | None = Field(default=None, max_length=LINK_MAX_LENGTH)
    spotify_link: str | None = Field(default=None, max_length=LINK_MAX_LENGTH)
    owner: int | None = None

    @field_validator("title", "album", "genre")
    @classmethod
    def not_null(cls, v: str | None) -> str:
        return reject_null(v)


class SongResponse(BaseModel):
    id: int
    title: str
    album: str
    genre: str
    youtube_link: str | None = None
    spotify_link: str | None = None
    owner: int

    class Config:
        from_attributes = True
