"""Songs: public reads, authenticated writes with the owner stamped from the token."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from playlist_api.api.dependencies import CurrentProfile
from playlist_api.core.database import get_db
from playlist_api.models import Song
from playlist_api.schemas.common import CountResponse
from playlist_api.schemas.song import SongCreate, SongResponse, SongUpdate
from playlist_api.services import content

router = APIRouter()


def _filters(
    genre: Annotated[str | None, Query(max_length=64)] = None,
    album: Annotated[str | None, Query(max_length=255)] = None,
    owner: int | None = None,
) -> dict[str, object]:
    return {"genre": genre, "album": album, "owner": owner}


Filters = Annotated[dict[str, object], Depends(_filters)]


@router.post("", response_model=SongResponse)
def create_song(
    body: SongCreate,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> SongResponse:
    """Create a song owned by the caller; any owner in the body is overwritten."""
    song = content.create_entity(
        db, Song, body.model_dump(), profile, counter="number_of_songs_submitted"
    )
    return SongResponse.model_validate(song)


@router.get("/count", response_model=CountResponse)
def count_songs(
    filters: Filters,
    db: Annotated[Session, Depends(get_db)],
) -> CountResponse:
    return CountResponse(count=content.count_entities(db, Song, filters))


@router.get("", response_model=list[SongResponse])
def list_songs(
    filters: Filters,
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[SongResponse]:
    """List songs, optionally filtered by genre, album or owner."""
    songs = content.list_entities(db, Song, filters, limit=limit, offset=offset)
    return [SongResponse.model_validate(s) for s in songs]


@router.get("/{song_id}", response_model=SongResponse)
def get_song(song_id: int, db: Annotated[Session, Depends(get_db)]) -> SongResponse:
    return SongResponse.model_validate(content.get_or_404(db, Song, song_id))


@router.patch("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_song(
    song_id: int,
    body: SongUpdate,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Partially update a song (owner or admin); owner is re-stamped to the caller."""
    changes = body.model_dump(exclude_unset=True)
    content.update_entity(db, Song, song_id, changes, profile)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
def replace_song(
    song_id: int,
    body: SongCreate,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Replace every field of a song (owner or admin); owner is re-stamped to the caller."""
    content.update_entity(db, Song, song_id, body.model_dump(), profile)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_song(
    song_id: int,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    content.delete_entity(db, Song, song_id, profile)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
