"""Playlists: public reads, authenticated writes with the owner stamped from the token."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from playlist_api.api.dependencies import CurrentProfile
from playlist_api.core.database import get_db
from playlist_api.models import Playlist
from playlist_api.schemas.common import CountResponse
from playlist_api.schemas.playlist import (
    PlaylistCreate,
    PlaylistResponse,
    PlaylistUpdate,
)
from playlist_api.services import content

router = APIRouter()


def _filters(
    name: Annotated[str | None, Query(max_length=255)] = None,
    owner: int | None = None,
) -> dict[str, object]:
    return {"name": name, "owner": owner}


Filters = Annotated[dict[str, object], Depends(_filters)]


@router.post("", response_model=PlaylistResponse)
def create_playlist(
    body: PlaylistCreate,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> PlaylistResponse:
    """Create a playlist owned by the caller; any owner in the body is overwritten."""
    playlist = content.create_entity(
        db, Playlist, body.model_dump(), profile, counter="number_of_playlists_created"
    )
    return PlaylistResponse.model_validate(playlist)


@router.get("/count", response_model=CountResponse)
def count_playlists(
    filters: Filters,
    db: Annotated[Session, Depends(get_db)],
) -> CountResponse:
    return CountResponse(count=content.count_entities(db, Playlist, filters))


@router.get("", response_model=list[PlaylistResponse])
def list_playlists(
    filters: Filters,
    db: Annotated[Session, Depends(get_db)],
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[PlaylistResponse]:
    playlists = content.list_entities(db, Playlist, filters, limit=limit, offset=offset)
    return [PlaylistResponse.model_validate(p) for p in playlists]


@router.get("/{playlist_id}", response_model=PlaylistResponse)
def get_playlist(
    playlist_id: int, db: Annotated[Session, Depends(get_db)]
) -> PlaylistResponse:
    return PlaylistResponse.model_validate(content.get_or_404(db, Playlist, playlist_id))


@router.patch("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_playlist(
    playlist_id: int,
    body: PlaylistUpdate,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Partially update a playlist (owner or admin); owner is re-stamped to the caller."""
    changes = body.model_dump(exclude_unset=True)
    content.update_entity(db, Playlist, playlist_id, changes, profile)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
def replace_playlist(
    playlist_id: int,
    body: PlaylistCreate,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    content.update_entity(db, Playlist, playlist_id, body.model_dump(), profile)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{playlist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_playlist(
    playlist_id: int,
    profile: CurrentProfile,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    content.delete_entity(db, Playlist, playlist_id, profile)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
