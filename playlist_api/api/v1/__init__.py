"""API v1 routes."""

from fastapi import APIRouter

from playlist_api.api.v1 import health, playlists, songs, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(songs.router, prefix="/songs", tags=["songs"])
router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
