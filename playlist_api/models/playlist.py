"""ORM model for user playlists."""

from sqlalchemy import Column, Integer, String

from playlist_api.models.base import Base, JSONDocument


class Playlist(Base):
    """
    A named, tagged list of songs.

    songs holds embedded song objects as submitted; extra is a bounded map of
    additional attributes (limits enforced by the request schemas).
    """

    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    tags = Column(JSONDocument, nullable=False, default=list)
    songs = Column(JSONDocument, nullable=False, default=list)
    owner = Column(Integer, nullable=False, index=True)
    extra = Column(JSONDocument, nullable=False, default=dict)
