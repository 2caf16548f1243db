"""ORM model for songs submitted by users."""

from sqlalchemy import Column, Integer, String

from playlist_api.models.base import Base


class Song(Base):
    """A song entry; owner is the id of the user who last wrote it."""

    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    album = Column(String(255), nullable=False)
    genre = Column(String(64), nullable=False, index=True)
    youtube_link = Column(String(2048), nullable=True)
    spotify_link = Column(String(2048), nullable=True)
    owner = Column(Integer, nullable=False, index=True)
