"""ORM models for application users and their stored credentials."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from playlist_api.models.base import Base, JSONDocument


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    name is an embedded document {first, middle, last}; role is 'admin' or 'user'.
    The password hash lives in UserCredentials and is never loaded into responses.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(JSONDocument, nullable=False)
    email = Column(String(320), nullable=False, unique=True, index=True)
    age = Column(Integer, nullable=False)
    role = Column(String(32), nullable=False, default="user")
    photo_path = Column(String(2048), nullable=False, default="")
    number_of_songs_submitted = Column(Integer, nullable=False, default=0)
    number_of_playlists_created = Column(Integer, nullable=False, default=0)
    favorite_playlists = Column(JSONDocument, nullable=False, default=list)

    credentials = relationship(
        "UserCredentials",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )


class UserCredentials(Base):
    """One-to-one password hash for a User; deleted together with the user."""

    __tablename__ = "user_credentials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    password = Column(String(255), nullable=False)

    user = relationship("User", back_populates="credentials")
