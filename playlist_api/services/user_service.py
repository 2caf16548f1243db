"""User sign-up, credential verification and profile maintenance."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from playlist_api.core.exceptions import Conflict, NotFound, Unauthorized
from playlist_api.core.security import (
    ROLES,
    PasswordHasher,
    validate_credentials,
    validate_email_format,
)
from playlist_api.models import User, UserCredentials
from playlist_api.schemas.auth import SecurityProfile
from playlist_api.schemas.user import UserCreate

logger = logging.getLogger(__name__)

# Same message for unknown email, missing credential and wrong password.
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."
EMAIL_TAKEN_MESSAGE = "Email value is already taken"


def _is_duplicate_email(error: IntegrityError) -> bool:
    """True if the integrity error is the unique-email violation (PostgreSQL or SQLite wording)."""
    msg = str(error.orig).lower()
    return "email" in msg and ("duplicate" in msg or "unique" in msg)


class UserAuthService:
    """
    Authentication and user persistence on top of one DB session.

    The hasher is passed in so callers (and tests) control the bcrypt cost.
    """

    def __init__(self, db: Session, hasher: PasswordHasher):
        self.db = db
        self.hasher = hasher

    def verify_credentials(self, email: str, password: str) -> User:
        """
        Return the user whose email and password match.
        Raises Unauthorized with one generic message for every failure.
        """
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            logger.warning("Login failed: unknown account")
            raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)

        credentials = (
            self.db.query(UserCredentials)
            .filter(UserCredentials.user_id == user.id)
            .first()
        )
        if credentials is None:
            logger.warning("Login failed: user_id=%s has no stored credential", user.id)
            raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)

        if not self.hasher.compare_password(password, credentials.password):
            logger.warning("Login failed: wrong password for user_id=%s", user.id)
            raise Unauthorized(INVALID_CREDENTIALS_MESSAGE)

        return user

    @staticmethod
    def convert_to_user_profile(user: User) -> SecurityProfile:
        return SecurityProfile(id=user.id, role=user.role)

    def sign_up(self, data: UserCreate, password: str, role: str) -> User:
        """
        Create a user and its stored credential in a single commit.

        role comes from the endpoint, never from the request body. Raises
        InvalidCredentialsFormat before any write, Conflict on duplicate email;
        other database errors propagate after rollback.
        """
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role!r}")
        validate_credentials(data.email, password)
        password_hash = self.hasher.hash_password(password)

        user = User(
            name=data.name.model_dump(),
            email=data.email,
            age=data.age,
            photo_path=data.photo_path,
            role=role,
            number_of_songs_submitted=0,
            number_of_playlists_created=0,
            favorite_playlists=[],
        )
        user.credentials = UserCredentials(password=password_hash)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        logger.info("Signed up user_id=%s role=%s", user.id, user.role)
        return user

    def get_user(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def list_users(
        self, role: str | None = None, limit: int = 20, offset: int = 0
    ) -> list[User]:
        query = self.db.query(User)
        if role is not None:
            query = query.filter(User.role == role)
        return query.order_by(User.id).offset(offset).limit(limit).all()

    def update_user(self, user_id: int, changes: dict[str, Any]) -> User:
        """Apply a partial update. Email changes are format-checked and must stay unique."""
        user = self.get_user(user_id)
        if "email" in changes:
            validate_email_format(changes["email"])
        for field, value in changes.items():
            setattr(user, field, value)
        self._commit()
        self.db.refresh(user)
        return user

    def delete_user(self, user_id: int) -> None:
        """Delete the user; the stored credential goes with it."""
        user = self.get_user(user_id)
        self.db.delete(user)
        self.db.commit()
        logger.info("Deleted user_id=%s", user_id)

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if _is_duplicate_email(e):
                logger.warning("Rejected write: email already taken")
                raise Conflict(EMAIL_TAKEN_MESSAGE) from e
            raise
