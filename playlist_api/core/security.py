"""Credential validation, password hashing and JWT issue/verify for authentication."""

import base64
import hashlib
import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from email_validator import EmailNotValidError, validate_email

from playlist_api.core.exceptions import InvalidCredentialsFormat, Unauthorized
from playlist_api.schemas.auth import SecurityProfile

logger = logging.getLogger(__name__)

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES: frozenset[str] = frozenset({ROLE_USER, ROLE_ADMIN})

# Min/max lengths for password validation.
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


def validate_credentials(email: str, password: str) -> None:
    """
    Check email shape and password length before anything is hashed or stored.
    Raises InvalidCredentialsFormat; never touches the database.
    """
    validate_email_format(email)
    validate_password_format(password)


def validate_email_format(email: str) -> None:
    try:
        validate_email(email or "", check_deliverability=False)
    except EmailNotValidError as e:
        raise InvalidCredentialsFormat("Invalid email.") from e


def validate_password_format(password: str) -> None:
    if not password or len(password) < PASSWORD_MIN_LEN:
        raise InvalidCredentialsFormat(
            f"Password must be at least {PASSWORD_MIN_LEN} characters."
        )
    if len(password) > PASSWORD_MAX_LEN:
        raise InvalidCredentialsFormat(
            f"Password must be at most {PASSWORD_MAX_LEN} characters."
        )


class PasswordHasher:
    """
    bcrypt hashing with a configurable cost; each hash gets a fresh salt.

    bcrypt ignores input past 72 bytes, and a 128-character password can be up
    to 512 bytes of UTF-8. The password is first reduced to the base64 of its
    SHA-256 digest (44 ASCII bytes), so every byte of it reaches bcrypt.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    @staticmethod
    def _prehash(plain_password: str) -> bytes:
        return base64.b64encode(hashlib.sha256(plain_password.encode("utf-8")).digest())

    def hash_password(self, plain_password: str) -> str:
        pw_bytes = self._prehash(plain_password)
        return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")

    def compare_password(self, plain_password: str, hashed: str) -> bool:
        """Return True if the password matches; a malformed hash counts as a mismatch."""
        pw_bytes = self._prehash(plain_password)
        try:
            return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
        except (ValueError, TypeError):
            return False


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens carrying {id, role}."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_minutes: int = 60,
        clock: Callable[[], datetime] | None = None,
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes
        self._clock = clock or (lambda: datetime.now(UTC))

    def issue(self, profile: SecurityProfile) -> str:
        """Create a JWT with sub (user id), role, iat and exp."""
        now = self._clock()
        payload: dict[str, Any] = {
            "sub": str(profile.id),
            "role": profile.role,
            "iat": now,
            "exp": now + timedelta(minutes=self.expires_minutes),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> SecurityProfile:
        """
        Decode and validate the token and return its profile.
        Bad signature, malformed or expired tokens all raise the same Unauthorized.
        Expiry is checked against the service clock, the same one issue() uses.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={
                    "require": ["sub", "exp", "iat"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.PyJWTError as e:
            logger.warning("Rejected bearer token: %s", type(e).__name__)
            raise Unauthorized(INVALID_TOKEN_MESSAGE) from e

        try:
            expires_at = float(payload["exp"])
        except (TypeError, ValueError) as e:
            logger.warning("Rejected bearer token: non-numeric exp")
            raise Unauthorized(INVALID_TOKEN_MESSAGE) from e
        if expires_at <= self._clock().timestamp():
            logger.warning("Rejected bearer token: expired")
            raise Unauthorized(INVALID_TOKEN_MESSAGE)

        role = payload.get("role")
        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as e:
            logger.warning("Rejected bearer token: non-integer sub")
            raise Unauthorized(INVALID_TOKEN_MESSAGE) from e
        if role not in ROLES:
            logger.warning("Rejected bearer token: unknown role")
            raise Unauthorized(INVALID_TOKEN_MESSAGE)
        return SecurityProfile(id=user_id, role=role)


def authorize(profile: SecurityProfile, allowed_roles: Iterable[str]) -> bool:
    """Allow iff the profile's role is one of allowed_roles."""
    return profile.role in set(allowed_roles)
