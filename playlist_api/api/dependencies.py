"""
Providers for the auth collaborators and the bearer-token dependencies.

Routers receive the hasher, token service and user service through Depends;
tests swap them with app.dependency_overrides.
"""

import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from playlist_api.core.config import get_settings
from playlist_api.core.database import get_db
from playlist_api.core.exceptions import Forbidden, Unauthorized
from playlist_api.core.security import PasswordHasher, TokenService, authorize
from playlist_api.schemas.auth import SecurityProfile
from playlist_api.services.user_service import UserAuthService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)


@lru_cache
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        expires_minutes=settings.JWT_EXPIRE_MINUTES,
    )


def get_user_auth_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> UserAuthService:
    return UserAuthService(db, hasher)


def get_current_profile(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> SecurityProfile:
    """Dependency: require a valid Bearer JWT and return its {id, role}. Raises 401 otherwise."""
    if credentials is None:
        raise Unauthorized("Not authenticated")
    return tokens.verify(credentials.credentials)


def require_roles(*allowed_roles: str) -> Callable[..., SecurityProfile]:
    """Build a dependency that lets through only profiles whose role is in allowed_roles."""

    def _require(
        profile: Annotated[SecurityProfile, Depends(get_current_profile)],
    ) -> SecurityProfile:
        if not authorize(profile, allowed_roles):
            logger.warning(
                "Denied user_id=%s role=%s; requires one of %s",
                profile.id,
                profile.role,
                sorted(allowed_roles),
            )
            raise Forbidden("Insufficient role for this operation")
        return profile

    return _require


CurrentProfile = Annotated[SecurityProfile, Depends(get_current_profile)]
UserService = Annotated[UserAuthService, Depends(get_user_auth_service)]
