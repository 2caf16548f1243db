"""Users: sign-up, login, self-service profile and admin-only management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from playlist_api.api.dependencies import (
    CurrentProfile,
    UserService,
    get_token_service,
    require_roles,
)
from playlist_api.core.security import ROLE_ADMIN, ROLE_USER, TokenService
from playlist_api.schemas.auth import LoginRequest, SecurityProfile, TokenResponse
from playlist_api.schemas.user import (
    UserAdminUpdate,
    UserResponse,
    UserSignUpRequest,
    UserUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()

AdminProfile = Annotated[SecurityProfile, Depends(require_roles(ROLE_ADMIN))]


@router.post("/sign-up", response_model=UserResponse)
def sign_up(body: UserSignUpRequest, users: UserService) -> UserResponse:
    """
    Register a regular user. Any role sent in the body is ignored.
    Returns 422 for a malformed email or short password, 409 if the email is taken.
    """
    user = users.sign_up(body.user, body.user_credentials.password, role=ROLE_USER)
    return UserResponse.model_validate(user)


@router.post("/sign-up/admin", response_model=UserResponse)
def sign_up_admin(
    body: UserSignUpRequest,
    users: UserService,
    _admin: AdminProfile,
) -> UserResponse:
    """Register an admin (admin only; bootstrap the first one with scripts.create_user)."""
    user = users.sign_up(body.user, body.user_credentials.password, role=ROLE_ADMIN)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    users: UserService,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = users.verify_credentials(body.email, body.password)
    profile = users.convert_to_user_profile(user)
    logger.info("Login succeeded for user_id=%s", profile.id)
    return TokenResponse(token=tokens.issue(profile))


@router.get("/me", response_model=UserResponse)
def get_me(profile: CurrentProfile, users: UserService) -> UserResponse:
    """Return the caller's own user record."""
    return UserResponse.model_validate(users.get_user(profile.id))


@router.patch("/me", status_code=status.HTTP_204_NO_CONTENT)
def update_me(body: UserUpdate, profile: CurrentProfile, users: UserService) -> Response:
    """Update the caller's own profile. Role and counters cannot be changed here."""
    users.update_user(profile.id, body.model_dump(exclude_unset=True))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_me(profile: CurrentProfile, users: UserService) -> Response:
    users.delete_user(profile.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[UserResponse])
def list_users(
    _profile: CurrentProfile,
    users: UserService,
    role: Annotated[str | None, Query(pattern="^(user|admin)$")] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[UserResponse]:
    """List users (any authenticated caller), optionally filtered by role."""
    return [
        UserResponse.model_validate(u)
        for u in users.list_users(role=role, limit=limit, offset=offset)
    ]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, _admin: AdminProfile, users: UserService) -> UserResponse:
    """Look up any user by id (admin only)."""
    return UserResponse.model_validate(users.get_user(user_id))


@router.patch("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user(
    user_id: int,
    body: UserAdminUpdate,
    _admin: AdminProfile,
    users: UserService,
) -> Response:
    """Partially update any user, including role (admin only)."""
    users.update_user(user_id, body.model_dump(exclude_unset=True))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, _admin: AdminProfile, users: UserService) -> Response:
    """Delete any user and their stored credential (admin only)."""
    users.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
