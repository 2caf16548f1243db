"""Request/response schemas for login and the authenticated identity."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=320, description="Email address")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class TokenResponse(BaseModel):
    """JWT bearer token returned after successful login."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")


class SecurityProfile(BaseModel):
    """Reduced identity (id, role) derived from a verified user or token."""

    id: int
    role: str

    class Config:
        from_attributes = True
