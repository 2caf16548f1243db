"""Schemas and validators shared by the CRUD and health endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, Field


def reject_null(v: Any) -> Any:
    """
    After-validator for partial updates: a field may be omitted, but sending
    null for a column that cannot be empty is an error.
    """
    if v is None:
        raise ValueError("may be omitted but not set to null.")
    return v


class CountResponse(BaseModel):
    """Response for the /count endpoints."""

    count: int = Field(..., ge=0, description="Number of matching records")


class HealthResponse(BaseModel):
    """Service status; degraded when the database cannot be reached."""

    status: Literal["ok", "degraded"]
    environment: str
    database: Literal["connected", "disconnected"]
