"""Pydantic schemas for operator endpoints."""

from pydantic import BaseModel


class PauseRequest(BaseModel):
    """Request model for toggling the pause gate."""
    paused: bool


class PauseStateResponse(BaseModel):
    """Response model for the pause gate state."""
    paused: bool
