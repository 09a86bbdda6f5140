"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from neon_snake.engine import RunState


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions.

    Grid size is given either in tiles (``width``/``height``) or derived
    from a viewport in pixels (``viewport_width``/``viewport_height``).
    """

    width: int | None = Field(default=None, ge=4, le=500)
    height: int | None = Field(default=None, ge=4, le=500)
    viewport_width: float | None = Field(default=None, ge=0)
    viewport_height: float | None = Field(default=None, ge=0)
    tick_rate_ms: int | None = Field(default=None, ge=20, le=2000)
    seed: int | None = None


class ViewportRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/viewport."""

    width: int | None = Field(default=None, ge=4, le=500)
    height: int | None = Field(default=None, ge=4, le=500)
    viewport_width: float | None = Field(default=None, ge=0)
    viewport_height: float | None = Field(default=None, ge=0)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    state: RunState
    score: int
    best_score: int
    grid_width: int
    grid_height: int
    tick_rate_ms: int


class BestScoreResponse(BaseModel):
    best_score: int


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
