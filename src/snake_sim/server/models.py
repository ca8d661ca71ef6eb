"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    grid_size: int = Field(default=20, ge=4, le=100)
    turn_mode: Literal["last_write", "buffered"] = "last_write"
    seed: int | None = None


class DirectionRequest(BaseModel):
    """Request body for POST /sessions/{session_id}/direction."""

    direction: str = Field(min_length=1, max_length=16)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    phase: str
    score: int
    high_score: int
    tick_interval_ms: int


class DirectionResponse(BaseModel):
    """Whether a submitted direction was accepted for the next tick."""

    accepted: bool


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
