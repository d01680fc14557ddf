"""Pydantic models for session cookie requests."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CreateSessionRequest(BaseModel):
    """Request model for storing a session token in the cookie."""

    token: str = Field(
        ...,
        description="Opaque bearer token returned by a login call",
        min_length=1,
    )
