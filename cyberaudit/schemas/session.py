"""Schemas for the placeholder login gate."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login form. Nothing here is checked against a credential store."""

    username: str | None = Field(default=None, description="Display name; defaults to 'Admin User'")
    password: str | None = None


class SessionResponse(BaseModel):
    """Current state of the session gate."""

    logged_in: bool
    user: str | None = None
