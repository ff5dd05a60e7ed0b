"""Schemas for health check endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class ComponentHealth(BaseModel):
    """Health status of a single in-process component."""

    component: str
    status: str
    latency_ms: float | None = None
    details: str | None = None


class HealthResponse(BaseModel):
    """Overall application health."""

    status: str
    app_name: str
    version: str
    environment: str
    components: list[ComponentHealth]
