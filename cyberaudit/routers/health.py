"""Health check endpoints for liveness and readiness probes."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request

from cyberaudit.catalog import CSF_CATEGORIES, NIST_CSF_CONTROLS, OWASP_TOP_10
from cyberaudit.schemas.health import ComponentHealth, HealthResponse
from cyberaudit.store import audit_store

router = APIRouter(tags=["health"])


def _check_component(name: str, check_fn) -> ComponentHealth:
    """Run a health check function and return a ComponentHealth result."""
    start = time.monotonic()
    try:
        check_fn()
        latency = (time.monotonic() - start) * 1000
        return ComponentHealth(
            component=name,
            status="healthy",
            latency_ms=round(latency, 2),
        )
    except Exception as exc:
        latency = (time.monotonic() - start) * 1000
        return ComponentHealth(
            component=name,
            status="unhealthy",
            latency_ms=round(latency, 2),
            details=str(exc)[:200],
        )


def _check_catalog() -> None:
    """Reference catalogs are complete."""
    if len(OWASP_TOP_10) != 10:
        raise RuntimeError(f"OWASP catalog has {len(OWASP_TOP_10)} entries, expected 10")
    missing = set(CSF_CATEGORIES) - {c.category for c in NIST_CSF_CONTROLS}
    if missing:
        raise RuntimeError(f"No controls for: {', '.join(sorted(m.value for m in missing))}")


def _check_store() -> None:
    """Every catalog control has a status record."""
    missing = [c.id for c in NIST_CSF_CONTROLS if c.id not in audit_store.audit_statuses]
    if missing:
        raise RuntimeError(f"Missing status records: {', '.join(missing)}")


def _build_response(request: Request, components: list[ComponentHealth], degraded: str) -> HealthResponse:
    settings = request.app.state.settings
    overall = "healthy" if all(c.status == "healthy" for c in components) else degraded
    return HealthResponse(
        status=overall,
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        components=components,
    )


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Basic health check — is the application running?"""
    return _build_response(request, [_check_component("app", lambda: None)], degraded="degraded")


@router.get("/health/ready", response_model=HealthResponse)
async def readiness_check(request: Request) -> HealthResponse:
    """Readiness check — catalogs loaded and the workspace seeded."""
    components = [
        _check_component("app", lambda: None),
        _check_component("catalog", _check_catalog),
        _check_component("store", _check_store),
    ]
    return _build_response(request, components, degraded="unhealthy")


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """Liveness probe — is the process alive?"""
    return {"status": "alive"}
