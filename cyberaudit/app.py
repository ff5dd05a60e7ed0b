"""CyberAudit Pro — FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from cyberaudit.config import Settings, get_settings
from cyberaudit.middleware import (
    configure_cors,
    configure_rate_limiting,
    configure_request_logging,
    lifespan,
)
from cyberaudit.routers import assets, audit, health, organisation, reporting, risks, session


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Security audit workspace: asset inventory, risk scoring, NIST CSF checklist and reporting",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Store settings on app state
    app.state.settings = settings

    # Middleware
    configure_cors(app, settings)
    configure_rate_limiting(app, settings)
    configure_request_logging(app)

    # Routers
    app.include_router(health.router)
    app.include_router(session.router)
    app.include_router(organisation.router)
    app.include_router(assets.router)
    app.include_router(risks.router)
    app.include_router(audit.router)
    app.include_router(reporting.router)

    return app


# Default app instance for uvicorn
app = create_app()
