"""Application middleware — rate limiting, CORS, logging, lifespan."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from limits import parse_many
from slowapi import Limiter
from slowapi.util import get_remote_address

from cyberaudit.config import Settings
from cyberaudit.store import audit_store

logger = structlog.get_logger()


def get_limiter(settings: Settings) -> Limiter:
    """Create a rate limiter instance."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
    )


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Add CORS middleware to the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-RateLimit-Remaining"],
    )


async def rate_limit_middleware(request: Request, call_next) -> Response:
    """Reject a request once its client has used up the default limit.

    Hits are counted in the limiter's storage per client address and path,
    before any routing happens.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return await call_next(request)

    client_ip = get_remote_address(request)
    path = request.url.path
    for item in request.app.state.rate_limits:
        if not limiter.limiter.hit(item, client_ip, path):
            logger.warning("rate_limit_exceeded", client_ip=client_ip, path=path, limit=str(item))
            return JSONResponse({"error": f"Rate limit exceeded: {item}"}, status_code=429)

    return await call_next(request)


def configure_rate_limiting(app: FastAPI, settings: Settings) -> None:
    """Add rate limiting to the application."""
    app.state.limiter = get_limiter(settings)
    app.state.rate_limits = parse_many(settings.rate_limit_default)
    app.middleware("http")(rate_limit_middleware)


async def logging_middleware(request: Request, call_next) -> Response:
    """Structured logging middleware — logs every request."""
    start_time = time.monotonic()
    response = await call_next(request)
    duration_ms = round((time.monotonic() - start_time) * 1000, 2)

    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
        client_ip=request.client.host if request.client else "unknown",
    )

    return response


def configure_request_logging(app: FastAPI) -> None:
    """Register the request logging middleware."""
    app.middleware("http")(logging_middleware)


def configure_structured_logging(settings: Settings) -> None:
    """Configure structlog for JSON or console output."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown handlers."""
    settings = app.state.settings
    configure_structured_logging(settings)

    logger.info(
        "application_starting",
        version=settings.app_version,
        environment=settings.environment,
        assets=len(audit_store.assets),
        controls=len(audit_store.audit_statuses),
    )

    yield

    logger.info("application_shutting_down")
