"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import HTTPException, Request

from cyberaudit.config import Settings
from cyberaudit.store import audit_store


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def require_session(request: Request) -> str | None:
    """Placeholder login gate — only checks that someone has logged in."""
    settings = get_app_settings(request)
    if settings.require_login and not audit_store.is_logged_in:
        raise HTTPException(status_code=401, detail="Log in to access the audit workspace")
    return audit_store.user
