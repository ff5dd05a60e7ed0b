"""Session endpoints — placeholder login gate and workspace reset."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cyberaudit.dependencies import require_session
from cyberaudit.schemas.session import LoginRequest, SessionResponse
from cyberaudit.store import audit_store

router = APIRouter(prefix="/api/session", tags=["session"])


def _session_state() -> SessionResponse:
    return SessionResponse(logged_in=audit_store.is_logged_in, user=audit_store.user)


@router.get("", response_model=SessionResponse)
async def get_session() -> SessionResponse:
    """Who, if anyone, is currently logged in."""
    return _session_state()


@router.post("/login", response_model=SessionResponse)
async def login(request: LoginRequest | None = None) -> SessionResponse:
    """Open the session. Any credentials are accepted."""
    username = request.username if request else None
    audit_store.login(username)
    return _session_state()


@router.post("/logout", response_model=SessionResponse)
async def logout() -> SessionResponse:
    audit_store.logout()
    return _session_state()


@router.post("/reset", response_model=SessionResponse, dependencies=[Depends(require_session)])
async def reset_workspace() -> SessionResponse:
    """Discard every change and re-seed the defaults, keeping the user logged in."""
    user = audit_store.user
    audit_store.reset()
    if user is not None:
        audit_store.login(user)
    return _session_state()
