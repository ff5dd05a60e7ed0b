"""Organisation profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cyberaudit.dependencies import require_session
from cyberaudit.models import Organisation
from cyberaudit.schemas.workspace import OrganisationUpdate
from cyberaudit.store import audit_store

router = APIRouter(prefix="/api/organisation", tags=["organisation"], dependencies=[Depends(require_session)])


@router.get("", response_model=Organisation)
async def get_organisation() -> Organisation:
    return audit_store.organisation


@router.put("", response_model=Organisation)
async def update_organisation(request: OrganisationUpdate) -> Organisation:
    """Edit one or more profile fields."""
    return audit_store.update_organisation(**request.model_dump(exclude_unset=True, exclude_none=True))
