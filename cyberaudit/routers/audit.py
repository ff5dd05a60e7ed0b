"""NIST CSF compliance checklist endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from cyberaudit.catalog import CSF_CATEGORIES
from cyberaudit.config import Settings
from cyberaudit.dependencies import get_app_settings, require_session
from cyberaudit.models import AuditItem
from cyberaudit.schemas.audit import AuditCategoryGroup, AuditChecklistResponse, AuditStatusUpdate
from cyberaudit.services.scoring_engine import category_scores, compliance_score
from cyberaudit.store import UnknownControlError, audit_store

router = APIRouter(prefix="/api/audit", tags=["audit"], dependencies=[Depends(require_session)])


@router.get("", response_model=AuditChecklistResponse)
async def get_checklist(settings: Settings = Depends(get_app_settings)) -> AuditChecklistResponse:
    """The checklist grouped by CSF function, with per-function scores."""
    items = audit_store.audit_items()
    exclude_na = settings.exclude_not_applicable
    scores = dict(category_scores(items, CSF_CATEGORIES, exclude_not_applicable=exclude_na))

    groups = [
        AuditCategoryGroup(
            category=category.value,
            score=scores[category.value],
            items=[item for item in items if item.category == category],
        )
        for category in CSF_CATEGORIES
    ]

    return AuditChecklistResponse(
        compliance_score=compliance_score(items, exclude_not_applicable=exclude_na),
        categories=groups,
    )


@router.put("/{control_id}", response_model=AuditItem)
async def set_audit_status(control_id: str, request: AuditStatusUpdate) -> AuditItem:
    """Record the status of a control, optionally with an evidence reference."""
    try:
        return audit_store.set_audit_status(control_id, request.status, evidence=request.evidence)
    except UnknownControlError:
        raise HTTPException(status_code=404, detail=f"Control '{control_id}' is not in the NIST CSF catalog")
