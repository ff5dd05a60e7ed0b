"""Risk worksheet endpoints — OWASP Top 10 vulnerabilities rated by likelihood and impact."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import ValidationError

from cyberaudit.catalog import OWASP_TOP_10
from cyberaudit.dependencies import require_session
from cyberaudit.models import Vulnerability
from cyberaudit.schemas.workspace import (
    OwaspCatalogResponse,
    VulnerabilityCreate,
    VulnerabilityResponse,
    VulnerabilityUpdate,
)
from cyberaudit.store import audit_store

router = APIRouter(prefix="/api/risks", tags=["risks"], dependencies=[Depends(require_session)])


def _to_response(vuln: Vulnerability) -> VulnerabilityResponse:
    return VulnerabilityResponse(
        id=vuln.id,
        name=vuln.name,
        likelihood=vuln.likelihood,
        impact=vuln.impact,
        risk_score=vuln.risk_score,
        severity=vuln.severity,
    )


def _unprocessable(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=[{"loc": e["loc"], "msg": e["msg"], "type": e["type"]} for e in exc.errors()],
    )


@router.get("/catalog", response_model=OwaspCatalogResponse)
async def get_owasp_catalog() -> OwaspCatalogResponse:
    return OwaspCatalogResponse(categories=list(OWASP_TOP_10))


@router.get("", response_model=list[VulnerabilityResponse])
async def list_vulnerabilities() -> list[VulnerabilityResponse]:
    """All worksheet rows in insertion order."""
    return [_to_response(v) for v in audit_store.vulnerabilities]


@router.post("", response_model=VulnerabilityResponse, status_code=201)
async def add_vulnerability(request: VulnerabilityCreate | None = None) -> VulnerabilityResponse:
    """Add a worksheet row. An empty body creates the default A01 row scored 9."""
    if request is None:
        request = VulnerabilityCreate()
    try:
        vuln = audit_store.add_vulnerability(**request.model_dump(exclude_none=True))
    except ValidationError as exc:
        raise _unprocessable(exc) from exc
    return _to_response(vuln)


@router.put("/{vuln_id}", response_model=VulnerabilityResponse)
async def update_vulnerability(vuln_id: str, request: VulnerabilityUpdate) -> VulnerabilityResponse:
    """Change a row's category or ratings; the risk score follows."""
    try:
        updated = audit_store.update_vulnerability(
            vuln_id, **request.model_dump(exclude_unset=True, exclude_none=True)
        )
    except ValidationError as exc:
        raise _unprocessable(exc) from exc
    if updated is None:
        raise HTTPException(status_code=404, detail=f"Vulnerability '{vuln_id}' not found")
    return _to_response(updated)


@router.delete("/{vuln_id}", status_code=204)
async def remove_vulnerability(vuln_id: str) -> Response:
    """Remove a row. Removing an unknown id succeeds without effect."""
    audit_store.remove_vulnerability(vuln_id)
    return Response(status_code=204)
