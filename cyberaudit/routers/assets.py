"""Asset inventory endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from cyberaudit.dependencies import require_session
from cyberaudit.models import Asset
from cyberaudit.schemas.workspace import AssetCreate, AssetUpdate
from cyberaudit.store import audit_store

router = APIRouter(prefix="/api/assets", tags=["assets"], dependencies=[Depends(require_session)])


@router.get("", response_model=list[Asset])
async def list_assets() -> list[Asset]:
    """All assets in insertion order."""
    return audit_store.assets


@router.post("", response_model=Asset, status_code=201)
async def add_asset(request: AssetCreate | None = None) -> Asset:
    """Add an asset. An empty body creates the default 'New Asset' entry."""
    if request is None:
        request = AssetCreate()
    return audit_store.add_asset(**request.model_dump())


@router.put("/{asset_id}", response_model=Asset)
async def update_asset(asset_id: str, request: AssetUpdate) -> Asset:
    updated = audit_store.update_asset(asset_id, **request.model_dump(exclude_unset=True, exclude_none=True))
    if updated is None:
        raise HTTPException(status_code=404, detail=f"Asset '{asset_id}' not found")
    return updated


@router.delete("/{asset_id}", status_code=204)
async def remove_asset(asset_id: str) -> Response:
    """Remove an asset. Removing an unknown id succeeds without effect."""
    audit_store.remove_asset(asset_id)
    return Response(status_code=204)
