"""Schemas for organisation, asset and risk worksheet endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from cyberaudit.catalog import AssetType, Criticality


class OrganisationUpdate(BaseModel):
    """Partial update of the organisation profile."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    industry: str | None = None
    size: str | None = None
    contact_email: str | None = None


class AssetCreate(BaseModel):
    """New inventory entry. Every field is optional."""

    model_config = ConfigDict(extra="forbid")

    name: str = "New Asset"
    type: AssetType = AssetType.HARDWARE
    criticality: Criticality = Criticality.MEDIUM


class AssetUpdate(BaseModel):
    """Partial update of an asset."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    type: AssetType | None = None
    criticality: Criticality | None = None


class VulnerabilityCreate(BaseModel):
    """New worksheet row. The risk score is always derived, never accepted."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, description="One of the OWASP Top 10 categories")
    likelihood: int = Field(default=3, ge=1, le=5)
    impact: int = Field(default=3, ge=1, le=5)


class VulnerabilityUpdate(BaseModel):
    """Partial update of a worksheet row."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    likelihood: int | None = Field(default=None, ge=1, le=5)
    impact: int | None = Field(default=None, ge=1, le=5)


class VulnerabilityResponse(BaseModel):
    """A worksheet row with its derived score and display band."""

    id: str
    name: str
    likelihood: int
    impact: int
    risk_score: int
    severity: str


class OwaspCatalogResponse(BaseModel):
    """Selectable vulnerability categories."""

    categories: list[str]
