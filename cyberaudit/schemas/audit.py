"""Schemas for the NIST CSF compliance checklist."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from cyberaudit.catalog import AuditStatus
from cyberaudit.models import AuditItem


class AuditStatusUpdate(BaseModel):
    """Change of status for one checklist control.

    ``evidence`` omitted or null keeps the recorded evidence; an empty
    string clears it.
    """

    model_config = ConfigDict(extra="forbid")

    status: AuditStatus
    evidence: str | None = None


class AuditCategoryGroup(BaseModel):
    """Checklist items belonging to one CSF function."""

    category: str
    score: int
    items: list[AuditItem]


class AuditChecklistResponse(BaseModel):
    """The full checklist, grouped by CSF function in catalog order."""

    compliance_score: int
    categories: list[AuditCategoryGroup]
