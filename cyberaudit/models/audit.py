"""Audit models — per-session control status and the merged checklist view."""

from __future__ import annotations

from cyberaudit.catalog import AuditStatus, ControlDefinition, CsfCategory
from cyberaudit.models.base import Record


class AuditStatusRecord(Record):
    """Mutable part of a checklist item, keyed by catalog control id."""

    control_id: str
    status: AuditStatus = AuditStatus.NON_COMPLIANT
    evidence: str | None = None


class AuditItem(Record):
    """A catalog control joined with its current status."""

    id: str
    category: CsfCategory
    requirement: str
    status: AuditStatus
    evidence: str | None = None

    @classmethod
    def compose(cls, control: ControlDefinition, record: AuditStatusRecord) -> "AuditItem":
        return cls(
            id=control.id,
            category=control.category,
            requirement=control.requirement,
            status=record.status,
            evidence=record.evidence,
        )
