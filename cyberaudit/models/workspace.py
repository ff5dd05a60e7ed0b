"""Workspace snapshot — a read-only view of the whole session state."""

from __future__ import annotations

from cyberaudit.models.asset import Asset
from cyberaudit.models.audit import AuditItem
from cyberaudit.models.base import Record
from cyberaudit.models.organisation import Organisation
from cyberaudit.models.vulnerability import Vulnerability


class WorkspaceSnapshot(Record):
    """Everything the scoring engine and report builder read."""

    organisation: Organisation
    assets: tuple[Asset, ...] = ()
    vulnerabilities: tuple[Vulnerability, ...] = ()
    audit_items: tuple[AuditItem, ...] = ()
    user: str | None = None
