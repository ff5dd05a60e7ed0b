"""Workspace record models for CyberAudit Pro."""

from cyberaudit.models.base import Record
from cyberaudit.models.organisation import Organisation
from cyberaudit.models.asset import Asset
from cyberaudit.models.vulnerability import Vulnerability
from cyberaudit.models.audit import AuditItem, AuditStatusRecord
from cyberaudit.models.workspace import WorkspaceSnapshot

__all__ = [
    "Record",
    "Organisation",
    "Asset",
    "Vulnerability",
    "AuditItem",
    "AuditStatusRecord",
    "WorkspaceSnapshot",
]
