"""In-memory workspace store for CyberAudit Pro.

Holds the single audit session: organisation profile, asset inventory,
vulnerability worksheet and checklist statuses. Nothing is persisted;
``reset()`` re-seeds the defaults exactly as a fresh process would.

Every mutation goes through a named operation that replaces the affected
collection with a new list, so a snapshot taken earlier is never changed
underneath its reader.
"""

from __future__ import annotations

import uuid
from typing import Any

import structlog

from cyberaudit.catalog import (
    NIST_CSF_CONTROLS,
    AssetType,
    AuditStatus,
    Criticality,
    get_control,
)
from cyberaudit.models import (
    Asset,
    AuditItem,
    AuditStatusRecord,
    Organisation,
    Vulnerability,
    WorkspaceSnapshot,
)

logger = structlog.get_logger()

DEFAULT_USER = "Admin User"

DEFAULT_ORGANISATION: dict[str, str] = {
    "name": "University Cyber Lab",
    "industry": "Education",
    "size": "100-500",
    "contact_email": "security@university.edu",
}

DEFAULT_ASSETS: tuple[dict[str, Any], ...] = (
    {"id": "1", "name": "Main Database Server", "type": AssetType.HARDWARE, "criticality": Criticality.CRITICAL},
    {"id": "2", "name": "Student Portal", "type": AssetType.SOFTWARE, "criticality": Criticality.HIGH},
    {"id": "3", "name": "Research Data", "type": AssetType.DATA, "criticality": Criticality.CRITICAL},
)

NEW_ASSET_NAME = "New Asset"
ID_LENGTH = 9


class UnknownControlError(KeyError):
    """Raised when a checklist update names a control outside the catalog."""


class AuditStore:
    """Single-session in-memory workspace."""

    def __init__(self) -> None:
        self.user: str | None = None
        self.organisation = Organisation(**DEFAULT_ORGANISATION)
        self.assets: list[Asset] = [Asset(**a) for a in DEFAULT_ASSETS]
        self.vulnerabilities: list[Vulnerability] = []
        self.audit_statuses: dict[str, AuditStatusRecord] = {
            control.id: AuditStatusRecord(control_id=control.id) for control in NIST_CSF_CONTROLS
        }
        self._issued_ids: set[str] = {a.id for a in self.assets}

    def reset(self) -> None:
        """Discard all session state and re-seed defaults."""
        self.__init__()

    # ─── Session gate ────────────────────────────────────────────────────

    def login(self, username: str | None = None) -> str:
        """Open the session. Credentials are not checked."""
        self.user = username or DEFAULT_USER
        logger.info("session_opened", user=self.user)
        return self.user

    def logout(self) -> None:
        logger.info("session_closed", user=self.user)
        self.user = None

    @property
    def is_logged_in(self) -> bool:
        return self.user is not None

    # ─── Organisation ────────────────────────────────────────────────────

    def update_organisation(self, **fields: Any) -> Organisation:
        """Apply profile field changes and return the new profile."""
        self.organisation = self.organisation.revise(**fields)
        logger.info("organisation_updated", fields=sorted(fields))
        return self.organisation

    # ─── Assets ──────────────────────────────────────────────────────────

    def _new_id(self) -> str:
        """Generate an id never issued before in this store."""
        while True:
            candidate = uuid.uuid4().hex[:ID_LENGTH]
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def get_asset(self, asset_id: str) -> Asset | None:
        return next((a for a in self.assets if a.id == asset_id), None)

    def add_asset(
        self,
        name: str = NEW_ASSET_NAME,
        type: AssetType = AssetType.HARDWARE,
        criticality: Criticality = Criticality.MEDIUM,
    ) -> Asset:
        """Append a new asset to the inventory."""
        asset = Asset(id=self._new_id(), name=name, type=type, criticality=criticality)
        self.assets = [*self.assets, asset]
        logger.info("asset_added", asset_id=asset.id)
        return asset

    def update_asset(self, asset_id: str, **fields: Any) -> Asset | None:
        """Replace an asset with an updated copy. Unknown ids are a no-op."""
        current = self.get_asset(asset_id)
        if current is None:
            return None

        fields.pop("id", None)
        updated = current.revise(**fields)
        self.assets = [updated if a.id == asset_id else a for a in self.assets]
        logger.info("asset_updated", asset_id=asset_id, fields=sorted(fields))
        return updated

    def remove_asset(self, asset_id: str) -> None:
        """Drop an asset from the inventory. Unknown ids are a no-op."""
        self.assets = [a for a in self.assets if a.id != asset_id]
        logger.info("asset_removed", asset_id=asset_id)

    # ─── Vulnerabilities ─────────────────────────────────────────────────

    def get_vulnerability(self, vuln_id: str) -> Vulnerability | None:
        return next((v for v in self.vulnerabilities if v.id == vuln_id), None)

    def add_vulnerability(self, **fields: Any) -> Vulnerability:
        """Append a vulnerability. Omitted fields take the worksheet defaults."""
        fields.pop("id", None)
        vuln = Vulnerability(id=self._new_id(), **fields)
        self.vulnerabilities = [*self.vulnerabilities, vuln]
        logger.info("vulnerability_added", vulnerability_id=vuln.id, risk_score=vuln.risk_score)
        return vuln

    def update_vulnerability(self, vuln_id: str, **fields: Any) -> Vulnerability | None:
        """Replace a vulnerability with an updated copy, recomputing its score.

        Unknown ids are a no-op and return None.
        """
        current = self.get_vulnerability(vuln_id)
        if current is None:
            return None

        fields.pop("id", None)
        fields.pop("risk_score", None)
        updated = current.revise(**fields)
        self.vulnerabilities = [updated if v.id == vuln_id else v for v in self.vulnerabilities]
        logger.info("vulnerability_updated", vulnerability_id=vuln_id, risk_score=updated.risk_score)
        return updated

    def remove_vulnerability(self, vuln_id: str) -> None:
        """Drop a vulnerability from the worksheet. Unknown ids are a no-op."""
        self.vulnerabilities = [v for v in self.vulnerabilities if v.id != vuln_id]
        logger.info("vulnerability_removed", vulnerability_id=vuln_id)

    # ─── Audit checklist ─────────────────────────────────────────────────

    def set_audit_status(
        self,
        control_id: str,
        status: AuditStatus,
        evidence: str | None = None,
    ) -> AuditItem:
        """Record a new status (and optionally evidence) for a catalog control.

        Evidence is left unchanged when not supplied. An empty string clears it.
        """
        control = get_control(control_id)
        if control is None:
            raise UnknownControlError(control_id)

        changes: dict[str, Any] = {"status": status}
        if evidence is not None:
            changes["evidence"] = evidence or None

        record = self.audit_statuses[control_id].revise(**changes)
        self.audit_statuses = {**self.audit_statuses, control_id: record}
        logger.info("audit_status_set", control_id=control_id, status=AuditStatus(status).value)
        return AuditItem.compose(control, record)

    def audit_items(self) -> list[AuditItem]:
        """The checklist in catalog order, each control joined with its status."""
        return [
            AuditItem.compose(control, self.audit_statuses[control.id])
            for control in NIST_CSF_CONTROLS
        ]

    # ─── Derived views ───────────────────────────────────────────────────

    def snapshot(self) -> WorkspaceSnapshot:
        """Freeze the current state for scoring and reporting."""
        return WorkspaceSnapshot(
            organisation=self.organisation,
            assets=tuple(self.assets),
            vulnerabilities=tuple(self.vulnerabilities),
            audit_items=tuple(self.audit_items()),
            user=self.user,
        )


# Global singleton — reset in tests
audit_store = AuditStore()
