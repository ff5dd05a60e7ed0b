"""Asset model — an entry in the asset inventory."""

from __future__ import annotations

from cyberaudit.catalog import AssetType, Criticality
from cyberaudit.models.base import Record


class Asset(Record):
    """A hardware, software, data or personnel asset."""

    id: str
    name: str
    type: AssetType = AssetType.HARDWARE
    criticality: Criticality = Criticality.MEDIUM

    def __repr__(self) -> str:
        return f"<Asset {self.id} {self.name!r}>"
