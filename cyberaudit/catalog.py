"""Fixed reference catalogs — OWASP Top 10, NIST CSF controls and value sets.

Everything here is immutable for the lifetime of the process. Session state
refers to catalog entries by id and never copies or edits them.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict


class AssetType(str, Enum):
    HARDWARE = "Hardware"
    SOFTWARE = "Software"
    DATA = "Data"
    PERSONNEL = "Personnel"


class Criticality(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class CsfCategory(str, Enum):
    IDENTIFY = "Identify"
    PROTECT = "Protect"
    DETECT = "Detect"
    RESPOND = "Respond"
    RECOVER = "Recover"


class AuditStatus(str, Enum):
    COMPLIANT = "Compliant"
    PARTIALLY_COMPLIANT = "Partially Compliant"
    NON_COMPLIANT = "Non-Compliant"
    NOT_APPLICABLE = "Not Applicable"


class ControlDefinition(BaseModel):
    """A single NIST CSF control as shipped in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str
    category: CsfCategory
    requirement: str


# Ordered selectable values for Vulnerability.name
OWASP_TOP_10: tuple[str, ...] = (
    "A01:2021-Broken Access Control",
    "A02:2021-Cryptographic Failures",
    "A03:2021-Injection",
    "A04:2021-Insecure Design",
    "A05:2021-Security Misconfiguration",
    "A06:2021-Vulnerable and Outdated Components",
    "A07:2021-Identification and Authentication Failures",
    "A08:2021-Software and Data Integrity Failures",
    "A09:2021-Security Logging and Monitoring Failures",
    "A10:2021-Server-Side Request Forgery",
)

# Display order for per-category scoring
CSF_CATEGORIES: tuple[CsfCategory, ...] = tuple(CsfCategory)

NIST_CSF_CONTROLS: tuple[ControlDefinition, ...] = (
    ControlDefinition(
        id="ID.AM-1",
        category=CsfCategory.IDENTIFY,
        requirement="Physical devices and systems within the organization are inventoried.",
    ),
    ControlDefinition(
        id="ID.RA-1",
        category=CsfCategory.IDENTIFY,
        requirement="Asset vulnerabilities are identified and documented.",
    ),
    ControlDefinition(
        id="PR.AC-1",
        category=CsfCategory.PROTECT,
        requirement="Identities and credentials are managed and protected.",
    ),
    ControlDefinition(
        id="PR.DS-1",
        category=CsfCategory.PROTECT,
        requirement="Data-at-rest is protected.",
    ),
    ControlDefinition(
        id="DE.AE-1",
        category=CsfCategory.DETECT,
        requirement="A baseline of network operations and expected data flows is established.",
    ),
    ControlDefinition(
        id="DE.CM-1",
        category=CsfCategory.DETECT,
        requirement="The network is monitored to detect potential cybersecurity events.",
    ),
    ControlDefinition(
        id="RS.RP-1",
        category=CsfCategory.RESPOND,
        requirement="Response processes and procedures are maintained and tested.",
    ),
    ControlDefinition(
        id="RS.CO-1",
        category=CsfCategory.RESPOND,
        requirement="Personnel know their roles and order of operations when a response is needed.",
    ),
    ControlDefinition(
        id="RC.RP-1",
        category=CsfCategory.RECOVER,
        requirement="Recovery planning and processes are improved based on lessons learned.",
    ),
    ControlDefinition(
        id="RC.CO-1",
        category=CsfCategory.RECOVER,
        requirement="Public relations are managed and reputation is repaired after an incident.",
    ),
)

CONTROLS_BY_ID: Mapping[str, ControlDefinition] = MappingProxyType({c.id: c for c in NIST_CSF_CONTROLS})


def get_control(control_id: str) -> ControlDefinition | None:
    """Look up a catalog control by its framework identifier."""
    return CONTROLS_BY_ID.get(control_id)
