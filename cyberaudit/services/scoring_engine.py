"""Scoring & Aggregation Engine — derives dashboard metrics from workspace records.

Every function here is pure: it reads the records it is given and returns a
new value. Nothing is cached, so callers always see metrics for the snapshot
they pass in.
"""

from __future__ import annotations

import math
from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Iterable, Sequence

from cyberaudit.catalog import CSF_CATEGORIES, AuditStatus, CsfCategory

if TYPE_CHECKING:
    from cyberaudit.models import AuditItem, Vulnerability, WorkspaceSnapshot


RATING_MIN = 1
RATING_MAX = 5

# Lower bound (inclusive) of each severity band, highest first
SEVERITY_BANDS: tuple[tuple[int, str], ...] = (
    (16, "Critical"),
    (9, "High"),
)
DEFAULT_SEVERITY = "Medium"

# Credit each status earns towards the compliance numerator
STATUS_CREDIT: dict[AuditStatus, Fraction] = {
    AuditStatus.COMPLIANT: Fraction(1),
    AuditStatus.PARTIALLY_COMPLIANT: Fraction(1, 2),
    AuditStatus.NON_COMPLIANT: Fraction(0),
    AuditStatus.NOT_APPLICABLE: Fraction(0),
}

CHART_LABEL_LENGTH = 10
AUDIT_STATUS_LABEL = "In Progress"


class ScoringError(ValueError):
    """Raised when a scoring input falls outside its allowed range."""


def round_half_up(value: float | Fraction) -> int:
    """Round to the nearest integer, with .5 always rounding up.

    ``round()`` uses banker's rounding (``round(12.5) == 12``); percentages
    here follow the conventional half-up rule instead. Pass a ``Fraction``
    when the halfway case must be exact.
    """
    return math.floor(value + Fraction(1, 2))


def _check_rating(label: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScoringError(f"{label} must be an integer, got {value!r}")
    if not RATING_MIN <= value <= RATING_MAX:
        raise ScoringError(f"{label} must be between {RATING_MIN} and {RATING_MAX}, got {value}")
    return value


def risk_score(likelihood: int, impact: int) -> int:
    """Return the qualitative risk score ``likelihood * impact``.

    Both ratings must be integers in [1, 5]; anything else raises
    ``ScoringError`` so an out-of-range score can never be stored.
    """
    return _check_rating("likelihood", likelihood) * _check_rating("impact", impact)


def severity_band(score: int) -> str:
    """Map a risk score to its display band: Critical, High or Medium."""
    for lower_bound, label in SEVERITY_BANDS:
        if score >= lower_bound:
            return label
    return DEFAULT_SEVERITY


def compliance_score(
    audit_items: Iterable[AuditItem],
    exclude_not_applicable: bool = False,
) -> int:
    """Calculate the compliance percentage for a set of audit items.

    Compliant items earn full credit and Partially Compliant items half
    credit. Non-Compliant and Not Applicable items earn nothing but still
    count towards the total, unless ``exclude_not_applicable`` drops Not
    Applicable items from the calculation entirely.

    Args:
        audit_items: Items carrying a ``status`` attribute.
        exclude_not_applicable: Leave Not Applicable items out of both the
            numerator and the denominator.

    Returns:
        Integer percentage in [0, 100]. An empty collection scores 0.
    """
    statuses = [AuditStatus(item.status) for item in audit_items]
    if exclude_not_applicable:
        statuses = [s for s in statuses if s is not AuditStatus.NOT_APPLICABLE]

    if not statuses:
        return 0

    # Fraction keeps halfway percentages such as 57.5 exact
    earned = sum((STATUS_CREDIT[s] for s in statuses), Fraction(0))
    return round_half_up(earned * 100 / len(statuses))


def category_scores(
    audit_items: Sequence[AuditItem],
    categories: Sequence[CsfCategory | str] = CSF_CATEGORIES,
    exclude_not_applicable: bool = False,
) -> list[tuple[str, int]]:
    """Score each category in the order given.

    Returns one ``(category, score)`` pair per requested category. A category
    with no matching items scores 0.
    """
    results = []
    for category in categories:
        name = _label(category)
        members = [item for item in audit_items if _label(item.category) == name]
        results.append((name, compliance_score(members, exclude_not_applicable=exclude_not_applicable)))
    return results


def _label(value: CsfCategory | str) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def top_risks(vulnerabilities: Sequence[Vulnerability], n: int) -> list[Vulnerability]:
    """Return the first ``n`` vulnerabilities in their current collection order.

    This is a positional prefix, not a ranking by risk score.
    """
    if n <= 0:
        return []
    return list(vulnerabilities[:n])


def risk_chart(vulnerabilities: Iterable[Vulnerability]) -> list[dict[str, Any]]:
    """Build the per-vulnerability bar chart rows shown on the dashboard."""
    return [
        {"name": f"{v.name[:CHART_LABEL_LENGTH]}...", "score": v.risk_score}
        for v in vulnerabilities
    ]


def dashboard_metrics(
    snapshot: WorkspaceSnapshot,
    exclude_not_applicable: bool = False,
) -> dict[str, Any]:
    """Derive every dashboard figure from a workspace snapshot."""
    items = list(snapshot.audit_items)
    return {
        "compliance_score": compliance_score(items, exclude_not_applicable=exclude_not_applicable),
        "active_risks": len(snapshot.vulnerabilities),
        "total_assets": len(snapshot.assets),
        "audit_status": AUDIT_STATUS_LABEL,
        "category_scores": category_scores(items, exclude_not_applicable=exclude_not_applicable),
        "risk_chart": risk_chart(snapshot.vulnerabilities),
    }
