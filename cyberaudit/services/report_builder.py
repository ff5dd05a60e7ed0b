"""Audit report — summary document derived from the current workspace."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from cyberaudit.models import WorkspaceSnapshot
from cyberaudit.services.scoring_engine import (
    compliance_score,
    severity_band,
    top_risks,
)

PRODUCT_LABEL = "CyberAudit Pro v1.0"
DISTRIBUTION_LABEL = "Internal Use Only"
DEFAULT_AUDITOR = "Admin User"
NO_FINDINGS_TEXT = "No significant findings reported."
FRAMEWORKS_TEXT = "the NIST Cybersecurity Framework and OWASP Top 10 standards"

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
REPORT_TEMPLATE = "audit_report.md.j2"


def build_executive_summary(org_name: str, score: int, risk_count: int) -> str:
    """Generate the plain English executive summary paragraph."""
    return (
        f"The security audit for {org_name} was conducted based on {FRAMEWORKS_TEXT}. "
        f"The organization currently maintains a compliance score of {score}%. "
        f"Key areas of concern include {risk_count} identified vulnerabilities "
        f"that require immediate remediation."
    )


def build_report(
    snapshot: WorkspaceSnapshot,
    top_n: int = 3,
    generated_on: date | None = None,
    exclude_not_applicable: bool = False,
) -> dict[str, Any]:
    """Assemble the audit report for a workspace snapshot.

    Args:
        snapshot: State at the moment of export.
        top_n: Number of findings to list, taken in worksheet order.
        generated_on: Report date; defaults to today.
        exclude_not_applicable: Compliance policy switch, see
            ``scoring_engine.compliance_score``.

    Returns:
        Dict matching the ``AuditReport`` response schema.
    """
    org = snapshot.organisation
    score = compliance_score(snapshot.audit_items, exclude_not_applicable=exclude_not_applicable)
    risk_count = len(snapshot.vulnerabilities)

    findings = [
        {
            "rank": rank,
            "id": v.id,
            "name": v.name,
            "risk_score": v.risk_score,
            "severity": severity_band(v.risk_score),
        }
        for rank, v in enumerate(top_risks(snapshot.vulnerabilities, top_n), start=1)
    ]

    return {
        "title": "Security Audit Report",
        "generated_on": generated_on or date.today(),
        "organisation_name": org.name,
        "industry": org.industry,
        "compliance_score": score,
        "identified_risks": risk_count,
        "asset_count": len(snapshot.assets),
        "executive_summary": build_executive_summary(org.name, score, risk_count),
        "top_findings": findings,
        "no_findings_text": None if findings else NO_FINDINGS_TEXT,
        "lead_auditor": snapshot.user or DEFAULT_AUDITOR,
        "footer": [PRODUCT_LABEL, DISTRIBUTION_LABEL],
    }


def render_markdown(report: dict[str, Any]) -> str:
    """Render a report dict as a printable Markdown document."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template(REPORT_TEMPLATE)
    return template.render(report=report, no_findings_text=NO_FINDINGS_TEXT)
