"""Schemas for the dashboard and audit report endpoints."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field


class CategoryScore(BaseModel):
    """Compliance percentage for one CSF function."""

    name: str
    score: int = Field(..., ge=0, le=100)


class RiskChartPoint(BaseModel):
    """A bar in the 'Top Identified Risks' chart."""

    name: str
    score: int = Field(..., ge=1, le=25)


class DashboardResponse(BaseModel):
    """Derived security posture metrics."""

    compliance_score: int = Field(..., ge=0, le=100)
    active_risks: int
    total_assets: int
    audit_status: str
    category_scores: list[CategoryScore]
    risk_chart: list[RiskChartPoint]


class ReportFinding(BaseModel):
    """One entry in the report's 'Top Audit Findings' section."""

    rank: int
    id: str
    name: str
    risk_score: int
    severity: str


class AuditReport(BaseModel):
    """Summary report reflecting the workspace at export time."""

    title: str
    generated_on: date
    organisation_name: str
    industry: str
    compliance_score: int = Field(..., ge=0, le=100)
    identified_risks: int
    asset_count: int
    executive_summary: str
    top_findings: list[ReportFinding]
    no_findings_text: str | None = None
    lead_auditor: str
    footer: list[str]
