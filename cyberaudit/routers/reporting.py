"""Dashboard and audit report endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from cyberaudit.config import Settings
from cyberaudit.dependencies import get_app_settings, require_session
from cyberaudit.schemas.reporting import (
    AuditReport,
    CategoryScore,
    DashboardResponse,
    ReportFinding,
    RiskChartPoint,
)
from cyberaudit.services.report_builder import build_report, render_markdown
from cyberaudit.services.scoring_engine import dashboard_metrics
from cyberaudit.store import audit_store

router = APIRouter(prefix="/api", tags=["reporting"], dependencies=[Depends(require_session)])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(settings: Settings = Depends(get_app_settings)) -> DashboardResponse:
    """Security posture overview derived from the current workspace."""
    metrics = dashboard_metrics(
        audit_store.snapshot(),
        exclude_not_applicable=settings.exclude_not_applicable,
    )

    return DashboardResponse(
        compliance_score=metrics["compliance_score"],
        active_risks=metrics["active_risks"],
        total_assets=metrics["total_assets"],
        audit_status=metrics["audit_status"],
        category_scores=[CategoryScore(name=name, score=score) for name, score in metrics["category_scores"]],
        risk_chart=[RiskChartPoint(**point) for point in metrics["risk_chart"]],
    )


def _current_report(settings: Settings) -> dict:
    return build_report(
        audit_store.snapshot(),
        top_n=settings.top_findings_count,
        exclude_not_applicable=settings.exclude_not_applicable,
    )


@router.get("/report", response_model=AuditReport)
async def get_report(settings: Settings = Depends(get_app_settings)) -> AuditReport:
    """Final security assessment summary."""
    report = _current_report(settings)
    return AuditReport(
        **{k: v for k, v in report.items() if k != "top_findings"},
        top_findings=[ReportFinding(**f) for f in report["top_findings"]],
    )


@router.get("/report/export", response_class=PlainTextResponse)
async def export_report(settings: Settings = Depends(get_app_settings)) -> PlainTextResponse:
    """Printable Markdown rendition of the report."""
    return PlainTextResponse(
        render_markdown(_current_report(settings)),
        media_type="text/markdown",
        headers={"Content-Disposition": 'inline; filename="security-audit-report.md"'},
    )
