"""
Export Service
CSV and JSON exports of audit data
"""

import csv
import io
from datetime import datetime
from typing import Optional, Sequence

from geo_visibility.schemas import (
    AuditResult,
    BrandIdentity,
    DashboardSummary,
    FullReport,
)
from geo_visibility.services.citation_service import summarize_citations, summarize_sources_by_domain
from geo_visibility.services.cost_service import build_cost_breakdown
from geo_visibility.services.dashboard_service import DashboardService
from geo_visibility.services.recommendation_service import generate_insights

CSV_COLUMNS = [
    "prompt",
    "category",
    "share_of_voice",
    "visibility_score",
    "trust_index",
    "average_rank",
    "visible_in",
    "total_models",
    "citations",
    "cost",
    "created_at",
]


def audit_results_to_csv(results: Sequence[AuditResult]) -> str:
    """One row per prompt run, summary metrics only"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_COLUMNS)

    for audit in results:
        s = audit.summary
        writer.writerow([
            audit.prompt_text,
            audit.prompt_category.value,
            s.share_of_voice,
            s.visibility_score,
            s.trust_index,
            "" if s.average_rank is None else s.average_rank,
            s.visible_in,
            s.total_models_checked,
            s.total_citations,
            f"{s.total_cost:.4f}",
            audit.created_at.isoformat() if audit.created_at else "",
        ])

    return buffer.getvalue()


def build_full_report(
    results: Sequence[AuditResult],
    brand: Optional[BrandIdentity] = None,
    summary: Optional[DashboardSummary] = None,
    generated_at: Optional[datetime] = None,
) -> FullReport:
    """Collect the dashboard, insights, costs and citations into one report"""
    summary = summary or DashboardService().build_summary(results)
    return FullReport(
        brand=brand,
        generated_at=generated_at,
        summary=summary,
        insights=generate_insights(summary, brand),
        costs=build_cost_breakdown(results),
        citations=summarize_citations(results),
        sources=summarize_sources_by_domain(results),
        audit_results=list(results),
    )


def full_report_json(
    results: Sequence[AuditResult],
    brand: Optional[BrandIdentity] = None,
    generated_at: Optional[datetime] = None,
    indent: Optional[int] = 2,
) -> str:
    return build_full_report(results, brand, generated_at=generated_at).model_dump_json(indent=indent)
