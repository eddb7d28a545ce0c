"""
Analysis & Aggregation Services
"""

from .scoring_engine import ScoringEngine, calculate_visibility_score, classify_authority, score_response
from .audit_service import AuditService
from .dashboard_service import DashboardService, filter_audit_results
from .citation_service import summarize_citations, summarize_sources_by_domain
from .cost_service import build_cost_breakdown
from .recommendation_service import InsightEngine, generate_insights
from .export_service import audit_results_to_csv, build_full_report, full_report_json
from .registry import (
    available_models,
    competitors_for_industry,
    get_model,
    prompts_for_industry,
    render_prompt_template,
)

__all__ = [
    "ScoringEngine",
    "calculate_visibility_score",
    "classify_authority",
    "score_response",
    "AuditService",
    "DashboardService",
    "filter_audit_results",
    "summarize_citations",
    "summarize_sources_by_domain",
    "build_cost_breakdown",
    "InsightEngine",
    "generate_insights",
    "audit_results_to_csv",
    "build_full_report",
    "full_report_json",
    "available_models",
    "competitors_for_industry",
    "get_model",
    "prompts_for_industry",
    "render_prompt_template",
]
