"""
Dashboard Service
Cross-prompt rollup of stored audit results
"""

import logging
from typing import Dict, List, Optional, Sequence

from geo_visibility.config import Settings, get_settings
from geo_visibility.schemas import (
    AuditFilter,
    AuditResult,
    CategoryVisibility,
    CompetitorGap,
    CompetitorSummary,
    DashboardSummary,
    ModelVisibility,
)
from geo_visibility.services.audit_service import count_sources, summarize_competitors
from geo_visibility.utils import mean, percentage, round_half_up, round_rank

logger = logging.getLogger(__name__)


def filter_audit_results(
    results: Sequence[AuditResult],
    audit_filter: Optional[AuditFilter] = None,
) -> List[AuditResult]:
    """
    Apply dashboard filters to audit results.

    Date bounds are inclusive and compare the calendar date of created_at;
    results without a timestamp are excluded once a date bound is set.
    """
    if audit_filter is None:
        return list(results)

    filtered = []
    for result in results:
        if audit_filter.client_id and result.client_id != audit_filter.client_id:
            continue
        if audit_filter.category and result.prompt_category != audit_filter.category:
            continue

        sov = result.summary.share_of_voice
        if audit_filter.min_sov is not None and sov < audit_filter.min_sov:
            continue
        if audit_filter.max_sov is not None and sov > audit_filter.max_sov:
            continue

        if audit_filter.date_from or audit_filter.date_to:
            if result.created_at is None:
                continue
            run_date = result.created_at.date()
            if audit_filter.date_from and run_date < audit_filter.date_from:
                continue
            if audit_filter.date_to and run_date > audit_filter.date_to:
                continue

        filtered.append(result)
    return filtered


def calculate_competitor_gap(competitors: Sequence[CompetitorSummary]) -> List[CompetitorGap]:
    """
    Competitor mentions as a percentage of the most mentioned competitor.

    10 mentions vs a leader with 20 -> 50.
    """
    if not competitors:
        return []
    top = max(c.total_mentions for c in competitors)
    return [
        CompetitorGap(
            name=c.name,
            mentions=c.total_mentions,
            percentage=percentage(c.total_mentions, top),
        )
        for c in competitors
    ]


class DashboardService:
    """
    Folds audit results into dashboard metrics.

    Nothing is cached; every call recomputes from the results it is given.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _visibility_by_model(self, results: Sequence[AuditResult]) -> Dict[str, ModelVisibility]:
        stats: Dict[str, Dict] = {}
        for audit in results:
            for mr in audit.model_results:
                entry = stats.setdefault(mr.model, {"visible": 0, "total": 0, "cost": 0.0, "ranks": []})
                entry["total"] += 1
                entry["cost"] += mr.api_cost
                if mr.brand_mentioned:
                    entry["visible"] += 1
                if mr.brand_rank is not None:
                    entry["ranks"].append(mr.brand_rank)

        return {
            model_id: ModelVisibility(
                visible=data["visible"],
                total=data["total"],
                cost=round(data["cost"], 6),
                avg_rank=round_rank(mean(data["ranks"])),
            )
            for model_id, data in stats.items()
        }

    def _visibility_by_category(self, results: Sequence[AuditResult]) -> Dict[str, CategoryVisibility]:
        stats: Dict[str, Dict] = {}
        for audit in results:
            key = audit.prompt_category.value
            entry = stats.setdefault(key, {"prompts": 0, "visible": 0, "sov": [], "ranks": []})
            entry["prompts"] += 1
            entry["sov"].append(audit.summary.share_of_voice)
            if audit.summary.visible_in > 0:
                entry["visible"] += 1
            if audit.summary.average_rank is not None:
                entry["ranks"].append(audit.summary.average_rank)

        return {
            category: CategoryVisibility(
                prompts=data["prompts"],
                visible=data["visible"],
                sov=round_half_up(mean(data["sov"])),
                avg_rank=round_rank(mean(data["ranks"])),
            )
            for category, data in stats.items()
        }

    def build_summary(
        self,
        results: Sequence[AuditResult],
        audit_filter: Optional[AuditFilter] = None,
    ) -> DashboardSummary:
        """
        Build the dashboard summary.

        Args:
            results: Stored audit results, one per prompt run
            audit_filter: Optional client/category/SOV/date filter

        Returns:
            DashboardSummary; an empty selection gives zeros and None
        """
        results = filter_audit_results(results, audit_filter)
        if not results:
            return DashboardSummary()

        summaries = [r.summary for r in results]
        ranks = [s.average_rank for s in summaries if s.average_rank is not None]
        all_model_results = [mr for r in results for mr in r.model_results]
        top_competitors = summarize_competitors(all_model_results)

        summary = DashboardSummary(
            total_prompts=len(results),
            overall_sov=round_half_up(mean(s.share_of_voice for s in summaries)),
            visibility_score=round_half_up(mean(s.visibility_score for s in summaries)),
            trust_index=round_half_up(mean(s.trust_index for s in summaries)),
            average_rank=round_rank(mean(ranks)),
            total_citations=sum(s.total_citations for s in summaries),
            total_cost=round(sum(s.total_cost for s in summaries), 6),
            top_sources=count_sources(all_model_results),
            top_competitors=top_competitors,
            competitor_gap=calculate_competitor_gap(top_competitors),
            visibility_by_model=self._visibility_by_model(results),
            visibility_by_category=self._visibility_by_category(results),
        )

        logger.info(
            "Dashboard rollup: prompts=%d sov=%d visibility=%d trust=%d",
            summary.total_prompts, summary.overall_sov,
            summary.visibility_score, summary.trust_index,
        )
        return summary

    def top_sources_for_display(self, summary: DashboardSummary):
        """Source slice shown on the dashboard card"""
        return summary.display_sources(self.settings.TOP_SOURCES_DISPLAY_LIMIT)
