"""
Insight & Recommendation Service
Evidence-based guidance derived from a dashboard summary
"""

import logging
from typing import List, Optional

from geo_visibility.adapters.parsing import normalize_domain
from geo_visibility.config import Settings, get_settings
from geo_visibility.models import InsightStatus
from geo_visibility.schemas import BrandIdentity, DashboardSummary, Insights

logger = logging.getLogger(__name__)

STATUS_TEXT = {
    InsightStatus.HIGH: "Strong AI visibility",
    InsightStatus.MEDIUM: "Moderate AI visibility",
    InsightStatus.LOW: "Low AI visibility",
}


class InsightEngine:
    """
    Generates the summary-tab insights.

    Each recommendation is backed by a number in the summary it was built
    from, similar to how GEO recommendations carry their evidence.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def determine_status(self, overall_sov: int) -> InsightStatus:
        if overall_sov >= self.settings.INSIGHT_HIGH_SOV:
            return InsightStatus.HIGH
        if overall_sov >= self.settings.INSIGHT_MEDIUM_SOV:
            return InsightStatus.MEDIUM
        return InsightStatus.LOW

    def _source_recommendations(
        self,
        summary: DashboardSummary,
        brand: Optional[BrandIdentity],
    ) -> List[str]:
        recommendations = []
        if summary.trust_index == 0 or (summary.total_citations > 0 and summary.trust_index < 20):
            recommendations.append(
                "AI engines rarely cite your own content. Publish authoritative pages "
                "(FAQs, comparisons, guides) that answer these prompts directly."
            )

        if summary.top_sources:
            top = summary.top_sources[0]
            brand_domain = normalize_domain(brand.domain) if brand else ""
            if not brand_domain or brand_domain not in top.domain:
                recommendations.append(
                    f"{top.domain} is the most cited source ({top.count} citations). "
                    f"Get listed or featured there."
                )
        return recommendations

    def _competitor_recommendations(self, summary: DashboardSummary) -> List[str]:
        if not summary.top_competitors:
            return []
        leader = summary.top_competitors[0]
        if leader.visibility_pct > summary.overall_sov:
            return [
                f"{leader.name} appears in {leader.visibility_pct}% of AI answers versus "
                f"your {summary.overall_sov}%. Study the content and sources that mention them."
            ]
        return []

    def _model_recommendations(self, summary: DashboardSummary) -> List[str]:
        invisible = [
            model_id
            for model_id, stats in summary.visibility_by_model.items()
            if stats.total > 0 and stats.visible == 0
        ]
        if not invisible:
            return []
        return [f"Your brand never appears on: {', '.join(invisible)}."]

    def generate_insights(
        self,
        summary: DashboardSummary,
        brand: Optional[BrandIdentity] = None,
    ) -> Insights:
        """
        Build status and recommendations for a dashboard summary.

        Args:
            summary: Dashboard rollup to interpret
            brand: Used to tell brand-owned top sources apart

        Returns:
            Insights with a high/medium/low status
        """
        status = self.determine_status(summary.overall_sov)

        if summary.total_prompts == 0:
            return Insights(
                status=status,
                status_text=STATUS_TEXT[status],
                recommendations=["Run your first audit to see AI visibility insights."],
            )

        recommendations = []
        recommendations.extend(self._source_recommendations(summary, brand))
        recommendations.extend(self._competitor_recommendations(summary))
        recommendations.extend(self._model_recommendations(summary))

        if summary.average_rank is not None and summary.average_rank > 3:
            recommendations.append(
                f"Average list position is {summary.average_rank}. Aim for the top 3 "
                f"by strengthening reviews and third-party mentions."
            )

        logger.debug("Generated %d recommendations (status=%s)", len(recommendations), status.value)
        return Insights(
            status=status,
            status_text=STATUS_TEXT[status],
            recommendations=recommendations,
        )


def generate_insights(
    summary: DashboardSummary,
    brand: Optional[BrandIdentity] = None,
    settings: Optional[Settings] = None,
) -> Insights:
    return InsightEngine(settings).generate_insights(summary, brand)
