"""
Audit Service
Rolls the per-model results of one prompt run into an AuditResult
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from geo_visibility.config import Settings, get_settings
from geo_visibility.models import AuthorityType, PromptCategory
from geo_visibility.schemas import (
    AIModel,
    AuditResult,
    AuditSummary,
    BrandIdentity,
    CompetitorIdentity,
    CompetitorSummary,
    ModelResult,
    RawModelResponse,
    SourceCount,
)
from geo_visibility.services.scoring_engine import ScoringEngine, calculate_visibility_score
from geo_visibility.utils import mean, percentage, round_half_up, round_rank

logger = logging.getLogger(__name__)


def count_sources(model_results: Sequence[ModelResult]) -> List[SourceCount]:
    """
    Citation counts per domain, most cited first.

    Ties keep the order in which domains were first seen.
    """
    counts: Dict[str, Dict] = {}
    for result in model_results:
        for citation in result.citations:
            if not citation.domain:
                continue
            entry = counts.setdefault(citation.domain, {
                "count": 0,
                "url": citation.url,
                "title": citation.title or None,
            })
            entry["count"] += 1

    sources = [
        SourceCount(domain=domain, count=data["count"], url=data["url"], title=data["title"])
        for domain, data in counts.items()
    ]
    # sorted() is stable, so first-seen order breaks ties
    return sorted(sources, key=lambda s: s.count, reverse=True)


def summarize_competitors(model_results: Sequence[ModelResult]) -> List[CompetitorSummary]:
    """Competitor mention totals across model results, most mentioned first"""
    stats: Dict[str, Dict] = {}
    for result in model_results:
        for comp in result.competitors_found:
            entry = stats.setdefault(comp.name, {"mentions": 0, "ranks": [], "visible": 0})
            entry["mentions"] += comp.count
            entry["visible"] += 1
            if comp.rank is not None:
                entry["ranks"].append(comp.rank)

    total = len(model_results)
    summaries = [
        CompetitorSummary(
            name=name,
            total_mentions=data["mentions"],
            avg_rank=round_rank(mean(data["ranks"])),
            visibility_pct=percentage(data["visible"], total),
        )
        for name, data in stats.items()
    ]
    return sorted(summaries, key=lambda c: c.total_mentions, reverse=True)


class AuditService:
    """
    Cross-model aggregation for a single prompt.

    Works on whatever results are present, so a partial set of models
    still produces a summary.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def calculate_trust_index(self, model_results: Sequence[ModelResult]) -> int:
        """
        Trust index on a 0-100 scale.

        citation_rate * 0.6 + authority_rate * 0.4, where both rates are
        percentages of the models checked.
        """
        total = len(model_results)
        if total == 0:
            return 0

        cited = sum(1 for r in model_results if r.is_cited)
        authority = sum(1 for r in model_results if r.authority_type == AuthorityType.AUTHORITY)

        citation_rate = cited / total * 100
        authority_rate = authority / total * 100
        return round_half_up(
            citation_rate * self.settings.TRUST_CITATION_WEIGHT
            + authority_rate * self.settings.TRUST_AUTHORITY_WEIGHT
        )

    def summarize(self, model_results: Sequence[ModelResult]) -> AuditSummary:
        """Summary metrics for one prompt's model results"""
        total = len(model_results)
        if total == 0:
            return AuditSummary()

        visible_in = sum(1 for r in model_results if r.brand_mentioned)
        cited_in = sum(1 for r in model_results if r.is_cited)
        ranks = [r.brand_rank for r in model_results if r.brand_rank is not None]

        scores = [calculate_visibility_score(r, self.settings) for r in model_results]
        total_weight = sum(r.weight for r in model_results)
        weighted = (
            sum(s * r.weight for s, r in zip(scores, model_results)) / total_weight
            if total_weight > 0 else 0
        )

        return AuditSummary(
            share_of_voice=percentage(visible_in, total),
            visibility_score=round_half_up(mean(scores)),
            weighted_visibility_score=round_half_up(weighted),
            trust_index=self.calculate_trust_index(model_results),
            average_rank=round_rank(mean(ranks)),
            total_models_checked=total,
            visible_in=visible_in,
            cited_in=cited_in,
            total_citations=sum(r.citation_count for r in model_results),
            total_cost=round(sum(r.api_cost for r in model_results), 6),
        )

    def aggregate(
        self,
        prompt_text: str,
        model_results: Sequence[ModelResult],
        prompt_id: Optional[str] = None,
        prompt_category: PromptCategory = PromptCategory.CUSTOM,
        client_id: Optional[str] = None,
        audit_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> AuditResult:
        """
        Build the AuditResult for one prompt run.

        Args:
            prompt_text: The query that was sent to every model
            model_results: One scored result per model that answered
            prompt_id: Caller's prompt identifier
            prompt_category: Category used by the dashboard breakdown
            client_id: Owning client
            audit_id: Identifier assigned by the caller
            created_at: Run timestamp assigned by the caller

        Returns:
            A new AuditResult; re-running produces a new record
        """
        model_results = list(model_results)
        summary = self.summarize(model_results)

        logger.info(
            "Aggregated prompt %r: models=%d sov=%d visibility=%d trust=%d",
            prompt_id or prompt_text, summary.total_models_checked,
            summary.share_of_voice, summary.visibility_score, summary.trust_index,
        )

        return AuditResult(
            id=audit_id,
            client_id=client_id,
            prompt_id=prompt_id,
            prompt_text=prompt_text,
            prompt_category=prompt_category,
            model_results=model_results,
            summary=summary,
            top_sources=count_sources(model_results),
            top_competitors=summarize_competitors(model_results),
            created_at=created_at,
        )

    def run(
        self,
        prompt_text: str,
        brand: BrandIdentity,
        competitors: Sequence[CompetitorIdentity],
        responses: Sequence[RawModelResponse],
        models: Optional[Dict[str, AIModel]] = None,
        **kwargs,
    ) -> AuditResult:
        """Score every response of a prompt run, then aggregate"""
        engine = ScoringEngine(brand, competitors, models=models, settings=self.settings)
        model_results = [engine.score_response(r) for r in responses]
        return self.aggregate(prompt_text, model_results, **kwargs)
