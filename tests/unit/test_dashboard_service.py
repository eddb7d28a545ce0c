"""Tests for the cross-prompt dashboard rollup."""

from datetime import date, datetime

from geo_visibility.models import PromptCategory
from geo_visibility.schemas import (
    AuditFilter,
    AuditResult,
    AuditSummary,
    Citation,
    CompetitorMention,
    CompetitorSummary,
    ModelResult,
)
from geo_visibility.services import DashboardService, filter_audit_results
from geo_visibility.services.dashboard_service import calculate_competitor_gap


def make_model_result(model: str, mentioned: bool = False, rank=None, cost: float = 0.02,
                      citations=None, competitors=None) -> ModelResult:
    """Helper to create a model result."""
    citations = citations or []
    return ModelResult(
        model=model,
        model_name=model,
        brand_mentioned=mentioned,
        brand_mention_count=1 if mentioned else 0,
        brand_rank=rank,
        citations=citations,
        citation_count=len(citations),
        competitors_found=competitors or [],
        api_cost=cost,
    )


def make_audit(
    prompt_id: str,
    sov: int,
    category: PromptCategory = PromptCategory.BROAD,
    model_results=None,
    average_rank=None,
    visibility: int = 0,
    trust: int = 0,
    citations: int = 0,
    cost: float = 0.0,
    created_at=None,
    client_id: str = "c1",
) -> AuditResult:
    """Helper to create an audit result with a fixed summary."""
    model_results = model_results or []
    return AuditResult(
        id=f"a-{prompt_id}",
        client_id=client_id,
        prompt_id=prompt_id,
        prompt_text=f"prompt {prompt_id}",
        prompt_category=category,
        model_results=model_results,
        summary=AuditSummary(
            share_of_voice=sov,
            visibility_score=visibility,
            trust_index=trust,
            average_rank=average_rank,
            total_models_checked=len(model_results),
            visible_in=sum(1 for m in model_results if m.brand_mentioned),
            total_citations=citations,
            total_cost=cost,
        ),
        created_at=created_at,
    )


class TestCompetitorGap:
    """Tests for calculate_competitor_gap."""

    def test_relative_to_top(self):
        """10 vs 5 mentions -> 100 and 50."""
        gap = calculate_competitor_gap([
            CompetitorSummary(name="A", total_mentions=10),
            CompetitorSummary(name="B", total_mentions=5),
        ])
        assert [(g.name, g.percentage) for g in gap] == [("A", 100), ("B", 50)]

    def test_empty(self):
        """No competitors give no gap."""
        assert calculate_competitor_gap([]) == []


class TestFilterAuditResults:
    """Tests for filter_audit_results."""

    def test_no_filter(self):
        """Without a filter everything is kept."""
        audits = [make_audit("1", 10), make_audit("2", 90)]
        assert filter_audit_results(audits) == audits

    def test_sov_and_category(self):
        """SOV bounds and category are applied."""
        audits = [
            make_audit("1", 10),
            make_audit("2", 60, category=PromptCategory.NICHE),
            make_audit("3", 90),
        ]
        assert [a.prompt_id for a in filter_audit_results(audits, AuditFilter(min_sov=50))] == ["2", "3"]
        assert [a.prompt_id for a in filter_audit_results(audits, AuditFilter(max_sov=60))] == ["1", "2"]
        niche = filter_audit_results(audits, AuditFilter(category=PromptCategory.NICHE))
        assert [a.prompt_id for a in niche] == ["2"]

    def test_client(self):
        """Other clients' results are excluded."""
        audits = [make_audit("1", 10, client_id="c1"), make_audit("2", 10, client_id="c2")]
        assert [a.prompt_id for a in filter_audit_results(audits, AuditFilter(client_id="c2"))] == ["2"]

    def test_dates(self):
        """Date bounds are inclusive; undated results drop out."""
        audits = [
            make_audit("1", 10, created_at=datetime(2025, 1, 1, 9, 0)),
            make_audit("2", 10, created_at=datetime(2025, 1, 2, 23, 59)),
            make_audit("3", 10, created_at=datetime(2025, 1, 3, 0, 1)),
            make_audit("4", 10),
        ]
        selected = filter_audit_results(audits, AuditFilter(date_from=date(2025, 1, 2), date_to=date(2025, 1, 2)))
        assert [a.prompt_id for a in selected] == ["2"]


class TestBuildSummary:
    """Tests for DashboardService.build_summary."""

    def test_overall_metrics(self):
        """Per-prompt metrics are averaged and totals summed."""
        audits = [
            make_audit("1", 50, visibility=80, trust=40, average_rank=1.0, citations=3, cost=0.04),
            make_audit("2", 25, visibility=31, trust=0, average_rank=None, citations=1, cost=0.02),
        ]
        summary = DashboardService().build_summary(audits)
        assert summary.total_prompts == 2
        assert summary.overall_sov == 38  # 37.5 rounds up
        assert summary.visibility_score == 56  # 55.5 rounds up
        assert summary.trust_index == 20
        assert summary.average_rank == 1.0
        assert summary.total_citations == 4
        assert summary.total_cost == 0.06

    def test_visibility_by_model(self):
        """Per-model counters span all prompts."""
        audits = [
            make_audit("1", 50, model_results=[
                make_model_result("chatgpt", mentioned=True, rank=1),
                make_model_result("claude"),
            ]),
            make_audit("2", 100, model_results=[
                make_model_result("chatgpt", mentioned=True, rank=3),
                make_model_result("claude", mentioned=True),
            ]),
        ]
        by_model = DashboardService().build_summary(audits).visibility_by_model
        assert by_model["chatgpt"].visible == 2
        assert by_model["chatgpt"].total == 2
        assert by_model["chatgpt"].avg_rank == 2.0
        assert by_model["chatgpt"].cost == 0.04
        assert by_model["claude"].visible == 1
        assert by_model["claude"].avg_rank is None

    def test_visibility_by_category(self):
        """Category counters group prompts."""
        visible = [make_model_result("chatgpt", mentioned=True)]
        hidden = [make_model_result("chatgpt")]
        audits = [
            make_audit("1", 100, category=PromptCategory.BROAD, model_results=visible, average_rank=2.0),
            make_audit("2", 0, category=PromptCategory.BROAD, model_results=hidden),
            make_audit("3", 100, category=PromptCategory.LOCAL, model_results=visible),
        ]
        by_category = DashboardService().build_summary(audits).visibility_by_category
        assert by_category["broad"].prompts == 2
        assert by_category["broad"].visible == 1
        assert by_category["broad"].sov == 50
        assert by_category["broad"].avg_rank == 2.0
        assert by_category["local"].prompts == 1

    def test_sources_and_competitors(self):
        """Sources and competitor gap are recounted from model results."""
        audits = [
            make_audit("1", 0, model_results=[make_model_result(
                "chatgpt",
                citations=[Citation(url="https://reddit.com/a", domain="reddit.com"),
                           Citation(url="https://g2.com", domain="g2.com")],
                competitors=[CompetitorMention(name="Bumble", count=6),
                             CompetitorMention(name="Tinder", count=2)],
            )]),
            make_audit("2", 0, model_results=[make_model_result(
                "claude",
                citations=[Citation(url="https://reddit.com/b", domain="reddit.com")],
                competitors=[CompetitorMention(name="Bumble", count=4),
                             CompetitorMention(name="Tinder", count=3)],
            )]),
        ]
        summary = DashboardService().build_summary(audits)
        assert [(s.domain, s.count) for s in summary.top_sources] == [("reddit.com", 2), ("g2.com", 1)]
        assert [(g.name, g.mentions, g.percentage) for g in summary.competitor_gap] == [
            ("Bumble", 10, 100),
            ("Tinder", 5, 50),
        ]

    def test_display_sources(self):
        """The display slice is capped, the full list is not."""
        citations = [Citation(url=f"https://s{i}.com", domain=f"s{i}.com") for i in range(8)]
        audits = [make_audit("1", 0, model_results=[make_model_result("chatgpt", citations=citations)])]
        service = DashboardService()
        summary = service.build_summary(audits)
        assert len(summary.top_sources) == 8
        assert len(service.top_sources_for_display(summary)) == 5
        assert len(summary.display_sources(3)) == 3

    def test_filter_applied(self):
        """The filter narrows the rollup."""
        audits = [make_audit("1", 20), make_audit("2", 80)]
        summary = DashboardService().build_summary(audits, AuditFilter(min_sov=50))
        assert summary.total_prompts == 1
        assert summary.overall_sov == 80

    def test_empty(self):
        """No results give an empty summary."""
        summary = DashboardService().build_summary([])
        assert summary.total_prompts == 0
        assert summary.overall_sov == 0
        assert summary.average_rank is None
        assert summary.top_sources == []

    def test_recomputed(self):
        """Identical inputs give identical summaries."""
        audits = [make_audit("1", 50, model_results=[make_model_result("chatgpt", mentioned=True)])]
        service = DashboardService()
        assert service.build_summary(audits) == service.build_summary(audits)
