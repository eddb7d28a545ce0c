"""
Dashboard & Reporting Schemas
Cross-prompt views recomputed from stored audit results
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from geo_visibility.models import InsightStatus, PromptCategory
from geo_visibility.schemas.audit import AuditResult, CompetitorSummary, SourceCount
from geo_visibility.schemas.identity import BrandIdentity


class ModelVisibility(BaseModel):
    """Visibility counters for one AI model across prompts"""
    model_config = ConfigDict(frozen=True)

    visible: int = 0
    total: int = 0
    cost: float = 0.0
    avg_rank: Optional[float] = None


class CategoryVisibility(BaseModel):
    """Visibility counters for one prompt category"""
    model_config = ConfigDict(frozen=True)

    prompts: int = 0
    visible: int = 0
    sov: int = 0
    avg_rank: Optional[float] = None


class CompetitorGap(BaseModel):
    """Competitor mentions relative to the most mentioned competitor"""
    model_config = ConfigDict(frozen=True)

    name: str
    mentions: int
    percentage: int


class DashboardSummary(BaseModel):
    """Aggregated dashboard metrics across all prompts"""
    model_config = ConfigDict(frozen=True)

    total_prompts: int = 0
    overall_sov: int = 0
    visibility_score: int = 0
    trust_index: int = 0
    average_rank: Optional[float] = None
    total_citations: int = 0
    total_cost: float = 0.0
    top_sources: List[SourceCount] = Field(default_factory=list)
    top_competitors: List[CompetitorSummary] = Field(default_factory=list)
    competitor_gap: List[CompetitorGap] = Field(default_factory=list)
    visibility_by_model: Dict[str, ModelVisibility] = Field(default_factory=dict)
    visibility_by_category: Dict[str, CategoryVisibility] = Field(default_factory=dict)

    def display_sources(self, limit: int = 5) -> List[SourceCount]:
        """Top-N slice of the full source ranking"""
        return self.top_sources[:limit]


class CitationSummary(BaseModel):
    """Aggregated citation data keyed by normalized URL"""
    model_config = ConfigDict(frozen=True)

    url: str
    title: str = ""
    domain: str
    snippet: Optional[str] = None
    count: int = 0
    prompts: List[str] = Field(default_factory=list)
    models: List[str] = Field(default_factory=list)
    categories: List[PromptCategory] = Field(default_factory=list)
    is_brand_source: bool = False


class SourceSummary(BaseModel):
    """Source domain summary with full URLs"""
    model_config = ConfigDict(frozen=True)

    domain: str
    full_urls: List[str] = Field(default_factory=list)
    total_count: int = 0
    prompts: List[str] = Field(default_factory=list)
    categories: List[PromptCategory] = Field(default_factory=list)


class CostBreakdown(BaseModel):
    """Cost breakdown by model, prompt and category"""
    model_config = ConfigDict(frozen=True)

    total: float = 0.0
    by_model: Dict[str, float] = Field(default_factory=dict)
    by_prompt: Dict[str, float] = Field(default_factory=dict)
    by_category: Dict[str, float] = Field(default_factory=dict)


class Insights(BaseModel):
    """Headline status plus recommendations for the summary tab"""
    model_config = ConfigDict(frozen=True)

    status: InsightStatus
    status_text: str
    recommendations: List[str] = Field(default_factory=list)


class FullReport(BaseModel):
    """Everything the JSON report export contains"""
    model_config = ConfigDict(frozen=True)

    brand: Optional[BrandIdentity] = None
    generated_at: Optional[datetime] = None
    summary: DashboardSummary
    insights: Optional[Insights] = None
    costs: CostBreakdown = Field(default_factory=CostBreakdown)
    citations: List[CitationSummary] = Field(default_factory=list)
    sources: List[SourceSummary] = Field(default_factory=list)
    audit_results: List[AuditResult] = Field(default_factory=list)
