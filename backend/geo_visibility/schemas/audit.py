"""
Audit Schemas
Per-prompt aggregate over every model queried
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from geo_visibility.models import PromptCategory
from geo_visibility.schemas.analysis import ModelResult


class AuditSummary(BaseModel):
    """Summary metrics for a single audit"""
    model_config = ConfigDict(frozen=True)

    share_of_voice: int = 0
    visibility_score: int = 0
    weighted_visibility_score: int = 0
    trust_index: int = 0
    average_rank: Optional[float] = None
    total_models_checked: int = 0
    visible_in: int = 0
    cited_in: int = 0
    total_citations: int = 0
    total_cost: float = 0.0


class SourceCount(BaseModel):
    """Source citation count"""
    model_config = ConfigDict(frozen=True)

    domain: str
    count: int
    url: Optional[str] = None
    title: Optional[str] = None


class CompetitorSummary(BaseModel):
    """Competitor summary data"""
    model_config = ConfigDict(frozen=True)

    name: str
    total_mentions: int
    avg_rank: Optional[float] = None
    visibility_pct: int = 0


class AuditResult(BaseModel):
    """Complete audit result for a single prompt run"""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    id: Optional[str] = None
    client_id: Optional[str] = None
    prompt_id: Optional[str] = None
    prompt_text: str
    prompt_category: PromptCategory = PromptCategory.CUSTOM
    model_results: List[ModelResult] = Field(default_factory=list)
    summary: AuditSummary = Field(default_factory=AuditSummary)
    top_sources: List[SourceCount] = Field(default_factory=list)
    top_competitors: List[CompetitorSummary] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class AuditFilter(BaseModel):
    """Filter parameters for audit results"""
    model_config = ConfigDict(frozen=True)

    client_id: Optional[str] = None
    category: Optional[PromptCategory] = None
    min_sov: Optional[int] = None
    max_sov: Optional[int] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
