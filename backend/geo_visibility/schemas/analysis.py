"""
Analysis Schemas
Per-model scoring output
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from geo_visibility.models import AuthorityType, SentimentPolarity


class Citation(BaseModel):
    """Deduplicated source cited by a model"""
    model_config = ConfigDict(frozen=True)

    url: str
    title: str = ""
    domain: str
    position: Optional[int] = None
    snippet: Optional[str] = None
    is_brand_source: bool = False


class CompetitorMention(BaseModel):
    """Competitor mention data for one model response"""
    model_config = ConfigDict(frozen=True)

    name: str
    count: int = Field(ge=0)
    rank: Optional[int] = None
    sentiment: SentimentPolarity = SentimentPolarity.NEUTRAL


class ModelResult(BaseModel):
    """
    Result from a single AI model for a prompt.
    Computed once from a raw response and never mutated.
    """
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model: str
    model_name: str
    provider: str = "unknown"
    color: Optional[str] = None
    weight: float = 1.0
    success: bool = True
    error: Optional[str] = None
    raw_response: str = ""
    response_length: int = 0

    # Brand detection
    brand_mentioned: bool = False
    brand_mention_count: int = Field(default=0, ge=0)
    brand_rank: Optional[int] = Field(default=None, ge=1)
    brand_sentiment: SentimentPolarity = SentimentPolarity.NEUTRAL
    matched_terms: List[str] = Field(default_factory=list)
    winner_brand: str = ""
    competitors_found: List[CompetitorMention] = Field(default_factory=list)

    # Citations
    citations: List[Citation] = Field(default_factory=list)
    citation_count: int = 0
    is_cited: bool = False
    authority_type: Optional[AuthorityType] = None

    api_cost: float = 0.0
    response_time_ms: Optional[int] = None
