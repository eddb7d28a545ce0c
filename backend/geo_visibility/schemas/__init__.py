"""
Pydantic schemas for engine inputs and outputs
"""

from .identity import (
    AIModel,
    BrandIdentity,
    CompetitorIdentity,
)
from .llm import (
    RawCitation,
    RawModelResponse,
)
from .analysis import (
    Citation,
    CompetitorMention,
    ModelResult,
)
from .audit import (
    AuditFilter,
    AuditResult,
    AuditSummary,
    CompetitorSummary,
    SourceCount,
)
from .dashboard import (
    CategoryVisibility,
    CitationSummary,
    CompetitorGap,
    CostBreakdown,
    DashboardSummary,
    FullReport,
    Insights,
    ModelVisibility,
    SourceSummary,
)

__all__ = [
    # Identity
    "AIModel",
    "BrandIdentity",
    "CompetitorIdentity",
    # Raw responses
    "RawCitation",
    "RawModelResponse",
    # Analysis
    "Citation",
    "CompetitorMention",
    "ModelResult",
    # Audit
    "AuditFilter",
    "AuditResult",
    "AuditSummary",
    "CompetitorSummary",
    "SourceCount",
    # Dashboard
    "CategoryVisibility",
    "CitationSummary",
    "CompetitorGap",
    "CostBreakdown",
    "DashboardSummary",
    "FullReport",
    "Insights",
    "ModelVisibility",
    "SourceSummary",
]
