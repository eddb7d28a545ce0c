"""
Enumerations shared by the engine records
"""

from enum import Enum as PyEnum


class SentimentPolarity(str, PyEnum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class AuthorityType(str, PyEnum):
    AUTHORITY = "authority"        # cited and mentioned 3+ times
    ALTERNATIVE = "alternative"    # cited, fewer mentions
    MENTIONED = "mentioned"        # mentioned but not cited


class PromptCategory(str, PyEnum):
    BROAD = "broad"
    NICHE = "niche"
    SUPER_NICHE = "super_niche"
    LONG_TAIL = "long_tail"
    COMPARISON = "comparison"
    PROBLEM = "problem"
    FEATURE = "feature"
    LOCAL = "local"
    CUSTOM = "custom"
    IMPORTED = "imported"
    DEFAULT = "default"


class InsightStatus(str, PyEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
