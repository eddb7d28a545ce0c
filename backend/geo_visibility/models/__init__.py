"""
Engine enumerations
"""

from .enums import (
    AuthorityType,
    InsightStatus,
    PromptCategory,
    SentimentPolarity,
)

__all__ = [
    "AuthorityType",
    "InsightStatus",
    "PromptCategory",
    "SentimentPolarity",
]
