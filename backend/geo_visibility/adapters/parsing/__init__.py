"""
Response Parsing Adapters
"""

from .brand_matcher import BrandMatch, BrandMatcher, MentionResult
from .citation_extractor import CitationExtractor, ExtractedCitation, normalize_domain, normalize_url
from .rank_extractor import RankExtractor
from .sentiment_analyzer import SentimentAnalyzer, SentimentLexicon
from .text_normalizer import normalize_terms, normalize_text

__all__ = [
    "BrandMatch",
    "BrandMatcher",
    "MentionResult",
    "CitationExtractor",
    "ExtractedCitation",
    "normalize_domain",
    "normalize_url",
    "RankExtractor",
    "SentimentAnalyzer",
    "SentimentLexicon",
    "normalize_terms",
    "normalize_text",
]
