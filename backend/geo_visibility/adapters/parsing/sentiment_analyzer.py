"""
Sentiment Analyzer
Keyword polarity around each brand mention
"""

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from geo_visibility.config import NEGATIVE_KEYWORDS, POSITIVE_KEYWORDS, get_settings
from geo_visibility.models import SentimentPolarity

from .brand_matcher import BrandMatch


@dataclass(frozen=True)
class SentimentLexicon:
    """Positive and negative keyword sets"""
    positive: tuple = tuple(POSITIVE_KEYWORDS)
    negative: tuple = tuple(NEGATIVE_KEYWORDS)


@dataclass
class WindowScore:
    """Keyword hits inside one mention window"""
    positive: int
    negative: int
    matched_indicators: List[str] = field(default_factory=list)

    @property
    def polarity(self) -> SentimentPolarity:
        if self.negative > self.positive:
            return SentimentPolarity.NEGATIVE
        if self.positive > self.negative:
            return SentimentPolarity.POSITIVE
        return SentimentPolarity.NEUTRAL


class SentimentAnalyzer:
    """
    Rule-based sentiment for entity mentions.

    Each occurrence gets a window of text on both sides. The entity is
    negative if any window leans negative, otherwise positive if any window
    leans positive, otherwise neutral.
    """

    def __init__(
        self,
        lexicon: Optional[SentimentLexicon] = None,
        context_window: Optional[int] = None,
    ):
        self.lexicon = lexicon or SentimentLexicon()
        if context_window is None:
            context_window = get_settings().SENTIMENT_CONTEXT_WINDOW
        self.context_window = context_window
        self._positive_pattern = self._build_pattern(self.lexicon.positive)
        self._negative_pattern = self._build_pattern(self.lexicon.negative)

    def _build_pattern(self, words: Iterable[str]) -> Optional[re.Pattern]:
        """Build regex pattern from word list, longest phrases first"""
        words = sorted({w.lower() for w in words if w}, key=len, reverse=True)
        if not words:
            return None
        escaped = [re.escape(w) for w in words]
        return re.compile(r"(?<!\w)(" + "|".join(escaped) + r")(?!\w)")

    def _get_window(self, text: str, start: int, end: int) -> str:
        window_start = max(0, start - self.context_window)
        window_end = min(len(text), end + self.context_window)
        return text[window_start:window_end].lower()

    def score_window(self, window: str) -> WindowScore:
        positive = self._positive_pattern.findall(window) if self._positive_pattern else []
        negative = self._negative_pattern.findall(window) if self._negative_pattern else []
        return WindowScore(
            positive=len(positive),
            negative=len(negative),
            matched_indicators=positive + negative,
        )

    def analyze_mentions(self, text: str, occurrences: List[BrandMatch]) -> SentimentPolarity:
        """
        Classify sentiment for one entity.

        Args:
            text: Normalized response text the occurrences were found in
            occurrences: Mention spans from the brand matcher

        Returns:
            Aggregated polarity across all mention windows
        """
        saw_positive = False
        for occurrence in occurrences:
            window = self._get_window(text, occurrence.character_offset, occurrence.end_offset)
            polarity = self.score_window(window).polarity
            if polarity == SentimentPolarity.NEGATIVE:
                return SentimentPolarity.NEGATIVE
            if polarity == SentimentPolarity.POSITIVE:
                saw_positive = True

        return SentimentPolarity.POSITIVE if saw_positive else SentimentPolarity.NEUTRAL
