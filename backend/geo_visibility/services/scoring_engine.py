"""
Visibility Scoring Engine
Turns one raw AI engine response into a scored ModelResult
"""

import logging
from dataclasses import asdict
from typing import Dict, List, Optional, Sequence

from geo_visibility.adapters.parsing import (
    BrandMatcher,
    CitationExtractor,
    MentionResult,
    RankExtractor,
    SentimentAnalyzer,
    SentimentLexicon,
    normalize_terms,
    normalize_text,
)
from geo_visibility.config import RANK_BONUS, Settings, get_settings
from geo_visibility.models import AuthorityType, SentimentPolarity
from geo_visibility.schemas import (
    AIModel,
    BrandIdentity,
    Citation,
    CompetitorIdentity,
    CompetitorMention,
    ModelResult,
    RawModelResponse,
)
from geo_visibility.services.registry import get_model

logger = logging.getLogger(__name__)


def classify_authority(
    is_cited: bool,
    mention_count: int,
    threshold: int = 3,
) -> Optional[AuthorityType]:
    """
    Authority tier of a model result.

    Not mentioned at all -> None, even when a brand source was cited.
    """
    if mention_count <= 0:
        return None
    if is_cited:
        return AuthorityType.AUTHORITY if mention_count >= threshold else AuthorityType.ALTERNATIVE
    return AuthorityType.MENTIONED


def calculate_visibility_score(result: ModelResult, settings: Optional[Settings] = None) -> int:
    """
    Visibility score for one model result.

    Scoring Model:
    - Base: 100 if cited, else 50 if mentioned, else 0
    - Rank bonus: #1 +30, #2 +20, #3 +10
    - Mentions: +5 each, capped at +20
    """
    settings = settings or get_settings()

    if result.is_cited:
        score = settings.VISIBILITY_BASE_CITED
    elif result.brand_mentioned:
        score = settings.VISIBILITY_BASE_MENTIONED
    else:
        score = 0

    score += RANK_BONUS.get(result.brand_rank, 0)
    score += min(
        result.brand_mention_count * settings.VISIBILITY_POINTS_PER_MENTION,
        settings.VISIBILITY_MENTION_CAP,
    )
    return score


class _EntityDetector:
    """Mention, rank and sentiment detection for one named entity"""

    def __init__(self, name: str, synonyms: List[str], sentiment: SentimentAnalyzer):
        self.name = name
        self.matcher = BrandMatcher(synonyms)
        self.ranker = RankExtractor(synonyms)
        self.sentiment = sentiment

    def detect(self, raw_text: str, text_lower: str):
        mentions = self.matcher.find_mentions(text_lower)
        if not mentions.mentioned:
            return mentions, None, SentimentPolarity.NEUTRAL

        rank = self.ranker.extract_rank(raw_text)
        polarity = self.sentiment.analyze_mentions(text_lower, mentions.occurrences)
        return mentions, rank, polarity


class ScoringEngine:
    """
    Scores raw responses for one brand and its competitors.

    Matchers are compiled once per engine, so one engine can score every
    model response of a prompt run. Scoring is deterministic and has no
    side effects.
    """

    def __init__(
        self,
        brand: BrandIdentity,
        competitors: Sequence[CompetitorIdentity] = (),
        models: Optional[Dict[str, AIModel]] = None,
        lexicon: Optional[SentimentLexicon] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.brand = brand
        self.competitors = list(competitors)
        self.models = models

        sentiment = SentimentAnalyzer(
            lexicon=lexicon,
            context_window=self.settings.SENTIMENT_CONTEXT_WINDOW,
        )
        self._brand = _EntityDetector(brand.name, brand.synonyms, sentiment)
        # "Bumble" and "bumble" are one competitor
        self._competitors = [
            _EntityDetector(name, [name], sentiment)
            for name in normalize_terms(c.name for c in self.competitors)
        ]
        self._citations = CitationExtractor(brand.name, brand.domain)

    def _cites_brand(self, citation: Citation) -> bool:
        """Brand-owned source, or a source whose title/snippet names the brand"""
        if citation.is_brand_source:
            return True
        text = " ".join(part for part in (citation.title, citation.snippet) if part)
        return self._brand.matcher.find_mentions(text).mentioned

    @staticmethod
    def _pick_winner(
        brand_name: str,
        brand_mentions: MentionResult,
        brand_rank: Optional[int],
        competitors: List[CompetitorMention],
    ) -> str:
        """Best ranked entity, else the most mentioned one (brand wins ties)"""
        entries = []
        if brand_mentions.mentioned:
            entries.append((brand_name, brand_rank, brand_mentions.count))
        entries.extend((c.name, c.rank, c.count) for c in competitors)
        if not entries:
            return ""

        ranked = [e for e in entries if e[1] is not None]
        if ranked:
            return min(ranked, key=lambda e: e[1])[0]
        return max(entries, key=lambda e: e[2])[0]

    def score_response(self, response: RawModelResponse) -> ModelResult:
        """
        Score one raw response.

        Args:
            response: Fully retrieved answer from one AI engine

        Returns:
            ModelResult; failed or empty responses come back with every
            detection field zeroed and the error carried over
        """
        model = get_model(response.model_id, self.models)
        raw_text = response.text or ""
        # Failed calls are only billed when the caller reports a cost
        if response.api_cost is not None:
            api_cost = response.api_cost
        else:
            api_cost = model.cost_per_query if response.success else 0.0

        base = dict(
            model=response.model_id,
            model_name=model.name,
            provider=model.provider,
            color=model.color,
            weight=model.weight,
            success=response.success,
            error=response.error,
            raw_response=raw_text,
            response_length=len(raw_text),
            api_cost=api_cost,
            response_time_ms=response.response_time_ms,
        )

        if not response.success or not raw_text.strip():
            logger.debug(
                "No signal from %s (success=%s, error=%s)",
                response.model_id, response.success, response.error,
            )
            return ModelResult(**base)

        text_lower = normalize_text(raw_text)

        # Brand detection
        brand_mentions, brand_rank, brand_sentiment = self._brand.detect(raw_text, text_lower)

        # Competitor detection
        competitors_found = []
        for detector in self._competitors:
            mentions, rank, sentiment = detector.detect(raw_text, text_lower)
            if mentions.mentioned:
                competitors_found.append(CompetitorMention(
                    name=detector.name,
                    count=mentions.count,
                    rank=rank,
                    sentiment=sentiment,
                ))

        # Citations
        citations = [
            Citation(**asdict(c))
            for c in self._citations.extract_citations(response.citations_raw)
        ]
        is_cited = any(self._cites_brand(c) for c in citations)

        result = ModelResult(
            **base,
            brand_mentioned=brand_mentions.mentioned,
            brand_mention_count=brand_mentions.count,
            brand_rank=brand_rank,
            brand_sentiment=brand_sentiment,
            matched_terms=brand_mentions.matched_terms,
            winner_brand=self._pick_winner(
                self.brand.name, brand_mentions, brand_rank, competitors_found
            ),
            competitors_found=competitors_found,
            citations=citations,
            citation_count=len(citations),
            is_cited=is_cited,
            authority_type=classify_authority(
                is_cited,
                brand_mentions.count,
                self.settings.AUTHORITY_MENTION_THRESHOLD,
            ),
        )

        logger.debug(
            "Scored %s: mentions=%d rank=%s cited=%s competitors=%d",
            response.model_id, result.brand_mention_count, result.brand_rank,
            result.is_cited, len(competitors_found),
        )
        return result


def score_response(
    response: RawModelResponse,
    brand: BrandIdentity,
    competitors: Sequence[CompetitorIdentity] = (),
    models: Optional[Dict[str, AIModel]] = None,
    lexicon: Optional[SentimentLexicon] = None,
) -> ModelResult:
    """Score a single response without keeping an engine around"""
    return ScoringEngine(brand, competitors, models=models, lexicon=lexicon).score_response(response)
