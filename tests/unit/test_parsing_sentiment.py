"""Tests for keyword sentiment around mentions."""

from geo_visibility.adapters.parsing import BrandMatcher, SentimentAnalyzer, SentimentLexicon
from geo_visibility.models import SentimentPolarity


def classify(text: str, name: str = "Juleo", **kwargs) -> SentimentPolarity:
    """Helper to run matcher + analyzer on a text."""
    lowered = text.lower()
    mentions = BrandMatcher([name]).find_mentions(lowered)
    return SentimentAnalyzer(**kwargs).analyze_mentions(lowered, mentions.occurrences)


class TestSentimentAnalyzer:
    """Tests for SentimentAnalyzer.analyze_mentions."""

    def test_positive(self):
        """A positive keyword near the mention is positive."""
        assert classify("Juleo is the best dating app") == SentimentPolarity.POSITIVE

    def test_negative(self):
        """Negative keywords near the mention are negative."""
        assert classify("avoid Juleo, it's a scam") == SentimentPolarity.NEGATIVE

    def test_neutral(self):
        """No keywords is neutral."""
        assert classify("Juleo is a dating app in India") == SentimentPolarity.NEUTRAL

    def test_balanced_window_is_neutral(self):
        """Equal positive and negative hits cancel out."""
        assert classify("Juleo is great but overpriced") == SentimentPolarity.NEUTRAL

    def test_negative_window_dominates(self):
        """Any negative window makes the entity negative."""
        filler = " lorem" * 40
        text = "Juleo is the best." + filler + " Some say Juleo is a scam."
        assert classify(text) == SentimentPolarity.NEGATIVE

    def test_keywords_outside_window_ignored(self):
        """Keywords beyond the context window are not counted."""
        text = "Juleo is a dating app." + " lorem" * 40 + " The best option overall."
        assert classify(text) == SentimentPolarity.NEUTRAL

    def test_custom_window(self):
        """The window size is configurable."""
        text = "Juleo" + " x" * 10 + " best"
        assert classify(text, context_window=5) == SentimentPolarity.NEUTRAL
        assert classify(text, context_window=50) == SentimentPolarity.POSITIVE

    def test_whole_word_keywords(self):
        """'top' inside 'laptop' is not a keyword."""
        assert classify("Juleo runs on any laptop") == SentimentPolarity.NEUTRAL

    def test_multiword_keywords(self):
        """Phrases like 'stay away' are matched."""
        assert classify("Stay away from Juleo") == SentimentPolarity.NEGATIVE

    def test_custom_lexicon(self):
        """Injected keyword lists replace the defaults."""
        lexicon = SentimentLexicon(positive=("swipe-worthy",), negative=())
        assert classify("Juleo is swipe-worthy", lexicon=lexicon) == SentimentPolarity.POSITIVE
        assert classify("Juleo is the best", lexicon=lexicon) == SentimentPolarity.NEUTRAL

    def test_no_occurrences(self):
        """No mentions is neutral."""
        assert SentimentAnalyzer().analyze_mentions("best app", []) == SentimentPolarity.NEUTRAL


class TestScoreWindow:
    """Tests for SentimentAnalyzer.score_window."""

    def test_counts_indicators(self):
        """Hits are counted and reported."""
        score = SentimentAnalyzer().score_window("trusted and reliable but buggy")
        assert score.positive == 2
        assert score.negative == 1
        assert set(score.matched_indicators) == {"trusted", "reliable", "buggy"}
        assert score.polarity == SentimentPolarity.POSITIVE
