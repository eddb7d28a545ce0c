"""
Brand Matching Engine
Detects brand and competitor mentions by exact, case-insensitive matching
"""

import re
from dataclasses import dataclass, field
from typing import List, Tuple

from .text_normalizer import normalize_terms, normalize_text

# Names made of word characters and spaces get word-boundary matching;
# anything with punctuation (e.g. "Booking.com") is matched as a substring.
_WORD_NAME = re.compile(r"[\w ]+")


@dataclass
class BrandMatch:
    """A single occurrence of a name variant"""
    term: str                    # Name variant as declared
    character_offset: int        # Start in the normalized text
    end_offset: int              # End (exclusive) in the normalized text


@dataclass
class MentionResult:
    """All occurrences of one entity in a response"""
    count: int = 0
    matched_terms: List[str] = field(default_factory=list)
    occurrences: List[BrandMatch] = field(default_factory=list)

    @property
    def mentioned(self) -> bool:
        return self.count > 0


class BrandMatcher:
    """
    Matches one entity's name variants in text.

    Every occurrence of every variant is counted. When two variants cover
    the same characters (e.g. "Juleo" inside "Juleo Club") the span is
    counted once, longest variant first. A variant that is a whole word
    inside a longer, undeclared name is still counted.
    """

    def __init__(self, terms: List[str]):
        self.terms = normalize_terms(terms)
        self._patterns = [(term, self._build_pattern(term)) for term in self.terms]

    @staticmethod
    def uses_word_boundary(term: str) -> bool:
        return bool(_WORD_NAME.fullmatch(term))

    @classmethod
    def _build_pattern(cls, term: str) -> re.Pattern:
        """Build the search pattern for a single name variant"""
        lowered = term.lower()
        if cls.uses_word_boundary(term):
            body = r"\s+".join(re.escape(part) for part in lowered.split())
            return re.compile(r"(?<!\w)" + body + r"(?!\w)")
        return re.compile(re.escape(lowered))

    def _find_candidates(self, text_lower: str) -> List[Tuple[int, int, int, str]]:
        candidates = []
        for index, (term, pattern) in enumerate(self._patterns):
            for match in pattern.finditer(text_lower):
                candidates.append((match.start(), match.end(), index, term))
        return candidates

    def find_mentions(self, text: str) -> MentionResult:
        """
        Find all mentions in text.

        Args:
            text: Response text (normalized or raw; it is lowercased here)

        Returns:
            MentionResult with the count, distinct matched variants and
            non-overlapping occurrences ordered by position
        """
        text_lower = normalize_text(text)
        if not text_lower or not self._patterns:
            return MentionResult()

        candidates = self._find_candidates(text_lower)
        # Earliest start first; at the same start the longest span wins
        candidates.sort(key=lambda c: (c[0], -(c[1] - c[0]), c[2]))

        occurrences = []
        last_end = -1
        for start, end, _, term in candidates:
            if start < last_end:
                continue
            occurrences.append(BrandMatch(term=term, character_offset=start, end_offset=end))
            last_end = end

        found = {o.term for o in occurrences}
        matched_terms = [term for term in self.terms if term in found]

        return MentionResult(
            count=len(occurrences),
            matched_terms=matched_terms,
            occurrences=occurrences,
        )
