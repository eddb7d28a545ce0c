"""
Rank Extractor
Finds an entity's position in enumerated lists of the raw response
"""

import re
from typing import List, Optional

from .brand_matcher import BrandMatcher
from .text_normalizer import normalize_terms

# Optional decoration before the list marker: indentation, blockquotes,
# markdown headings, bullets and bold/italic openers.
_LINE_PREFIX = r"^[ \t>]*(?:#{1,6}[ \t]+)?(?:[-*+•][ \t]+)?(?:\*\*|__|\*|_)?[ \t]*"

# "1." / "1)" / "(1)" / "#1" / "#1."
_LIST_MARKER = r"(?:#[ \t]*(?P<hash>\d+)[.)]?|\(?(?P<num>\d+)[.)])"

# Decoration allowed between the marker and the name
_NAME_PREFIX = r"[ \t]*(?:\*\*|__|\*|_)?[ \t]*\[?"


class RankExtractor:
    """
    Assigns a 1-based rank from lines such as "1. Name", "(2) Name" or
    "#3 Name". The first matching line in document order wins.
    """

    def __init__(self, terms: List[str]):
        self.terms = normalize_terms(terms)
        self._patterns = [self._build_pattern(term) for term in self.terms]

    @staticmethod
    def _build_pattern(term: str) -> re.Pattern:
        name = r"\s+".join(re.escape(part) for part in term.split())
        if BrandMatcher.uses_word_boundary(term):
            name += r"(?!\w)"
        return re.compile(_LINE_PREFIX + _LIST_MARKER + _NAME_PREFIX + name, re.IGNORECASE)

    def extract_rank(self, raw_text: str) -> Optional[int]:
        """
        Extract the rank from the raw (non-normalized) response.

        Returns:
            The integer from the first list marker directly followed by a
            name variant, or None if no such line exists
        """
        if not raw_text or not self._patterns:
            return None

        for line in raw_text.splitlines():
            for pattern in self._patterns:
                match = pattern.match(line)
                if not match:
                    continue
                rank = int(match.group("hash") or match.group("num"))
                if rank >= 1:
                    return rank
        return None
