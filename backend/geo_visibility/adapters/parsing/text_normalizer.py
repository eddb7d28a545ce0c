"""
Text Normalizer
Prepares response text and name variants for matching
"""

import re
from typing import Iterable, List

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Lowercase copy of a response.

    Offsets are preserved for ASCII text; the raw string is kept separately
    for rank extraction, which needs the original list markers.
    """
    if not text:
        return ""
    return text.lower()


def normalize_term(term: str) -> str:
    """Strip and collapse inner whitespace of a name variant"""
    return _WHITESPACE.sub(" ", term or "").strip()


def normalize_terms(terms: Iterable[str]) -> List[str]:
    """
    Clean a list of name variants.

    Drops empties and case-insensitive duplicates, keeping the first
    spelling seen so matched terms are reported as the user typed them.
    """
    seen = set()
    cleaned = []
    for term in terms:
        term = normalize_term(term)
        key = term.lower()
        if not term or key in seen:
            continue
        seen.add(key)
        cleaned.append(term)
    return cleaned
