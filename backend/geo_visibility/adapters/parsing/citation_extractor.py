"""
Citation Extractor
Normalizes and deduplicates the sources attached to a model response
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional
from urllib.parse import urlsplit, urlunsplit

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# "mailto:", "javascript:" and similar; a digit after the colon is a port
_OTHER_SCHEME = re.compile(r"^[a-z][a-z0-9+.-]*:(?!\d)", re.IGNORECASE)


@dataclass
class ExtractedCitation:
    """A normalized citation from a model response"""
    url: str                     # Normalized URL (dedup key)
    domain: str                  # Host without www.
    title: str
    snippet: Optional[str]
    position: int                # Order in response (1-indexed) unless provided
    is_brand_source: bool


def normalize_url(url: Optional[str]) -> str:
    """
    Normalize a URL for deduplication.

    Lowercases the whole URL, adds https:// when the scheme is missing,
    drops default ports, the fragment and any trailing slash. Only http
    and https references are kept.

    Returns:
        The normalized URL, or "" when it has no usable host
    """
    url = (url or "").strip()
    if not url:
        return ""
    if "://" in url:
        if url.split("://", 1)[0].lower() not in DEFAULT_PORTS:
            return ""
    elif _OTHER_SCHEME.match(url):
        return ""
    else:
        url = "https://" + url.lstrip("/")

    try:
        parsed = urlsplit(url)
        port = parsed.port
    except ValueError:
        return ""

    scheme = parsed.scheme.lower()
    host = (parsed.hostname or "").lower()
    if not host:
        return ""

    # IPv6 literals keep their brackets
    netloc = f"[{host}]" if ":" in host else host
    if port is not None and DEFAULT_PORTS.get(scheme) != port:
        netloc = f"{netloc}:{port}"

    path = parsed.path.rstrip("/")
    return urlunsplit((scheme, netloc, path, parsed.query, "")).lower()


def normalize_domain(value: Optional[str]) -> str:
    """Host of a URL or bare domain, lowercased, without www."""
    normalized = normalize_url(value)
    if not normalized:
        return ""
    domain = urlsplit(normalized).hostname or ""
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


class CitationExtractor:
    """
    Turns raw citation entries into deduplicated citations.

    Raw entries are any objects with url, title, snippet and position
    attributes. Entries without a usable URL are dropped.
    """

    def __init__(self, brand_name: str, brand_domain: Optional[str] = None):
        self.brand_domain = normalize_domain(brand_domain)
        self.brand_key = _NON_ALNUM.sub("", (brand_name or "").lower())

    def is_brand_source(self, domain: str) -> bool:
        """Check if a cited domain belongs to the brand"""
        if not domain:
            return False
        if self.brand_domain and (
            domain == self.brand_domain or domain.endswith("." + self.brand_domain)
        ):
            return True
        return bool(self.brand_key) and self.brand_key in domain

    def extract_citations(self, raw_citations: Iterable) -> List[ExtractedCitation]:
        """
        Normalize and deduplicate citations for one response.

        Args:
            raw_citations: Citation entries as returned by the AI engine

        Returns:
            Citations in their original order, first occurrence per URL
        """
        citations = []
        found_urls = set()

        for raw in raw_citations:
            url = normalize_url(getattr(raw, "url", None))
            if not url or url in found_urls:
                continue
            found_urls.add(url)

            domain = normalize_domain(url)
            position = getattr(raw, "position", None)

            citations.append(ExtractedCitation(
                url=url,
                domain=domain,
                title=(getattr(raw, "title", None) or "").strip(),
                snippet=getattr(raw, "snippet", None),
                position=position if position is not None else len(citations) + 1,
                is_brand_source=self.is_brand_source(domain),
            ))

        return citations
