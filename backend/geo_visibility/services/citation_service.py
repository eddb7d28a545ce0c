"""
Citation Service
Cross-prompt citation and source-domain summaries
"""

import logging
from typing import Dict, List, Sequence

from geo_visibility.adapters.parsing import normalize_domain, normalize_url
from geo_visibility.schemas import AuditResult, CitationSummary, SourceSummary

logger = logging.getLogger(__name__)


def _append_unique(items: List, value) -> None:
    if value is not None and value not in items:
        items.append(value)


def summarize_citations(results: Sequence[AuditResult]) -> List[CitationSummary]:
    """
    Merge every citation across audit results into per-URL summaries.

    Citations are keyed by normalized URL, so https://Example.com/Page/ and
    https://example.com/page count as the same source. A citation without
    a URL falls back to a domain|title key.

    Returns:
        Summaries sorted by occurrence count, most cited first
    """
    merged: Dict[str, Dict] = {}

    for audit in results:
        prompt_key = audit.prompt_id or audit.prompt_text
        for mr in audit.model_results:
            for citation in mr.citations:
                url = normalize_url(citation.url)
                domain = citation.domain or normalize_domain(url)
                key = url or f"{domain}|{citation.title}"

                entry = merged.get(key)
                if entry is None:
                    entry = merged[key] = {
                        "url": url or citation.url,
                        "title": citation.title,
                        "domain": domain,
                        "snippet": citation.snippet,
                        "count": 0,
                        "prompts": [],
                        "models": [],
                        "categories": [],
                        "is_brand_source": citation.is_brand_source,
                    }

                entry["count"] += 1
                if not entry["title"] and citation.title:
                    entry["title"] = citation.title
                if not entry["snippet"] and citation.snippet:
                    entry["snippet"] = citation.snippet
                entry["is_brand_source"] = entry["is_brand_source"] or citation.is_brand_source
                _append_unique(entry["prompts"], prompt_key)
                _append_unique(entry["models"], mr.model)
                _append_unique(entry["categories"], audit.prompt_category)

    summaries = [CitationSummary(**data) for data in merged.values()]
    logger.debug("Summarized %d unique citations", len(summaries))
    return sorted(summaries, key=lambda c: c.count, reverse=True)


def summarize_sources_by_domain(results: Sequence[AuditResult]) -> List[SourceSummary]:
    """Group citation summaries by domain, keeping every distinct URL"""
    domains: Dict[str, Dict] = {}

    for citation in summarize_citations(results):
        if not citation.domain:
            continue
        entry = domains.setdefault(citation.domain, {
            "domain": citation.domain,
            "full_urls": [],
            "total_count": 0,
            "prompts": [],
            "categories": [],
        })
        entry["total_count"] += citation.count
        _append_unique(entry["full_urls"], citation.url)
        for prompt in citation.prompts:
            _append_unique(entry["prompts"], prompt)
        for category in citation.categories:
            _append_unique(entry["categories"], category)

    sources = [SourceSummary(**data) for data in domains.values()]
    return sorted(sources, key=lambda s: s.total_count, reverse=True)
