"""
Locate query matches on pages of fragmented text.
"""
import logging
from typing import List, Optional

from searchlight.core.page.models import Document, Page
from searchlight.core.page.text_layer import TextProjection, project_page

from .fuzzy import fuzzy_search
from .models import Match, SearchOptions
from .pattern import compile_pattern, find_all

logger = logging.getLogger(__name__)


def locate(page: Page, query: str, options: Optional[SearchOptions] = None,
           context_index: int = 0) -> List[Match]:
    """
    Find every match of a query on one page.

    Args:
        page: Page to search
        query: Query text, trimmed before use
        options: Search options (defaults when omitted)
        context_index: Context the resulting matches belong to

    Returns:
        Matches in document order; empty for a blank query
    """
    options = options or SearchOptions()
    trimmed = query.strip()
    if not trimmed:
        return []

    projection = project_page(page)
    if options.fuzzy:
        matches = _locate_fuzzy(projection, trimmed, options)
    else:
        matches = _locate_pattern(projection, trimmed, options)

    for match in matches:
        match.page_index = page.index
        match.context_index = context_index
    return matches


def locate_document(document: Document, query: str,
                    options: Optional[SearchOptions] = None) -> List[Match]:
    """Run locate() over every page, concatenating results in page order."""
    results: List[Match] = []
    for page in document:
        results.extend(locate(page, query, options))
    return results


def _locate_pattern(projection: TextProjection, query: str,
                    options: SearchOptions) -> List[Match]:
    pattern = compile_pattern(
        query,
        case_sensitive=options.case_sensitive,
        flexible_whitespace=options.flexible_whitespace,
    )
    if pattern is None:
        return []

    matches = []
    for start, end in find_all(pattern, projection.buffer):
        span = projection.span_for(start, end)
        if span:
            matches.append(Match(range=span))
    return matches


def _locate_fuzzy(projection: TextProjection, query: str,
                  options: SearchOptions) -> List[Match]:
    # Query and buffer are stripped alike so offsets line up
    stripped_query = "".join(query.split())
    stripped_text, offsets = projection.stripped()

    hits = fuzzy_search(
        stripped_text,
        stripped_query,
        threshold=options.fuzzy_threshold,
        case_sensitive=options.case_sensitive,
    )
    logger.debug("Fuzzy search for %r: %d hit(s)", stripped_query, len(hits))

    matches = []
    for hit in hits:
        start = offsets[hit.start]
        end = offsets[hit.end - 1] + 1
        matches.append(Match(range=projection.span_for(start, end), distance=hit.distance))
    return matches
