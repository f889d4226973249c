"""
Search functionality for documents of text runs.
"""

from .models import (
    CONTEXT_TAG_COUNT,
    Match,
    SearchContext,
    SearchEvent,
    SearchOptions,
)
from .pattern import compile_pattern, find_all
from .fuzzy import FuzzyHit, fuzzy_search, max_errors
from .search_engine import locate, locate_document
from .search_highlight import HighlightManager
from .controller import SearchController

__all__ = [
    "CONTEXT_TAG_COUNT",
    "Match",
    "SearchContext",
    "SearchEvent",
    "SearchOptions",
    "compile_pattern",
    "find_all",
    "FuzzyHit",
    "fuzzy_search",
    "max_errors",
    "locate",
    "locate_document",
    "HighlightManager",
    "SearchController",
]
