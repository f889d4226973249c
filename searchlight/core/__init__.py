"""
Core search and highlight logic.
"""

from .page import Document, Page, Run, RunSpan, TextRunView, project_page
from .search import (
    HighlightManager,
    Match,
    SearchContext,
    SearchController,
    SearchEvent,
    SearchOptions,
    locate,
)
from .document import PDFDocumentReader

__all__ = [
    "Document",
    "Page",
    "Run",
    "RunSpan",
    "TextRunView",
    "project_page",
    "HighlightManager",
    "Match",
    "SearchContext",
    "SearchController",
    "SearchEvent",
    "SearchOptions",
    "locate",
    "PDFDocumentReader",
]
