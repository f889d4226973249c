"""
Searchlight: find and highlight text in PDF text runs.
"""

# core must be imported before utils (settings depends on search models)
from .core import (
    Document,
    HighlightManager,
    Match,
    Page,
    PDFDocumentReader,
    Run,
    RunSpan,
    SearchContext,
    SearchController,
    SearchEvent,
    SearchOptions,
    TextRunView,
    locate,
    project_page,
)
from .exceptions import (
    DocumentLoadError,
    EngineDestroyedError,
    InvalidOptionsError,
    SearchlightError,
)
from .utils import SearchSettings, load_settings, save_settings

__version__ = "0.1.0"

__all__ = [
    "Document",
    "HighlightManager",
    "Match",
    "Page",
    "PDFDocumentReader",
    "Run",
    "RunSpan",
    "SearchContext",
    "SearchController",
    "SearchEvent",
    "SearchOptions",
    "TextRunView",
    "locate",
    "project_page",
    "DocumentLoadError",
    "EngineDestroyedError",
    "InvalidOptionsError",
    "SearchlightError",
    "SearchSettings",
    "load_settings",
    "save_settings",
]
