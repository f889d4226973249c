"""
Exceptions raised by the search and highlight engine.

No matches is never an error: it is reported as a zero match count and an
active index of -1. Errors here cover bad options, use of a destroyed
controller, and document loading in the PDF reader.
"""
from typing import Optional


class SearchlightError(Exception):
    """Base class for all searchlight errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidOptionsError(SearchlightError, ValueError):
    """Raised for unknown option keys or out-of-range option values."""


class EngineDestroyedError(SearchlightError, RuntimeError):
    """Raised when a controller is used after destroy() was called."""


class DocumentLoadError(SearchlightError):
    """Raised by the PDF reader when a document cannot be opened."""
