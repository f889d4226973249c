"""
Page data: runs, pages, documents and their text projection.
"""

from .models import Document, MatchRange, Page, PositionMapEntry, Run, RunSpan
from .run_view import MarkSegment, RunView, Segment, TextRunView, TextSegment
from .text_layer import TextProjection, project_page

__all__ = [
    "Run",
    "Page",
    "Document",
    "PositionMapEntry",
    "RunSpan",
    "MatchRange",
    "RunView",
    "TextRunView",
    "TextSegment",
    "MarkSegment",
    "Segment",
    "TextProjection",
    "project_page",
]
