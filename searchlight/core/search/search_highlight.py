"""
Highlight state: the ordered match list and the active-match pointer.
"""
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from searchlight.core.page.models import Document, Page
from searchlight.core.page.run_view import MarkSegment, Segment, TextSegment

from .models import Match

logger = logging.getLogger(__name__)

ScrollCallback = Callable[[MarkSegment], None]


class HighlightManager:
    """
    Marks matches inside run views and tracks which one is active.

    For every affected run the view is rebuilt as plain text segments
    interleaved with mark segments. Marks keep a reference to their
    match so the active flag can be moved between matches later.
    """

    def __init__(self, highlight_class: str = "highlight",
                 active_class: str = "active",
                 scroll_callback: Optional[ScrollCallback] = None):
        self.highlight_class = highlight_class
        self.active_class = active_class
        self.scroll_callback = scroll_callback

        self.matches: List[Match] = []
        self.current_index: int = -1

    def apply_matches(self, page: Page, matches: Sequence[Match]) -> List[Match]:
        """
        Mark all matches of one page.

        Args:
            page: Page the matches were located on
            matches: Matches in document order

        Returns:
            The matches that received at least one mark
        """
        if not matches:
            return []

        # Group spans by run, remembering which match each belongs to
        run_ranges: Dict[int, List[Tuple[int, int, Match]]] = {}
        for match in matches:
            match.marks = []
            for span in match.range:
                run_ranges.setdefault(span.run_index, []).append((span.start, span.end, match))

        for run_idx in sorted(run_ranges):
            run = page.runs[run_idx]
            ranges = sorted(run_ranges[run_idx], key=lambda r: r[0])

            segments: List[Segment] = []
            last = 0

            for start, end, match in ranges:
                actual_start = max(start, last)

                if actual_start > last:
                    segments.append(TextSegment(run.text[last:actual_start]))

                if actual_start < end:
                    mark = MarkSegment(
                        text=run.text[actual_start:end],
                        match=match,
                        tag=match.tag,
                        highlight_class=self.highlight_class,
                        active_class=self.active_class,
                    )
                    segments.append(mark)
                    match.marks.append(mark)

                last = max(last, end)

            if last < len(run.text):
                segments.append(TextSegment(run.text[last:]))

            run.view.set_segments(segments)

        logger.debug("Marked %d run(s) on page %d", len(run_ranges), page.index)
        return [match for match in matches if match.marks]

    def add_matches(self, matches: Sequence[Match]) -> None:
        """Append matches to the global list."""
        self.matches.extend(matches)

    def clear(self, document: Optional[Document]) -> None:
        """
        Restore every run to its literal text and forget all matches.

        Args:
            document: Document whose runs are restored; may be None
        """
        if document is not None:
            for run in document.runs:
                run.restore()
        self.matches = []
        self.current_index = -1

    def set_active(self, index: int, auto_scroll: bool = True) -> int:
        """
        Make the match at ``index`` the active one.

        Args:
            index: Match index; out of range leaves no match active
            auto_scroll: Ask the renderer to bring the match into view

        Returns:
            The new active index (-1 if none)
        """
        if 0 <= self.current_index < len(self.matches):
            for mark in self.matches[self.current_index].marks:
                mark.active = False

        if not 0 <= index < len(self.matches):
            self.current_index = -1
            return -1

        self.current_index = index
        match = self.matches[index]
        for mark in match.marks:
            mark.active = True

        if auto_scroll and self.scroll_callback is not None and match.marks:
            self.scroll_callback(match.marks[0])

        return index

    def next(self, auto_scroll: bool = True) -> int:
        """Move to the next match, wrapping around. -1 when empty."""
        if not self.matches:
            return -1
        return self.set_active((self.current_index + 1) % len(self.matches), auto_scroll)

    def prev(self, auto_scroll: bool = True) -> int:
        """Move to the previous match, wrapping around. -1 when empty."""
        if not self.matches:
            return -1
        total = len(self.matches)
        return self.set_active((self.current_index - 1 + total) % total, auto_scroll)

    def get_matches_for_page(self, page_index: int) -> Tuple[List[Match], int]:
        """
        Get the matches of one page.

        Returns:
            Tuple of (matches on the page, position of the active match
            among them or -1)
        """
        page_matches = []
        current_on_page = -1

        for i, match in enumerate(self.matches):
            if match.page_index == page_index:
                page_matches.append(match)
                if i == self.current_index:
                    current_on_page = len(page_matches) - 1

        return page_matches, current_on_page

    @property
    def total(self) -> int:
        return len(self.matches)
