"""
Search controller: the public search, navigation and clear operations.
"""
import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from PyQt5.QtCore import QObject, pyqtSignal

from searchlight.core.page.models import Document
from searchlight.core.page.run_view import MarkSegment
from searchlight.exceptions import EngineDestroyedError
from searchlight.utils.settings import SearchSettings

from .models import Match, SearchContext, SearchEvent, SearchOptions
from .search_engine import locate
from .search_highlight import HighlightManager

logger = logging.getLogger(__name__)

OptionsLike = Union[SearchOptions, Mapping[str, Any], None]
ContextLike = Union[SearchContext, str, Mapping[str, Any]]


class SearchController(QObject):
    """
    Headless search and highlight controller.

    Works on any Document handed to it; it never renders anything. Every
    call runs to completion on the caller's thread and signals are
    emitted synchronously before the call returns.

    Supports:
    - Single-query and multi-context search
    - Wraparound next/previous navigation
    - Replaying the last search when the document is replaced
    """

    # Signals
    state_changed = pyqtSignal(object)  # SearchEvent
    search_finished = pyqtSignal(int)  # total match count
    scroll_requested = pyqtSignal(object)  # MarkSegment to bring into view

    def __init__(self, settings: Optional[SearchSettings] = None,
                 scroll_callback: Optional[Callable[[MarkSegment], None]] = None,
                 parent=None):
        super().__init__(parent)

        self.settings = settings or SearchSettings()
        self._scroll_callback = scroll_callback
        self._highlights = HighlightManager(
            highlight_class=self.settings.highlight_class,
            active_class=self.settings.active_class,
            scroll_callback=self._request_scroll,
        )

        self._document: Optional[Document] = None

        # Last search, kept for replay after a document change
        self._query: str = ""
        self._contexts: Tuple[SearchContext, ...] = ()
        self._context_options: Tuple[SearchOptions, ...] = ()
        self._context_counts: Tuple[int, ...] = ()
        self._options: SearchOptions = self.settings.options

        self._listeners: List[Callable[[SearchEvent], None]] = []
        self._destroyed = False

    # Document

    def set_document(self, document: Optional[Document]) -> None:
        """
        Install a new document, replaying the remembered search on it.

        Args:
            document: Freshly laid out document, or None to detach
        """
        self._ensure_alive()
        self._highlights.clear(self._document)
        self._document = document

        if self._contexts:
            logger.debug("Replaying %d context(s) on new document", len(self._contexts))
            self._run_multiple()
        elif self._query.strip():
            logger.debug("Replaying search for %r on new document", self._query)
            self._run_single()

        self._notify()

    # Searching

    def search(self, query: str, options: OptionsLike = None, **overrides) -> int:
        """
        Search every page for one query.

        Args:
            query: Query text; blank after trimming clears highlights
            options: SearchOptions or a partial option mapping
            **overrides: Individual options applied on top of ``options``

        Returns:
            Total number of matches
        """
        self._ensure_alive()
        resolved = self.settings.options.merged(options)
        if overrides:
            resolved = resolved.merged(overrides)

        self._query = query
        self._contexts = ()
        self._context_options = ()
        self._options = resolved

        total = self._run_single()
        self._notify()
        self.search_finished.emit(total)
        return total

    def search_multiple(self, contexts: Sequence[ContextLike],
                        shared_options: OptionsLike = None) -> int:
        """
        Search several queries at once, each tagged with its own context.

        Matches from all contexts are merged into document order so
        navigation interleaves them by position.

        Args:
            contexts: Queries with optional per-context option overrides
            shared_options: Options every context starts from

        Returns:
            Total number of matches over all contexts
        """
        self._ensure_alive()
        resolved_contexts = tuple(SearchContext.coerce(c) for c in contexts)
        shared = self.settings.options.merged(shared_options)
        context_options = tuple(shared.merged(ctx.options) for ctx in resolved_contexts)

        self._query = ""
        self._contexts = resolved_contexts
        self._context_options = context_options
        self._options = shared

        total = self._run_multiple()
        self._notify()
        self.search_finished.emit(total)
        return total

    def _run_single(self) -> int:
        self._highlights.clear(self._document)
        self._context_counts = ()

        if not self._query.strip() or self._document is None:
            return 0

        for page in self._document:
            matches = locate(page, self._query, self._options)
            self._highlights.add_matches(self._highlights.apply_matches(page, matches))

        total = self._highlights.total
        logger.debug("Search for %r found %d match(es)", self._query, total)
        if total > 0:
            self._highlights.set_active(0, self._options.auto_scroll)
        return total

    def _run_multiple(self) -> int:
        self._highlights.clear(self._document)
        counts = [0] * len(self._contexts)

        if self._document is not None:
            for page in self._document:
                page_matches: List[Match] = []
                for idx, context in enumerate(self._contexts):
                    page_matches.extend(
                        locate(page, context.query, self._context_options[idx], context_index=idx)
                    )

                page_matches.sort(key=lambda m: m.sort_key)
                applied = self._highlights.apply_matches(page, page_matches)
                for match in applied:
                    counts[match.context_index] += 1
                self._highlights.add_matches(applied)

        self._context_counts = tuple(counts)
        total = self._highlights.total
        logger.debug("Multi-context search found %d match(es) %s", total, counts)
        if total > 0:
            self._highlights.set_active(0, self._options.auto_scroll)
        return total

    # Navigation

    def next(self) -> int:
        """Activate the next match (wraps around). Returns the new index."""
        self._ensure_alive()
        idx = self._highlights.next(self._options.auto_scroll)
        self._notify()
        return idx

    def prev(self) -> int:
        """Activate the previous match (wraps around). Returns the new index."""
        self._ensure_alive()
        idx = self._highlights.prev(self._options.auto_scroll)
        self._notify()
        return idx

    def go_to(self, index: int) -> int:
        """Activate a match by index; out of range leaves none active."""
        self._ensure_alive()
        idx = self._highlights.set_active(index, self._options.auto_scroll)
        self._notify()
        return idx

    def clear(self) -> None:
        """Remove all highlights and forget the last search."""
        self._ensure_alive()
        self._highlights.clear(self._document)
        self._query = ""
        self._contexts = ()
        self._context_options = ()
        self._context_counts = ()
        self._notify()

    def destroy(self) -> None:
        """Tear down the controller. Any later call raises EngineDestroyedError."""
        if self._destroyed:
            return
        self._highlights.clear(self._document)
        self._document = None
        self._listeners.clear()
        for signal in (self.state_changed, self.search_finished, self.scroll_requested):
            try:
                signal.disconnect()
            except TypeError:
                # nothing connected
                pass
        self._destroyed = True

    # Listeners

    def add_listener(self, listener: Callable[[SearchEvent], None]) -> None:
        """Register a plain callable for change notifications."""
        self._ensure_alive()
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[SearchEvent], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        event = self.snapshot()
        self.state_changed.emit(event)
        for listener in list(self._listeners):
            listener(event)

    def _request_scroll(self, mark: MarkSegment) -> None:
        self.scroll_requested.emit(mark)
        if self._scroll_callback is not None:
            self._scroll_callback(mark)

    def _ensure_alive(self) -> None:
        if self._destroyed:
            raise EngineDestroyedError("SearchController has been destroyed")

    # State

    def snapshot(self) -> SearchEvent:
        """Current state as a change notification payload."""
        return SearchEvent(
            active_index=self._highlights.current_index,
            match_count=self._highlights.total,
            query=self._query,
            contexts=self._contexts,
            context_counts=self._context_counts,
        )

    @property
    def current(self) -> int:
        """Active match index (0-based), -1 if none."""
        return self._highlights.current_index

    @property
    def total(self) -> int:
        return self._highlights.total

    @property
    def query(self) -> str:
        return self._query

    @property
    def contexts(self) -> Tuple[SearchContext, ...]:
        return self._contexts

    @property
    def context_counts(self) -> Tuple[int, ...]:
        """Matches per registered context, in registration order."""
        return self._context_counts

    @property
    def matches(self) -> List[Match]:
        return list(self._highlights.matches)

    @property
    def options(self) -> SearchOptions:
        return self._options

    @property
    def document(self) -> Optional[Document]:
        return self._document

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def get_matches_for_page(self, page_index: int) -> Tuple[List[Match], int]:
        """Matches on one page and the position of the active one among them."""
        return self._highlights.get_matches_for_page(page_index)
