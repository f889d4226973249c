from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from searchlight.core.page.models import MatchRange, Page
from searchlight.core.page.run_view import MarkSegment
from searchlight.exceptions import InvalidOptionsError

# Number of distinct context tags available for styling
CONTEXT_TAG_COUNT = 8

_OPTION_ALIASES = {
    "caseSensitive": "case_sensitive",
    "flexibleWhitespace": "flexible_whitespace",
    "fuzzyThreshold": "fuzzy_threshold",
    "autoScroll": "auto_scroll",
}


@dataclass(frozen=True)
class SearchOptions:
    """Options recognized by every search call."""

    case_sensitive: bool = False
    flexible_whitespace: bool = True  # ignored when fuzzy is set
    fuzzy: bool = False
    fuzzy_threshold: float = 0.6
    auto_scroll: bool = True

    def __post_init__(self):
        for name in ("case_sensitive", "flexible_whitespace", "fuzzy", "auto_scroll"):
            if not isinstance(getattr(self, name), bool):
                raise InvalidOptionsError(f"Option '{name}' must be a bool")
        threshold = self.fuzzy_threshold
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
            raise InvalidOptionsError("Option 'fuzzy_threshold' must be a number")
        if not 0.0 <= threshold <= 1.0:
            raise InvalidOptionsError(
                f"Option 'fuzzy_threshold' must be within [0.0, 1.0], got {threshold}"
            )

    @staticmethod
    def normalize_keys(overrides: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Map option keys to field names, accepting camelCase aliases.

        Raises:
            InvalidOptionsError: If a key is not a known option
        """
        known = {f.name for f in fields(SearchOptions)}
        normalized = {}
        for key, value in overrides.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in known:
                raise InvalidOptionsError(f"Unknown search option '{key}'")
            normalized[name] = value
        return normalized

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "SearchOptions":
        return cls(**cls.normalize_keys(data or {}))

    def merged(self, overrides: Union["SearchOptions", Mapping[str, Any], None]) -> "SearchOptions":
        """
        Return a copy with ``overrides`` applied on top of these options.

        Args:
            overrides: Partial mapping of options, or a full SearchOptions

        Returns:
            New SearchOptions instance
        """
        if overrides is None:
            return self
        if isinstance(overrides, SearchOptions):
            return overrides
        return replace(self, **self.normalize_keys(overrides))

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SearchContext:
    """One registered query with its own option overrides."""

    query: str
    options: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, value: Union["SearchContext", str, Mapping[str, Any]]) -> "SearchContext":
        """Accept a SearchContext, a bare query string or a {query, options} mapping."""
        if isinstance(value, SearchContext):
            return value
        if isinstance(value, str):
            return cls(query=value)
        if "query" not in value:
            raise InvalidOptionsError("Search context mapping needs a 'query' key")
        options = value.get("options") or {}
        if isinstance(options, SearchOptions):
            options = options.to_dict()
        return cls(query=value["query"], options=dict(options))


@dataclass(eq=False)
class Match:
    """One located occurrence, possibly spanning several runs."""

    range: MatchRange
    page_index: int = 0
    context_index: int = 0
    distance: int = 0  # edit distance, non-zero only in fuzzy mode
    marks: List[MarkSegment] = field(default_factory=list, repr=False)

    @property
    def tag(self) -> int:
        return self.context_index % CONTEXT_TAG_COUNT

    @property
    def sort_key(self) -> Tuple[int, int]:
        first = self.range[0]
        return first.run_index, first.start

    def text(self, page: Page) -> str:
        """Matched text as it appears in the page's runs."""
        return "".join(page.runs[span.run_index].text[span.start:span.end]
                       for span in self.range)


@dataclass(frozen=True)
class SearchEvent:
    """Change notification emitted after every state-mutating call."""

    active_index: int
    match_count: int
    query: str = ""
    contexts: Tuple[SearchContext, ...] = ()
    context_counts: Tuple[int, ...] = ()
