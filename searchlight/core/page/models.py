from dataclasses import dataclass, field
from typing import Any, Hashable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

from .run_view import RunView, TextRunView

# ==============================================================================
# Text Runs
# ==============================================================================


@dataclass(frozen=True)
class Run:
    """
    Smallest fragment of extracted text.

    The text is canonical and never mutated; only ``view`` is rewritten
    when matches are highlighted.
    """

    identity: Hashable
    text: str
    has_eol: bool = False
    bbox: Optional[Tuple[float, float, float, float]] = field(default=None, compare=False)
    view: Optional[RunView] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.view is None:
            object.__setattr__(self, "view", TextRunView(self.text))

    def restore(self) -> None:
        """Reset the visual projection to the literal text."""
        self.view.set_text(self.text)


@dataclass
class Page:
    """Ordered runs of one page plus an opaque renderer handle."""

    index: int
    runs: List[Run] = field(default_factory=list)
    handle: Any = None

    def __len__(self) -> int:
        return len(self.runs)


@dataclass
class Document:
    """Ordered pages, regenerated wholesale on every layout change."""

    pages: List[Page] = field(default_factory=list)

    @classmethod
    def from_texts(cls, pages: Sequence[Sequence[str]]) -> "Document":
        """
        Build a document from plain run texts.

        Args:
            pages: One sequence of run strings per page

        Returns:
            Document whose runs are identified as "page:run"
        """
        return cls(pages=[
            Page(
                index=page_idx,
                runs=[Run(identity=f"{page_idx}:{run_idx}", text=text)
                      for run_idx, text in enumerate(texts)],
            )
            for page_idx, texts in enumerate(pages)
        ])

    @property
    def runs(self) -> Iterator[Run]:
        for page in self.pages:
            yield from page.runs

    def __iter__(self) -> Iterator[Page]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, index: int) -> Page:
        return self.pages[index]


# ==============================================================================
# Projection Objects
# ==============================================================================


class PositionMapEntry(NamedTuple):
    """Where one buffer character lives: run index and offset in that run."""

    run_index: int
    char_index: int


class RunSpan(NamedTuple):
    """Half-open character span ``[start, end)`` inside one run."""

    run_index: int
    start: int
    end: int


# One match's footprint: ordered, non-overlapping spans, possibly across runs
MatchRange = Tuple[RunSpan, ...]
