"""
Visual projection of a text run.

The engine never touches a run's canonical text. It only rewrites how the
run is displayed: either the literal text, or a sequence of plain and
marked segments.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Sequence, Union


@dataclass(frozen=True)
class TextSegment:
    """Plain, unmarked text inside a run."""

    text: str


@dataclass(eq=False)
class MarkSegment:
    """
    A highlighted piece of a run.

    Compared by identity so the active flag can be toggled on exactly the
    segments that belong to one match.
    """

    text: str
    match: Any = None  # owning Match
    tag: int = 0
    active: bool = False
    highlight_class: str = "highlight"
    active_class: str = "active"

    @property
    def class_names(self) -> List[str]:
        names = [self.highlight_class, f"{self.highlight_class}-{self.tag}"]
        if self.active:
            names.append(self.active_class)
        return names


Segment = Union[TextSegment, MarkSegment]


class RunView(ABC):
    """Display surface for one run, supplied by the rendering side."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Display literal text with no markup."""

    @abstractmethod
    def set_segments(self, segments: Sequence[Segment]) -> None:
        """Display a sequence of plain and marked segments."""

    @property
    @abstractmethod
    def text(self) -> str:
        """Currently displayed text with markup removed."""


class TextRunView(RunView):
    """In-memory run view used when no renderer is attached."""

    def __init__(self, text: str = ""):
        self.segments: List[Segment] = []
        self.set_text(text)

    def set_text(self, text: str) -> None:
        self.segments = [TextSegment(text)] if text else []

    def set_segments(self, segments: Sequence[Segment]) -> None:
        self.segments = list(segments)

    @property
    def text(self) -> str:
        return "".join(seg.text for seg in self.segments)

    @property
    def marks(self) -> List[MarkSegment]:
        return [seg for seg in self.segments if isinstance(seg, MarkSegment)]

    @property
    def is_marked(self) -> bool:
        return any(isinstance(seg, MarkSegment) for seg in self.segments)

    def __repr__(self) -> str:
        return f"TextRunView({self.segments!r})"
