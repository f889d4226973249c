"""
Text projection for a page: one concatenated buffer plus a position map.
"""
from typing import List, Tuple

from .models import MatchRange, Page, PositionMapEntry, RunSpan


class TextProjection:
    """
    Concatenated text of a page with a map back to run offsets.

    ``position_map[i]`` tells which run and which character inside it
    produced ``buffer[i]``.
    """

    def __init__(self, buffer: str, position_map: List[PositionMapEntry]):
        self.buffer = buffer
        self.position_map = position_map

    def span_for(self, start: int, end: int) -> MatchRange:
        """
        Convert a buffer range into run-relative spans.

        Consecutive offsets in the same run are merged into one span.

        Args:
            start: Buffer start offset (inclusive)
            end: Buffer end offset (exclusive)

        Returns:
            Tuple of RunSpan in document order
        """
        spans: List[RunSpan] = []
        for entry in self.position_map[start:end]:
            if spans:
                last = spans[-1]
                if last.run_index == entry.run_index and last.end == entry.char_index:
                    spans[-1] = last._replace(end=entry.char_index + 1)
                    continue
            spans.append(RunSpan(entry.run_index, entry.char_index, entry.char_index + 1))
        return tuple(spans)

    def stripped(self) -> Tuple[str, List[int]]:
        """
        Whitespace-free copy of the buffer.

        Returns:
            Tuple of (stripped text, buffer offset of each stripped char)
        """
        chars = []
        offsets = []
        for offset, char in enumerate(self.buffer):
            if not char.isspace():
                chars.append(char)
                offsets.append(offset)
        return "".join(chars), offsets

    def __len__(self) -> int:
        return len(self.buffer)


def project_page(page: Page) -> TextProjection:
    """
    Build the text projection of a page.

    Args:
        page: Page whose runs are concatenated in order

    Returns:
        TextProjection with one map entry per buffer character
    """
    parts = []
    position_map: List[PositionMapEntry] = []

    for run_idx, run in enumerate(page.runs):
        parts.append(run.text)
        position_map.extend(PositionMapEntry(run_idx, char_idx)
                            for char_idx in range(len(run.text)))

    return TextProjection("".join(parts), position_map)
