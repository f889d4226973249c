"""
Approximate substring search with a bounded edit distance.

A semi-global alignment is used: the query must be consumed entirely, but
it may start at any position of the text. Every text position whose
alignment cost stays within the error budget is a candidate match end;
tracing back through the table recovers where that match starts.
"""
import math
from dataclasses import dataclass
from typing import List, Sequence

DEFAULT_FUZZY_THRESHOLD = 0.6


@dataclass(frozen=True)
class FuzzyHit:
    """Approximate match ``text[start:end]`` found at ``distance`` edits."""

    start: int
    end: int
    distance: int


def max_errors(query_length: int, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> int:
    """
    Number of edits allowed for a query of the given length.

    Args:
        query_length: Length of the whitespace-stripped query
        threshold: Required similarity, 1.0 means exact only

    Returns:
        floor(query_length * (1 - threshold))
    """
    # rounding first keeps 10 * (1 - 0.9) from flooring to 0
    return int(math.floor(round(query_length * (1.0 - threshold), 9)))


def fold_case(text: str) -> str:
    """Lower-case character by character, keeping the length unchanged."""
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def distance_table(text: str, query: str) -> List[List[int]]:
    """
    Fill the alignment table.

    ``table[i][j]`` is the fewest edits aligning ``query[:j]`` so that it
    ends at text position ``i``. ``table[i][0]`` is zero for every ``i``,
    so a match may begin anywhere.
    """
    n, m = len(text), len(query)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for j in range(1, m + 1):
        table[0][j] = j

    for i in range(1, n + 1):
        prev = table[i - 1]
        row = table[i]
        tc = text[i - 1]
        for j in range(1, m + 1):
            cost = 0 if tc == query[j - 1] else 1
            row[j] = min(prev[j - 1] + cost, prev[j] + 1, row[j - 1] + 1)

    return table


def trace_start(table: List[List[int]], text: str, query: str, end: int) -> int:
    """
    Walk back from ``(end, len(query))`` to the text position where the
    alignment began.

    The step taken is whichever recurrence produced the stored value,
    tried in order: diagonal, up (text char skipped), left (query char
    inserted).
    """
    i, j = end, len(query)
    while j > 0:
        value = table[i][j]
        if i > 0:
            cost = 0 if text[i - 1] == query[j - 1] else 1
            if value == table[i - 1][j - 1] + cost:
                i -= 1
                j -= 1
                continue
            if value == table[i - 1][j] + 1:
                i -= 1
                continue
        j -= 1
    return i


def merge_overlapping(hits: Sequence[FuzzyHit]) -> List[FuzzyHit]:
    """
    Collapse overlapping hits, keeping the lowest distance per cluster.

    Hits are ordered by (start, distance) and compared against the hit
    currently kept; on an exact distance tie the first one seen is kept.
    Hits that do not overlap the kept one start a new cluster.
    """
    ordered = sorted(hits, key=lambda h: (h.start, h.distance))
    merged: List[FuzzyHit] = []
    best = None

    for hit in ordered:
        if best is not None and hit.start < best.end:
            if hit.distance < best.distance:
                best = hit
        else:
            if best is not None:
                merged.append(best)
            best = hit

    if best is not None:
        merged.append(best)

    return merged


def fuzzy_search(text: str, query: str,
                 threshold: float = DEFAULT_FUZZY_THRESHOLD,
                 case_sensitive: bool = False) -> List[FuzzyHit]:
    """
    Find approximate occurrences of ``query`` in ``text``.

    Args:
        text: Text to scan (callers strip whitespace beforehand)
        query: Query to look for
        threshold: Similarity in [0.0, 1.0]; 1.0 degenerates to exact search
        case_sensitive: Compare letter case exactly

    Returns:
        Ordered, non-overlapping hits over ``text`` offsets
    """
    if not text or not query:
        return []

    limit = max_errors(len(query), threshold)
    if not case_sensitive:
        text = fold_case(text)
        query = fold_case(query)

    table = distance_table(text, query)
    m = len(query)

    candidates = []
    for end in range(len(text) + 1):
        distance = table[end][m]
        if distance > limit:
            continue
        start = trace_start(table, text, query, end)
        if start < end:
            candidates.append(FuzzyHit(start, end, distance))

    return merge_overlapping(candidates)
