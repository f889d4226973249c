"""
Compile a literal query into a whitespace-tolerant regular expression.

Text extracted from PDFs often carries spaces in the middle of words or
drops them between words. With flexible whitespace on, ``\\s*`` is allowed
between every character of the query so both cases still match.
"""
import re
from typing import Iterator, Optional, Tuple

# Above this many non-whitespace characters only gaps between words flex
FLEXIBLE_CHAR_LIMIT = 200


def compile_pattern(query: str, case_sensitive: bool = False,
                    flexible_whitespace: bool = True) -> Optional[re.Pattern]:
    """
    Build the pattern for a query.

    Args:
        query: Raw query text, trimmed before compiling
        case_sensitive: Match letter case exactly
        flexible_whitespace: Tolerate whitespace differences

    Returns:
        Compiled pattern, or None if the query is blank
    """
    trimmed = query.strip()
    if not trimmed:
        return None

    flags = 0 if case_sensitive else re.IGNORECASE

    if not flexible_whitespace:
        return re.compile(re.escape(trimmed), flags)

    chars = [c for c in trimmed if not c.isspace()]

    if len(chars) > FLEXIBLE_CHAR_LIMIT:
        tokens = trimmed.split()
        return re.compile(r"\s+".join(re.escape(t) for t in tokens), flags)

    return re.compile(r"\s*".join(re.escape(c) for c in chars), flags)


def find_all(pattern: re.Pattern, buffer: str) -> Iterator[Tuple[int, int]]:
    """
    Scan a buffer for every non-overlapping match.

    Scanning resumes right after each match; a zero-length match moves
    the scan forward by one character.

    Yields:
        (start, end) buffer offsets
    """
    pos = 0
    while pos <= len(buffer):
        m = pattern.search(buffer, pos)
        if m is None:
            break
        start, end = m.span()
        yield start, end
        pos = end if end > start else end + 1
