"""
Split-point search inside an oversized span.

The window of legal cuts is searched from its far end toward its near end,
one heuristic at a time, so the first piece gets as close to max_length
as a natural break allows. Every cut is then moved onto whitespace
so no token is ever broken.
"""

from typing import Callable, List, Optional, Tuple

from ..core.errors import validate_bounds
from .text import (
    NEWLINE,
    SENTENCE_PUNCT,
    WHITESPACE,
    BytesLike,
    as_bytes,
    is_upper,
    skip_whitespace,
)

# (text, i, window_start, span_end) -> is ``i`` a cut candidate
Heuristic = Callable[[BytesLike, int, int, int], bool]


def _paragraph_break(text: BytesLike, i: int, lower: int, end: int) -> bool:
    return i - 1 >= lower and i < end and text[i - 1] == NEWLINE and text[i] == NEWLINE


def _whitespace_run(text: BytesLike, i: int, lower: int, end: int) -> bool:
    return (
        i - 2 >= lower
        and i < end
        and text[i - 2] in WHITESPACE
        and text[i - 1] in WHITESPACE
        and text[i] in WHITESPACE
    )


def _newline(text: BytesLike, i: int, lower: int, end: int) -> bool:
    return i < end and text[i] == NEWLINE


def _sentence_start(text: BytesLike, i: int, lower: int, end: int) -> bool:
    if i >= end or text[i - 1] not in SENTENCE_PUNCT or text[i] not in WHITESPACE:
        return False
    j = skip_whitespace(text, i + 1, end)
    return j < end and is_upper(text[j])


def _any_whitespace(text: BytesLike, i: int, lower: int, end: int) -> bool:
    return i < end and text[i] in WHITESPACE


# Priority order: paragraph > triple whitespace > newline > ". X" > any space
HEURISTICS: List[Tuple[str, Heuristic]] = [
    ("paragraph", _paragraph_break),
    ("whitespace-run", _whitespace_run),
    ("newline", _newline),
    ("sentence-start", _sentence_start),
    ("whitespace", _any_whitespace),
]


def adjust_for_token_boundary(
    text: BytesLike, span_start: int, span_end: int, candidate: int
) -> Optional[int]:
    """
    Move ``candidate`` onto whitespace so the cut never lands inside a token.

    Prefers the nearest whitespace at or before the candidate (down to
    ``span_start + 1``), then the nearest one after it. Returns None when
    the span has no whitespace to cut on. Candidates on or outside the span
    edges are returned unchanged.
    """
    if candidate <= span_start or candidate >= span_end:
        return candidate

    j = candidate
    while j > span_start:
        if text[j] in WHITESPACE:
            return j
        j -= 1

    j = candidate
    while j < span_end:
        if text[j] in WHITESPACE:
            return j
        j += 1

    return None


def split_window(
    span_start: int, span_length: int, min_length: int, max_length: int
) -> Tuple[int, int]:
    """
    Return the (near, far) offsets bounding where a cut may fall.

    Both ends are inclusive; ``near == far`` is a one-point window.
    """
    span_end = span_start + span_length
    near = span_start + min_length
    far = min(span_end - min_length, span_start + max_length)
    return near, far


def locate_split(
    text: BytesLike,
    span_start: int,
    span_length: int,
    min_length: int,
    max_length: int,
) -> Optional[Tuple[int, str]]:
    """Like find_split() but also names the heuristic that produced the cut."""
    validate_bounds(min_length, max_length)
    if span_length <= max_length:
        return None

    data = as_bytes(text)
    span_end = span_start + span_length
    near, far = split_window(span_start, span_length, min_length, max_length)
    if near > far:
        return None

    candidate, strategy = far, "window-edge"
    for name, heuristic in HEURISTICS:
        hit = next(
            (i for i in range(far, near, -1) if heuristic(data, i, near, span_end)),
            None,
        )
        if hit is not None:
            candidate, strategy = hit, name
            break

    adjusted = adjust_for_token_boundary(data, span_start, span_end, candidate)
    if adjusted is None or not span_start < adjusted < span_end:
        return None
    return adjusted, strategy


def find_split(
    text: BytesLike,
    span_start: int,
    span_length: int,
    min_length: int,
    max_length: int,
) -> Optional[int]:
    """
    Find the best cut inside the span ``[span_start, span_start + span_length)``.

    Args:
        text: Bytes the span points into
        span_start: Absolute offset of the span
        span_length: Length of the span in bytes
        min_length: Minimum preferred piece length
        max_length: Maximum preferred piece length

    Returns:
        Absolute offset strictly inside the span where the first piece
        ends, or None when no cut is possible without breaking a token
        (or the span already fits).
    """
    found = locate_split(text, span_start, span_length, min_length, max_length)
    return found[0] if found is not None else None
