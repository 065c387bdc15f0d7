"""
Boundary detection: first pass that cuts raw bytes into sentence spans.

A single left-to-right scan. Each run of terminal punctuation is one
candidate boundary anchored at its last byte; the anchor is then checked
against the decimal, abbreviation/initial and ordinal-list exceptions.
"""

from typing import List, Optional

from ..core.models import Span
from .abbreviations import MAX_WORD_LENGTH, is_abbreviation
from .text import (
    CLOSERS,
    PERIOD,
    SENTENCE_PUNCT,
    WHITESPACE,
    BytesLike,
    as_bytes,
    is_alpha,
    is_digit,
    is_just_digits,
    is_lower,
    is_upper,
    skip_whitespace,
)


def _word_start(text: BytesLike, i: int, stop_at_period: bool = False) -> int:
    """
    Start index of the word ending right before index ``i``.

    The walk covers at most MAX_WORD_LENGTH bytes, so a word that long or
    longer comes back clipped to exactly MAX_WORD_LENGTH.
    """
    start = i
    floor = max(0, i - MAX_WORD_LENGTH)
    while start > floor:
        prev = text[start - 1]
        if prev in WHITESPACE or (stop_at_period and prev == PERIOD):
            break
        start -= 1
    return start


def _is_marker_number(text: BytesLike, start: int, end: int) -> bool:
    # Clipped words are never markers
    return end - start < MAX_WORD_LENGTH and is_just_digits(text, start, end)


def matches_abbreviation(text: BytesLike, i: int, length: int) -> bool:
    """
    Check whether the period at ``i`` closes an abbreviation or an initial.

    The preceding word is bounded by the nearest whitespace, so "e.g" and
    "Ph.D" are looked up whole.
    """
    if i == 0 or text[i - 1] in WHITESPACE:
        return False

    next_byte: Optional[int] = text[i + 1] if i + 1 < length else None

    # "e.g.is": a letter right after the period
    if next_byte is not None and is_alpha(next_byte):
        return True

    word_start = _word_start(text, i)
    word_len = i - word_start

    if word_len == 1:
        # Initial: "J. Smith"
        if is_upper(text[word_start]):
            return True
        # Single character glued to what follows: "a.)"
        if next_byte is not None and next_byte not in WHITESPACE:
            return True

    return is_abbreviation(text[word_start:i])


def _follows_list_marker(text: BytesLike, word_start: int) -> bool:
    """True if the word at ``word_start`` comes right after another "N." marker."""
    k = word_start - 1
    if k < 0 or text[k] not in WHITESPACE:
        return False
    while k >= 0 and text[k] in WHITESPACE:
        k -= 1
    if k < 0 or text[k] != PERIOD:
        return False
    prev_start = _word_start(text, k, stop_at_period=True)
    return _is_marker_number(text, prev_start, k)


def _is_list_marker(text: BytesLike, i: int, length: int) -> bool:
    """
    Ordinal/list marker check for the period at ``i``.

    A digits-only word ("1.") is not a boundary when the next non-whitespace
    byte is a digit or lowercase letter ("1. 2", "1. next"), when nothing
    follows it, or when it continues a run of markers ("1. 2. 3. Go").
    """
    word_start = _word_start(text, i, stop_at_period=True)
    if not _is_marker_number(text, word_start, i):
        return False

    j = skip_whitespace(text, i + 1, length)
    if j >= length:
        return True
    if is_digit(text[j]) or is_lower(text[j]):
        return True
    return _follows_list_marker(text, word_start)


def is_sentence_boundary(text: BytesLike, i: int, length: int) -> bool:
    """
    Decide whether the terminal punctuation at ``i`` ends a sentence.

    Exceptions are tried in order: decimal, abbreviation/initial, ordinal
    list marker. Only "." can be suppressed; "?" and "!" always end a
    sentence.
    """
    if text[i] != PERIOD:
        return True

    # 1) Decimal: "3.14"
    if 0 < i < length - 1 and is_digit(text[i - 1]) and is_digit(text[i + 1]):
        return False

    # 2) Abbreviations and initials: "Dr.", "J."
    if matches_abbreviation(text, i, length):
        return False

    # 3) Ordinal lists: "1.", "2."
    if _is_list_marker(text, i, length):
        return False

    return True


def consume_punctuation_run(text: BytesLike, i: int, length: int) -> int:
    """Index of the last byte in the run of terminal punctuation starting at ``i``."""
    while i + 1 < length and text[i + 1] in SENTENCE_PUNCT:
        i += 1
    return i


def consume_trailing_closers(text: BytesLike, i: int, length: int) -> int:
    """Extend a boundary at ``i`` over closing quotes/brackets and more punctuation."""
    while i + 1 < length:
        next_byte = text[i + 1]
        if next_byte in CLOSERS or next_byte in SENTENCE_PUNCT:
            i += 1
        else:
            break
    return i


def scan(text: Optional[BytesLike]) -> List[Span]:
    """
    Split ``text`` into ordered, non-overlapping sentence spans.

    Whitespace after each boundary is skipped and belongs to no span;
    leading whitespace of the text stays in the first span. Unterminated
    trailing text becomes the final span.

    Args:
        text: Raw bytes. ``None`` or empty input yields no spans.

    Returns:
        List of Span in ascending offset order.
    """
    data = as_bytes(text)
    length = len(data)
    spans: List[Span] = []
    if length == 0:
        return spans

    start_off = 0
    i = 0
    while i < length:
        if data[i] not in SENTENCE_PUNCT:
            i += 1
            continue

        last_punct = consume_punctuation_run(data, i, length)
        if not is_sentence_boundary(data, last_punct, length):
            # Not a boundary -> the run is ordinary text
            i = last_punct + 1
            continue

        boundary_end = consume_trailing_closers(data, last_punct, length) + 1
        if boundary_end > start_off:
            spans.append(Span(start_off, boundary_end - start_off))

        i = boundary_end
        start_off = skip_whitespace(data, boundary_end, length)

    # Capture leftover from [start_off..end]
    if start_off < length:
        spans.append(Span(start_off, length - start_off))

    return spans
