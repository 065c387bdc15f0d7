"""
Second pass: length normalization of sentence spans.

Spans shorter than ``min_length`` are glued to a neighbour, spans longer
than ``max_length`` are cut at natural breaks. Both bounds are advisory:
when no merge or cut is possible the span is emitted as-is.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.errors import validate_bounds
from ..core.logging import log
from ..core.models import Span
from .boundaries import scan
from .split_point import locate_split
from .text import BytesLike, as_bytes


def _split_oversized(
    text: BytesLike, span: Span, min_length: int, max_length: int
) -> Iterator[Span]:
    """Cut ``span`` into pieces of at most ``max_length`` where possible."""
    remaining = span
    while remaining.length > max_length:
        found = locate_split(
            text, remaining.start_offset, remaining.length, min_length, max_length
        )
        if found is None:
            log.debug(
                "chunk.split.none",
                start_offset=remaining.start_offset,
                length=remaining.length,
                max_length=max_length,
            )
            break

        split_pt, strategy = found
        log.debug("chunk.split", offset=split_pt, strategy=strategy)
        yield Span(remaining.start_offset, split_pt - remaining.start_offset)
        remaining = Span(split_pt, remaining.end - split_pt)

    yield remaining


def normalize(
    text: Optional[BytesLike],
    spans: Sequence[Tuple[int, int]],
    min_length: int,
    max_length: int,
) -> List[Span]:
    """
    Merge short spans and split long ones.

    Strategy per input span:
    1. In range: passed through
    2. Too short: extend the previous output span if the result fits,
       else merge forward with the next input span if that fits,
       else emit unchanged
    3. Too long: repeatedly cut at the best split point; an uncuttable
       remainder is emitted oversized

    Args:
        text: Bytes the spans point into
        spans: Ordered spans, usually the output of scan()
        min_length: Minimum preferred span length in bytes
        max_length: Maximum preferred span length in bytes

    Returns:
        New list of spans covering exactly the input spans' byte ranges
        (plus any gaps absorbed by merges).

    Raises:
        InvalidBoundsError: if the bounds are negative, zero-width or inverted
    """
    validate_bounds(min_length, max_length)
    data = as_bytes(text)

    items = [Span(*span) for span in spans]
    out: List[Span] = []
    count = len(items)
    i = 0

    while i < count:
        current = items[i]

        # CASE 1: length within [min_length, max_length]
        if min_length <= current.length <= max_length:
            out.append(current)

        # CASE 2: too short => glue to previous output, else to next input
        elif current.length < min_length:
            if out and current.end - out[-1].start_offset <= max_length:
                last = out[-1]
                out[-1] = last._replace(length=current.end - last.start_offset)
            elif i + 1 < count and items[i + 1].end - current.start_offset <= max_length:
                out.append(
                    Span(current.start_offset, items[i + 1].end - current.start_offset)
                )
                i += 1  # next span is consumed by the merge
            else:
                out.append(current)

        # CASE 3: too long => split
        else:
            out.extend(_split_oversized(data, current, min_length, max_length))

        i += 1

    log.debug(
        "chunk.normalize.done",
        spans_in=count,
        spans_out=len(out),
        min_length=min_length,
        max_length=max_length,
    )
    return out


def chunk_text(
    text: Optional[BytesLike],
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> List[Span]:
    """Run scan() then normalize(), filling missing bounds from settings."""
    from ..core.config import SETTINGS

    if min_length is None:
        min_length = SETTINGS.CHUNKER_MIN_LENGTH
    if max_length is None:
        max_length = SETTINGS.CHUNKER_MAX_LENGTH

    first_pass = scan(text)
    log.debug("chunk.scan.done", spans=len(first_pass))
    return normalize(text, first_pass, min_length, max_length)


def materialize(text: Optional[BytesLike], spans: Iterable[Tuple[int, int]]) -> List[bytes]:
    """Copy out the bytes each span points at."""
    data = as_bytes(text)
    return [Span(*span).materialize(data) for span in spans]
