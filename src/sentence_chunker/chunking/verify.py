"""
Span sequence verification utilities.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.models import Span
from .text import WHITESPACE, BytesLike, as_bytes


def calculate_coverage(
    spans: Sequence[Tuple[int, int]], text_length: int
) -> Tuple[float, List[Tuple[int, int]]]:
    """
    Calculate text coverage from spans and identify gaps.

    Args:
        spans: Spans as (start_offset, length)
        text_length: Length of the text in bytes

    Returns:
        Tuple of (coverage_percentage, list_of_gaps)
        where gaps are (start, end) tuples of uncovered ranges
    """
    if text_length == 0:
        return 100.0, []

    # Create a list of covered ranges
    covered_ranges = []
    for start, length in spans:
        if length > 0:
            covered_ranges.append((start, start + length))

    if not covered_ranges:
        return 0.0, [(0, text_length)]

    # Sort ranges by start position
    covered_ranges.sort(key=lambda x: x[0])

    # Merge overlapping ranges
    merged_ranges = []
    current_start, current_end = covered_ranges[0]

    for start, end in covered_ranges[1:]:
        if start <= current_end:  # Overlapping or adjacent
            current_end = max(current_end, end)
        else:
            merged_ranges.append((current_start, current_end))
            current_start, current_end = start, end

    merged_ranges.append((current_start, current_end))

    covered = sum(end - start for start, end in merged_ranges)
    coverage_pct = (covered / text_length) * 100

    # Find gaps
    gaps = []
    last_end = 0

    for start, end in merged_ranges:
        if start > last_end:
            gaps.append((last_end, start))
        last_end = end

    # Check if there's a gap at the end
    if last_end < text_length:
        gaps.append((last_end, text_length))

    return coverage_pct, gaps


@dataclass
class SpanReport:
    """Result of verify_spans()."""

    span_count: int
    coverage_pct: float
    out_of_bounds: List[int] = field(default_factory=list)
    overlaps: List[int] = field(default_factory=list)
    non_whitespace_gaps: List[Tuple[int, int]] = field(default_factory=list)
    oversize: List[int] = field(default_factory=list)
    undersize: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Spans are in bounds, ordered, disjoint, and only skip whitespace."""
        return not (self.out_of_bounds or self.overlaps or self.non_whitespace_gaps)

    def to_dict(self) -> Dict:
        return {
            "ok": self.ok,
            "span_count": self.span_count,
            "coverage_pct": round(self.coverage_pct, 3),
            "out_of_bounds": self.out_of_bounds,
            "overlaps": self.overlaps,
            "non_whitespace_gaps": self.non_whitespace_gaps,
            "oversize": self.oversize,
            "undersize": self.undersize,
        }


def verify_spans(
    text: BytesLike,
    spans: Sequence[Tuple[int, int]],
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> SpanReport:
    """
    Check that ``spans`` partition ``text`` up to skipped whitespace.

    Length bounds are advisory, so spans outside [min_length, max_length]
    are listed but do not make the report fail.
    """
    data = as_bytes(text)
    text_length = len(data)
    items = [Span(*span) for span in spans]
    coverage_pct, gaps = calculate_coverage(items, text_length)
    report = SpanReport(span_count=len(items), coverage_pct=coverage_pct)

    previous_end = 0
    for idx, span in enumerate(items):
        if span.start_offset < 0 or span.length <= 0 or span.end > text_length:
            report.out_of_bounds.append(idx)
        if idx > 0 and span.start_offset < previous_end:
            report.overlaps.append(idx)
        previous_end = max(previous_end, span.end)

        if max_length is not None and span.length > max_length:
            report.oversize.append(idx)
        if min_length is not None and span.length < min_length:
            report.undersize.append(idx)

    for start, end in gaps:
        if any(byte not in WHITESPACE for byte in data[start:end]):
            report.non_whitespace_gaps.append((start, end))

    return report
