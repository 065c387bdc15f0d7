"""Tests for span coverage and verification helpers."""

import pytest

from sentence_chunker import Span, scan
from sentence_chunker.chunking.verify import calculate_coverage, verify_spans

pytestmark = pytest.mark.unit


class TestCalculateCoverage:
    def test_full_coverage(self):
        assert calculate_coverage([Span(0, 5), Span(5, 5)], 10) == (100.0, [])

    def test_gaps_reported(self):
        pct, gaps = calculate_coverage([Span(2, 3), Span(7, 1)], 10)
        assert pct == pytest.approx(40.0)
        assert gaps == [(0, 2), (5, 7), (8, 10)]

    def test_no_spans(self):
        assert calculate_coverage([], 4) == (0.0, [(0, 4)])

    def test_empty_text(self):
        assert calculate_coverage([], 0) == (100.0, [])


class TestVerifySpans:
    def test_scan_output_is_ok(self):
        text = b"First. Second one!  Third?"
        report = verify_spans(text, scan(text))
        assert report.ok
        assert report.span_count == 3

    def test_overlap_detected(self):
        report = verify_spans(b"abcdefgh", [Span(0, 5), Span(3, 5)])
        assert report.overlaps == [1]
        assert not report.ok

    def test_non_whitespace_gap_detected(self):
        report = verify_spans(b"abc def", [Span(0, 2), Span(4, 3)])
        assert report.non_whitespace_gaps == [(2, 4)]
        assert not report.ok

    def test_out_of_bounds_detected(self):
        report = verify_spans(b"abc", [Span(0, 10)])
        assert report.out_of_bounds == [0]

    def test_length_bounds_are_advisory(self):
        report = verify_spans(b"ab cdefgh", [Span(0, 2), Span(3, 6)], min_length=3, max_length=5)
        assert report.ok
        assert report.undersize == [0]
        assert report.oversize == [1]
        assert report.to_dict()["ok"] is True
