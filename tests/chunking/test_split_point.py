"""Tests for split-point search inside oversized spans."""

import pytest

from sentence_chunker import InvalidBoundsError
from sentence_chunker.chunking.split_point import (
    adjust_for_token_boundary,
    find_split,
    locate_split,
    split_window,
)

pytestmark = pytest.mark.unit


class TestWindow:
    def test_window_capped_by_max_length(self):
        assert split_window(0, 1000, 50, 400) == (50, 400)

    def test_window_capped_by_tail_min(self):
        assert split_window(100, 450, 100, 400) == (200, 450)

    def test_empty_window_returns_none(self):
        text = b"word " * 20
        # near=60, far=min(100-60, 80)=40
        assert find_split(text, 0, 100, 60, 80) is None

    def test_one_point_window_still_cuts(self):
        text = b"word " * 24
        assert split_window(0, 120, 60, 100) == (60, 60)
        # text[60] starts a word, so the cut moves back onto the space
        assert locate_split(text, 0, 120, 60, 100) == (59, "window-edge")

    def test_span_that_fits_needs_no_cut(self):
        assert find_split(b"short text", 0, 10, 1, 10) is None

    def test_invalid_bounds(self):
        with pytest.raises(InvalidBoundsError):
            find_split(b"x" * 20, 0, 20, 10, 5)


class TestHeuristics:
    """Each heuristic wins when the higher-priority ones find nothing."""

    def test_paragraph_break(self, paragraph_text):
        assert locate_split(paragraph_text, 0, 1000, 50, 400) == (379, "paragraph")

    def test_whitespace_run(self):
        text = ("abcd " * 30 + "  " + "efgh " * 70).encode()
        assert locate_split(text, 0, len(text), 10, 300) == (151, "whitespace-run")

    def test_single_newline(self):
        text = ("word " * 20 + "\n" + "word " * 40).encode()
        assert locate_split(text, 0, len(text), 10, 200) == (100, "newline")

    def test_sentence_start(self):
        text = ("word " * 30 + "stop. Start " + "word " * 30).encode()
        assert locate_split(text, 0, len(text), 10, 250) == (155, "sentence-start")

    def test_lowercase_after_period_is_not_sentence_start(self):
        text = ("word " * 30 + "stop. start " + "word " * 30).encode()
        _, strategy = locate_split(text, 0, len(text), 10, 250)
        assert strategy == "whitespace"

    def test_any_whitespace_from_far_end(self):
        text = ("word " * 100).encode()
        assert locate_split(text, 0, 500, 10, 250) == (249, "whitespace")

    def test_window_edge_adjusted_backward(self):
        text = b"ab " + b"x" * 600
        assert locate_split(text, 0, len(text), 10, 300) == (2, "window-edge")

    def test_window_edge_adjusted_forward(self):
        text = b"x" * 600 + b" tail"
        assert find_split(text, 0, len(text), 10, 300) == 600

    def test_no_whitespace_at_all(self):
        assert find_split(b"a" * 1000, 0, 1000, 50, 400) is None

    def test_offsets_relative_to_span_start(self, paragraph_text):
        padded = b"prefix " + paragraph_text
        assert find_split(padded, 7, 1000, 50, 400) == 7 + 379


class TestTokenBoundary:
    def test_backward_to_whitespace(self):
        assert adjust_for_token_boundary(b"hello world", 0, 11, 8) == 5

    def test_forward_when_nothing_behind(self):
        assert adjust_for_token_boundary(b"hello world", 0, 11, 3) == 5

    def test_candidate_on_whitespace_kept(self):
        assert adjust_for_token_boundary(b"hello world", 0, 11, 5) == 5

    def test_edges_unchanged(self):
        assert adjust_for_token_boundary(b"hello world", 0, 11, 0) == 0
        assert adjust_for_token_boundary(b"hello world", 0, 11, 11) == 11

    def test_no_whitespace(self):
        assert adjust_for_token_boundary(b"abcdef", 0, 6, 3) is None
