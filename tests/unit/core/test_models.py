"""Tests for Span and bounds validation."""

import pytest

from sentence_chunker.core.errors import InvalidBoundsError, validate_bounds
from sentence_chunker.core.models import Span

pytestmark = pytest.mark.unit


class TestSpan:
    def test_end_and_materialize(self):
        span = Span(4, 5)
        assert span.end == 9
        assert span.materialize(b"say hello world") == b"hello"

    def test_is_immutable(self):
        span = Span(0, 3)
        with pytest.raises(AttributeError):
            span.length = 4  # type: ignore[misc]
        assert span._replace(length=4) == Span(0, 4)

    def test_to_dict(self):
        assert Span(1, 2).to_dict() == {"start_offset": 1, "length": 2}


class TestValidateBounds:
    def test_valid(self):
        validate_bounds(0, 1)
        validate_bounds(5, 5)

    @pytest.mark.parametrize("min_length,max_length", [(-1, 5), (0, 0), (6, 5)])
    def test_invalid(self, min_length, max_length):
        with pytest.raises(InvalidBoundsError):
            validate_bounds(min_length, max_length)
