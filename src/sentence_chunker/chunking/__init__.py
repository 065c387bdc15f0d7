"""
Sentence chunking.

Two passes over caller-owned bytes:
- scan(): sentence boundary detection (decimals, abbreviations, list markers)
- normalize(): merge short spans, split long ones at natural breaks without
  cutting tokens
"""

from .abbreviations import ABBREVIATIONS, is_abbreviation
from .boundaries import is_sentence_boundary, scan
from .engine import chunk_text, materialize, normalize
from .split_point import adjust_for_token_boundary, find_split, locate_split
from .verify import SpanReport, calculate_coverage, verify_spans

__all__ = [
    "ABBREVIATIONS",
    "SpanReport",
    "adjust_for_token_boundary",
    "calculate_coverage",
    "chunk_text",
    "find_split",
    "is_abbreviation",
    "is_sentence_boundary",
    "locate_split",
    "materialize",
    "normalize",
    "scan",
    "verify_spans",
]
