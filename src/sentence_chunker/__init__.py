"""Byte-level sentence segmentation with length normalization."""

from .chunking.boundaries import scan
from .chunking.engine import chunk_text, materialize, normalize
from .core.errors import InvalidBoundsError
from .core.models import Span

__version__ = "0.1.1"

__all__ = [
    "__version__",
    "InvalidBoundsError",
    "Span",
    "chunk_text",
    "materialize",
    "normalize",
    "scan",
]
