"""
Byte-class helpers shared by the scanner and the split-point finder.

Everything here works on raw bytes (ints when indexed). Multi-byte UTF-8
sequences are never decoded, so non-ASCII punctuation is ordinary text.
"""

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

# bytes.isspace(): space, \t, \n, \r, \v, \f
WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")
SENTENCE_PUNCT = frozenset(b".?!")
# Quotes/brackets that stay attached to the sentence they close
CLOSERS = frozenset(b"\"')]}")

NEWLINE = ord("\n")
PERIOD = ord(".")


def as_bytes(text: Optional[BytesLike]) -> BytesLike:
    """Return an indexable byte view of ``text`` without copying it."""
    if text is None:
        return b""
    if isinstance(text, str):
        raise TypeError(
            "text must be bytes-like; encode str (e.g. text.encode('utf-8')) first"
        )
    if isinstance(text, memoryview) and text.format != "B":
        return text.cast("B")
    return text


def is_digit(byte: int) -> bool:
    return 48 <= byte <= 57


def is_upper(byte: int) -> bool:
    return 65 <= byte <= 90


def is_lower(byte: int) -> bool:
    return 97 <= byte <= 122


def is_alpha(byte: int) -> bool:
    return is_upper(byte) or is_lower(byte)


def skip_whitespace(text: BytesLike, start: int, end: int) -> int:
    """Index of the first non-whitespace byte in [start, end), or ``end``."""
    j = start
    while j < end and text[j] in WHITESPACE:
        j += 1
    return j


def is_just_digits(text: BytesLike, start: int, end: int) -> bool:
    """True if text[start:end] is non-empty and all ASCII digits."""
    if end <= start:
        return False
    for pos in range(start, end):
        if not is_digit(text[pos]):
            return False
    return True
