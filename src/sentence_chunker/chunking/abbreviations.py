"""
Known abbreviations whose trailing period does not end a sentence.
"""

from .text import BytesLike

# Stored lowercase; the word before the period is lowercased for lookup.
ABBREVIATIONS: frozenset[bytes] = frozenset(
    {
        b"mr",  # Mister
        b"mrs",  # Mistress
        b"ms",
        b"dr",  # Doctor
        b"st",  # Street or Saint
        b"etc",
        b"i.e",  # id est
        b"e.g",  # exempli gratia
        b"vs",  # versus
        b"inc",  # Incorporated
        b"corp",  # Corporation
        b"ltd",  # Limited
        b"co",  # Company
        b"jr",  # Junior
        b"sr",  # Senior
        b"ph.d",  # Doctor of Philosophy
    }
)

# Words at least this long are never looked up
MAX_WORD_LENGTH = 32


def is_abbreviation(word: BytesLike) -> bool:
    """Case-insensitive membership test against ABBREVIATIONS."""
    if not word or len(word) >= MAX_WORD_LENGTH:
        return False
    return bytes(word).lower() in ABBREVIATIONS
