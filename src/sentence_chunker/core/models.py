from typing import NamedTuple


class Span(NamedTuple):
    """An offset+length view into caller-owned bytes. Never holds the bytes."""

    start_offset: int
    length: int

    @property
    def end(self) -> int:
        """Exclusive end offset."""
        return self.start_offset + self.length

    def materialize(self, text: bytes) -> bytes:
        return bytes(text[self.start_offset : self.end])

    def to_dict(self) -> dict[str, int]:
        return {"start_offset": self.start_offset, "length": self.length}
