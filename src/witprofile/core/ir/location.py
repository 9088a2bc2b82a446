"""Source span tracking for profile syntax nodes.

Spans are half-open UTF-8 byte ranges into the source text. Every token
and every declaration carries one, so diagnostics can point back at the
exact text that produced them.
"""

from __future__ import annotations

from bisect import bisect_left
from itertools import accumulate

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _utf8_width(ch: str) -> int:
    code = ord(ch)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


class ByteOffsets:
    """
    Maps character indices of a ``str`` to UTF-8 byte offsets and back.

    ASCII text maps one to one and builds no table.
    """

    def __init__(self, text: str):
        self.text = text
        self._offsets: list[int] | None = None
        if not text.isascii():
            self._offsets = [0, *accumulate(_utf8_width(ch) for ch in text)]

    @property
    def size(self) -> int:
        """Length of the text in UTF-8 bytes."""
        return self.to_byte(len(self.text))

    def to_byte(self, index: int) -> int:
        if self._offsets is None:
            return index
        return self._offsets[index]

    def to_index(self, offset: int) -> int:
        """Character index at ``offset``; offsets inside a character round up."""
        if self._offsets is None:
            return min(offset, len(self.text))
        return min(bisect_left(self._offsets, offset), len(self.text))


class Span(BaseModel):
    """Byte range ``[start, end)`` into the UTF-8 encoded source text.

    Attributes:
        start: Byte offset of the first byte covered
        end: Byte offset just past the last byte covered
    """

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_order(self) -> Span:
        if self.start > self.end:
            raise ValueError(f"span start {self.start} is past its end {self.end}")
        return self

    @classmethod
    def eof(cls, text: str) -> Span:
        """Empty span marking the end of input."""
        size = ByteOffsets(text).size
        return cls(start=size, end=size)

    def extend_to(self, other: Span) -> Span:
        """Composite span from the start of this span to the end of ``other``."""
        return Span(start=self.start, end=other.end)

    def slice(self, text: str | bytes) -> str | bytes:
        """Covered text: raw bytes for a ``bytes`` source, decoded for a ``str``."""
        if isinstance(text, bytes):
            return text[self.start : self.end]
        offsets = ByteOffsets(text)
        return text[offsets.to_index(self.start) : offsets.to_index(self.end)]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


def line_column(text: str, offset: int) -> tuple[int, int]:
    """
    Convert a byte offset into a 1-indexed (line, column) pair.

    Columns count characters, not bytes. Offsets past the end of the text
    are clamped to the end.
    """
    return index_line_column(text, ByteOffsets(text).to_index(offset))


def index_line_column(text: str, index: int) -> tuple[int, int]:
    """(line, column) of a character index."""
    index = min(index, len(text))
    line = text.count("\n", 0, index) + 1
    line_start = text.rfind("\n", 0, index) + 1
    return line, index - line_start + 1
