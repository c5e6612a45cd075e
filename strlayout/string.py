"""A string type that reads and writes itself in binary layouts."""

from __future__ import annotations

import json
from typing import BinaryIO

from strlayout.codec import read_string, write_string
from strlayout.layout import Encoding, Endian, Layout

__all__ = ["LayoutString"]


class LayoutString(str):
    """A ``str`` that can be read from and written to binary layouts.

    It compares, hashes, orders and formats exactly like the plain string
    it holds. Reading and writing check that no null character hides in
    the middle of the value, so a truncated or padded string never passes
    silently.
    """

    __slots__ = ()

    @classmethod
    def read(
        cls, stream: BinaryIO, endian: Endian, encoding: Encoding, layout: Layout
    ) -> LayoutString:
        """Read one value laid out as ``layout`` from a binary stream."""
        return cls(read_string(stream, endian, encoding, layout))

    def write(
        self, stream: BinaryIO, endian: Endian, encoding: Encoding, layout: Layout
    ) -> int:
        """Write the value laid out as ``layout``; return the number of bytes written."""
        return write_string(stream, str(self), endian, encoding, layout)

    def to_json(self) -> str:
        """Serialise as a plain JSON string."""
        return json.dumps(str(self))

    @classmethod
    def from_json(cls, text: str) -> LayoutString:
        """Parse a JSON string value."""
        value = json.loads(text)
        if not isinstance(value, str):
            raise ValueError(f"expected a JSON string, got {type(value).__name__}")
        return cls(value)