"""Exceptions raised while reading or writing laid-out strings."""

from __future__ import annotations

__all__ = [
    "CodecError",
    "InvalidEncodingError",
    "LayoutError",
    "IncompleteError",
]


class CodecError(ValueError):
    """Base class for every failure to read or write a laid-out string."""


class InvalidEncodingError(CodecError):
    """The data is not valid UTF-8 or UTF-16."""


class LayoutError(CodecError):
    """The data breaks a rule of the layout.

    Examples are a misplaced null character, a missing one, or a value
    too long for its field.
    """


class IncompleteError(CodecError):
    """The stream ended before the layout was complete."""

    def __init__(self, needed: int) -> None:
        self.needed = needed
        super().__init__(f"not enough data: {needed} more byte(s) needed")