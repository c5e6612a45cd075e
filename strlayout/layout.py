"""Byte order, text encoding and binary layouts of strings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "Endian",
    "Encoding",
    "Size",
    "FixedLength",
    "LengthPrefix",
    "ZeroEnded",
    "Layout",
    "fixed_length",
]


class Endian(Enum):
    """Byte order of multi-byte values."""

    LITTLE = "little"
    BIG = "big"


class Encoding(Enum):
    """Text encoding of the string data."""

    UTF8 = "UTF-8"
    UTF16 = "UTF-16"

    @property
    def unit_size(self) -> int:
        """Size in bytes of one code unit."""
        return 1 if self is Encoding.UTF8 else 2


class Size(Enum):
    """Width of a length prefix."""

    U8 = 1
    U16 = 2
    U32 = 4

    @property
    def width(self) -> int:
        """Width of the prefix in bytes."""
        return self.value

    @property
    def max(self) -> int:
        """Largest length the prefix can hold."""
        return (1 << (8 * self.value)) - 1


@dataclass(frozen=True)
class FixedLength:
    """Exactly ``size`` code units, padded with nulls.

    Unless ``allow_no_null`` is set, a null character must appear
    within the buffer.
    """

    size: int
    allow_no_null: bool = False

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"fixed length must not be negative, got {self.size}")


@dataclass(frozen=True)
class LengthPrefix:
    """A length in code units followed by the data; nulls are not allowed."""

    size: Size

    def __post_init__(self) -> None:
        if not isinstance(self.size, Size):
            raise TypeError(f"prefix size must be a Size, got {self.size!r}")


@dataclass(frozen=True)
class ZeroEnded:
    """The data followed by one null code unit."""


Layout = Union[FixedLength, LengthPrefix, ZeroEnded]


def fixed_length(size: int) -> FixedLength:
    """Fixed-length layout of ``size`` units that requires a null inside."""
    return FixedLength(size=size, allow_no_null=False)