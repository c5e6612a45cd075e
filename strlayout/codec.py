"""Reading and writing strings in fixed, length-prefixed and zero-ended layouts."""

from __future__ import annotations

import io
from enum import Enum, auto
from typing import BinaryIO

from strlayout.errors import IncompleteError, InvalidEncodingError, LayoutError
from strlayout.layout import Encoding, Endian, FixedLength, Layout, LengthPrefix, ZeroEnded

__all__ = ["read_string", "write_string", "decode", "encode"]

_CHUNK = 1 << 16


class _Null(Enum):
    REQUIRED = auto()
    ACCEPTED = auto()
    REJECTED = auto()


def _codec_name(encoding: Encoding, endian: Endian) -> str:
    if encoding is Encoding.UTF8:
        return "utf-8"
    return "utf-16-le" if endian is Endian.LITTLE else "utf-16-be"


def _null_offset(buf: bytes, unit: int) -> int:
    """Byte offset of the first null code unit, or the buffer length."""
    if unit == 1:
        pos = buf.find(0)
        return len(buf) if pos < 0 else pos
    try:
        return memoryview(buf).cast("H").tolist().index(0) * unit
    except ValueError:
        return len(buf)


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    chunks = []
    remaining = count
    while remaining:
        chunk = stream.read(min(remaining, _CHUNK))
        if not chunk:
            raise IncompleteError(remaining)
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_until_null(stream: BinaryIO, unit: int) -> bytes:
    data = bytearray()
    while True:
        piece = _read_exact(stream, unit)
        data += piece
        if not any(piece):
            return bytes(data)


def _write_all(stream: BinaryIO, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = stream.write(view)
        written = len(view) if written is None else written
        if written == 0:
            raise OSError("failed to write whole buffer")
        view = view[written:]


def read_string(stream: BinaryIO, endian: Endian, encoding: Encoding, layout: Layout) -> str:
    """Read one string laid out as ``layout`` from a binary stream."""
    unit = encoding.unit_size
    if isinstance(layout, FixedLength):
        policy = _Null.ACCEPTED if layout.allow_no_null else _Null.REQUIRED
        count = layout.size
    elif isinstance(layout, LengthPrefix):
        prefix = _read_exact(stream, layout.size.width)
        policy = _Null.REJECTED
        count = int.from_bytes(prefix, endian.value)
    elif isinstance(layout, ZeroEnded):
        policy = _Null.ACCEPTED
        count = None
    else:
        raise TypeError(f"unsupported layout {layout!r}")

    if count is None:
        raw = _read_until_null(stream, unit)
    elif count == 0:
        return ""
    else:
        raw = _read_exact(stream, count * unit)

    end = _null_offset(raw, unit)
    if policy is _Null.REQUIRED and end == len(raw):
        raise LayoutError("null character must be present in the buffer")
    if policy is _Null.REJECTED and end != len(raw):
        raise LayoutError("null character must not be present in the buffer")

    try:
        return raw[:end].decode(_codec_name(encoding, endian))
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(f"Invalid {encoding.value}") from exc


def write_string(
    stream: BinaryIO, value: str, endian: Endian, encoding: Encoding, layout: Layout
) -> int:
    """Write ``value`` laid out as ``layout``; return the number of bytes written."""
    unit = encoding.unit_size
    try:
        data = value.encode(_codec_name(encoding, endian))
    except UnicodeEncodeError as exc:
        raise InvalidEncodingError(f"Invalid {encoding.value}") from exc

    if _null_offset(data, unit) != len(data):
        raise LayoutError("null character must not be present in the string")
    length = len(data) // unit

    if isinstance(layout, LengthPrefix):
        limit = layout.size.max
        if length > limit:
            raise LayoutError(f"encoded string length cannot exceed {limit} units")
        pieces = [length.to_bytes(layout.size.width, endian.value), data]
    elif isinstance(layout, ZeroEnded):
        pieces = [data, bytes(unit)]
    elif isinstance(layout, FixedLength):
        if length > layout.size:
            raise LayoutError(f"encoded string length cannot exceed {layout.size} units")
        if not layout.allow_no_null and length >= layout.size:
            raise LayoutError("null character must fit within the fixed buffer")
        pieces = [data, bytes((layout.size - length) * unit)]
    else:
        raise TypeError(f"unsupported layout {layout!r}")

    for piece in pieces:
        _write_all(stream, piece)
    return sum(len(piece) for piece in pieces)


def decode(data: bytes, endian: Endian, encoding: Encoding, layout: Layout) -> str:
    """Read one string from the start of ``data``."""
    return read_string(io.BytesIO(data), endian, encoding, layout)


def encode(value: str, endian: Endian, encoding: Encoding, layout: Layout) -> bytes:
    """Return the bytes of ``value`` laid out as ``layout``."""
    buffer = io.BytesIO()
    write_string(buffer, value, endian, encoding, layout)
    return buffer.getvalue()