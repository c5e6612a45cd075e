# strlayout

Read and write text strings in the binary layouts commonly found in file
formats and wire protocols. The package checks strictly where null
characters may appear, so a string that was cut short or padded does not
pass unnoticed.

## Layouts

Defined in `strlayout.layout`:

* **Fixed length**: `FixedLength(size, allow_no_null=False)`, or
  `fixed_length(size)` for the default. Exactly `size` code units (bytes for
  UTF-8, 16-bit words for UTF-16). On write the value is padded with nulls.
  On read everything from the first null on is dropped. Unless
  `allow_no_null=True`, a null must appear inside the buffer: on read a
  buffer with no null is rejected, and on write the value must be shorter
  than `size` units. A negative `size` raises `ValueError`. A size of 0
  reads as `""` without consuming any input.
* **Length prefixed**: `LengthPrefix(Size.U8 | Size.U16 | Size.U32)`.
  Pascal-style strings. The length in code units comes first, as a 1-, 2- or
  4-byte unsigned integer in the chosen byte order. Nulls are not allowed in
  the data. Passing anything other than a `Size` raises `TypeError`.
* **Zero ended**: `ZeroEnded()`. C-style strings followed by one null code
  unit.

Each layout combines with `Encoding.UTF8` or `Encoding.UTF16`, and with
`Endian.LITTLE` or `Endian.BIG`. `Encoding.unit_size` gives the bytes per
code unit. `Size.width` gives the prefix width in bytes, and `Size.max`
gives the largest length the prefix can hold. `Layout` is the union of the
three layout classes.

## Usage

The functions live in `strlayout.codec`:

```python
import io

from strlayout.codec import decode, encode, read_string, write_string
from strlayout.layout import Encoding, Endian, LengthPrefix, Size, ZeroEnded, fixed_length

data = encode("hello", Endian.LITTLE, Encoding.UTF8, LengthPrefix(Size.U16))
assert data == b"\x05\x00hello"
assert decode(data, Endian.LITTLE, Encoding.UTF8, LengthPrefix(Size.U16)) == "hello"

stream = io.BytesIO()
written = write_string(stream, "hi", Endian.BIG, Encoding.UTF16, ZeroEnded())
assert written == 6
stream.seek(0)
assert read_string(stream, Endian.BIG, Encoding.UTF16, ZeroEnded()) == "hi"

padded = encode("abc", Endian.LITTLE, Encoding.UTF8, fixed_length(8))
assert padded == b"abc\x00\x00\x00\x00\x00"
```

* `read_string` and `write_string` work on any binary stream. `write_string`
  returns the number of bytes written.
* `decode` reads one string from the start of a `bytes` object. Any bytes
  that follow it are ignored.
* `encode` returns the bytes of one string.

`strlayout.string.LayoutString` is a `str` subclass. It compares, hashes,
orders and formats like a plain string, and offers the same operations as
methods, plus JSON helpers:

```python
import io

from strlayout.layout import Encoding, Endian, ZeroEnded
from strlayout.string import LayoutString

stream = io.BytesIO()
value = LayoutString("name")
value.write(stream, Endian.LITTLE, Encoding.UTF8, ZeroEnded())
stream.seek(0)
again = LayoutString.read(stream, Endian.LITTLE, Encoding.UTF8, ZeroEnded())
assert again == "name"

text = value.to_json()                # '"name"'
parsed = LayoutString.from_json(text)
assert parsed == "name"
```

`from_json` raises `ValueError` if the JSON value is not a string.

## Errors

Defined in `strlayout.errors`. All derive from `CodecError`, which is a
subclass of `ValueError`:

* `InvalidEncodingError`: the bytes are not valid UTF-8 or UTF-16, or, on
  write, the value cannot be encoded (for example, a lone surrogate).
* `LayoutError`: the null-character rules are broken, or the value does not
  fit the fixed size or the length prefix.
* `IncompleteError`: the input ended before the string was complete. Its
  `needed` attribute holds the number of bytes that were missing from the
  read that failed.

Errors raised by the stream itself propagate unchanged. A stream that
accepts no bytes during a write raises `OSError`. An unknown layout object
raises `TypeError`.

## What this package does not do

It handles one string at a time. It has no way to describe whole records of
several fields, no command-line tool, and no file or network I/O of its
own beyond the streams you pass in.

## Running the tests

```
pip install -e ".[test]"
pytest
```