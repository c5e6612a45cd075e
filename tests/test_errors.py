import pytest

from strlayout.codec import decode, encode
from strlayout.errors import (
    CodecError,
    IncompleteError,
    InvalidEncodingError,
    LayoutError,
)
from strlayout.layout import Encoding, Endian, LengthPrefix, Size, ZeroEnded


def test_incomplete_error_keeps_needed_count():
    err = IncompleteError(7)
    assert err.needed == 7
    assert "7" in str(err)


def test_incomplete_prefix_reports_prefix_width():
    with pytest.raises(IncompleteError) as exc:
        decode(b"", Endian.LITTLE, Encoding.UTF8, LengthPrefix(Size.U32))
    assert exc.value.needed == 4
    assert str(exc.value.needed) in str(exc.value)


def test_incomplete_is_caught_as_codec_error():
    with pytest.raises(CodecError):
        decode(b"abc", Endian.LITTLE, Encoding.UTF8, ZeroEnded())


def test_invalid_encoding_is_caught_as_value_error():
    with pytest.raises(ValueError) as exc:
        decode(b"\x03\xe2\x28\xa1", Endian.LITTLE, Encoding.UTF8, LengthPrefix(Size.U8))
    assert isinstance(exc.value, InvalidEncodingError)
    assert "UTF-8" in str(exc.value)


def test_layout_error_for_null_in_string():
    with pytest.raises(CodecError) as exc:
        encode("a\x00b", Endian.BIG, Encoding.UTF16, ZeroEnded())
    assert isinstance(exc.value, LayoutError)
    assert not isinstance(exc.value, IncompleteError)