from __future__ import annotations

import pytest

from strcodec import MalformedInput, encode, lookup
from strcodec.base import EncodeResult

codec = lookup("ucs2")


@pytest.mark.parametrize("name", ["ucs2", "UCS-2", "utf16le", "UTF-16LE"])
def test_aliases(name: str) -> None:
    assert lookup(name) is codec


@pytest.mark.parametrize("text", ["", "hi", "€", "a\U0001F600", "\ud800"])
def test_matches_utf16le(text: str) -> None:
    expected = text.encode("utf-16-le", "surrogatepass")
    assert encode(text, "ucs2") == expected
    assert codec.byte_length(text) == len(expected)


def test_decode_keeps_surrogate_pairs() -> None:
    assert codec.decode(b"h\x00i\x00") == "hi"
    assert codec.decode("😀".encode("utf-16-le")) == "\ud83d\ude00"


def test_odd_length_input_is_malformed() -> None:
    with pytest.raises(MalformedInput) as excinfo:
        codec.decode(b"abc")
    assert excinfo.value.position == 2


def test_odd_window_leaves_last_byte() -> None:
    buf = bytearray(b"\xee" * 5)
    assert codec.encode(buf, "abc", 0, 5) == EncodeResult(4, 2)
    assert bytes(buf) == b"a\x00b\x00\xee"


def test_window_of_one_byte_writes_nothing() -> None:
    buf = bytearray(b"\xee")
    assert codec.encode(buf, "a") == EncodeResult(0, 0)
    assert bytes(buf) == b"\xee"
