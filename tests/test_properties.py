from __future__ import annotations

import pytest

from strcodec import encode, lookup
from strcodec.units import code_units, from_code_units, unit_length

SAMPLES: dict[str, list[str]] = {
    "utf8": [
        "",
        "hello",
        "héllo wörld",
        "日本語テキスト",
        "a\U0001F600b\U0001F680",
        "\ud83d\ude00",
        "lone \ud800 high",
        "\udfff",
    ],
    "ascii": ["", "plain ascii", "\x00\x7f", "déjà"],
    "base64": ["", "Zg==", "Zm8=", "Zm9vYmFy", "AAECAwQFBgcICQ==", "Zm9v\r\nYmFy"],
    "ucs2": ["", "abc", "a\U0001F600", "\ud800"],
    "hex": ["", "00ff", "deadBEEF", "0123456789abcdef"],
    "binary_string": [
        "",
        "\x00",
        "\u0101",
        "\x00\u0102",
        "\u0101\u0203",
        "\x00\u0102\u0304\u0506",
    ],
    "binary_string_ie": ["", " !\"", "\u011f", "\x20\x21\u0100\u011f"],
}

ROUND_TRIP: dict[str, list[str]] = {
    "utf8": ["", "hello", "日本語", "\ud83d\ude00", "x\ud800y"],
    "ascii": ["", "plain", "\x00\x7f"],
    "base64": ["", "Zg==", "Zm8=", "Zm9vYmFy", "AAECAwQFBgcICQ=="],
    "ucs2": ["", "abc", "\ud83d\ude00", "\udfff"],
    "hex": ["", "00ff", "deadbeef"],
    "binary_string": ["", "\u01ff", "\x00\uffff", "\u0101\u0203"],
    "binary_string_ie": ["", " ~", "\u011f\u0020"],
}


def _cases(table: dict[str, list[str]]) -> list[tuple[str, str]]:
    return [(name, text) for name, texts in table.items() for text in texts]


@pytest.mark.parametrize("name,text", _cases(SAMPLES))
def test_byte_length_matches_unbounded_encode(name: str, text: str) -> None:
    codec = lookup(name)
    buf = bytearray(unit_length(text) * 4 + 8)
    result = codec.encode(buf, text)
    assert result.bytes_written == codec.byte_length(text)
    assert result.units_consumed == unit_length(text)


@pytest.mark.parametrize("offset", [0, 3])
@pytest.mark.parametrize("name,text", _cases(SAMPLES))
def test_truncation_stays_inside_window(name: str, text: str, offset: int) -> None:
    codec = lookup(name)
    full = codec.byte_length(text)
    units = code_units(text)
    for size in range(full + 1):
        buf = bytearray(b"\xee" * (offset + size + 4))
        result = codec.encode(buf, text, offset, size)
        assert result.bytes_written <= size
        assert result.units_consumed <= len(units)
        assert bytes(buf[:offset]) == b"\xee" * offset
        assert bytes(buf[offset + size :]) == b"\xee" * 4
        written = bytes(buf[offset : offset + result.bytes_written])
        prefix = from_code_units(units[: result.units_consumed])
        assert encode(prefix, name) == written


@pytest.mark.parametrize("name,text", _cases(ROUND_TRIP))
def test_round_trip(name: str, text: str) -> None:
    codec = lookup(name)
    assert codec.decode(encode(text, name)) == text
