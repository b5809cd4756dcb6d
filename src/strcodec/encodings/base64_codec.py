"""Base64 text <-> bytes.

Writing text into a buffer parses Base64 (standard or URL-safe symbols,
anything else is skipped); reading bytes back produces standard padded Base64.
"""

from __future__ import annotations

import base64
from types import MappingProxyType
from typing import Any

from strcodec.base import Codec, EncodeResult, WritableBuffer, as_bytes, window_length
from strcodec.encodings.aliases import Encoding
from strcodec.units import code_units

_B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_PAD = 64
_B64_VALUES = MappingProxyType(
    {
        **{ord(ch): idx for idx, ch in enumerate(_B64_ALPHABET)},
        ord("-"): 62,
        ord("_"): 63,
        ord("="): _PAD,
    }
)


def _symbols(units: list[int]) -> list[tuple[int, int]]:
    """Return ``(position, value)`` for every accepted symbol, in order."""
    out: list[tuple[int, int]] = []
    for idx, unit in enumerate(units):
        value = _B64_VALUES.get(unit)
        if value is not None:
            out.append((idx, value))
    return out


def _group_bytes(values: list[int]) -> bytes:
    data: list[int] = []
    for value in values:
        if value == _PAD:
            break
        data.append(value)
    if len(data) < 2:
        return b""
    acc = 0
    for value in data:
        acc = (acc << 6) | value
    acc <<= 6 * (4 - len(data))
    return acc.to_bytes(3, "big")[: len(data) - 1]


class Base64Codec(Codec):
    __slots__ = ()

    encoding = Encoding.BASE64
    name = Encoding.BASE64.value

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        end = offset + window_length(buffer, offset, length)
        units = code_units(text)
        symbols = _symbols(units)
        pos = offset
        for idx in range(0, len(symbols), 4):
            group = symbols[idx : idx + 4]
            raw = _group_bytes([value for _, value in group])
            if pos + len(raw) > end:
                return EncodeResult(pos - offset, group[0][0])
            buffer[pos : pos + len(raw)] = raw
            pos += len(raw)
        return EncodeResult(pos - offset, len(units))

    def decode(self, data: Any) -> str:
        return base64.b64encode(as_bytes(data)).decode("ascii")

    def byte_length(self, text: str) -> int:
        valid = sum(1 for _, value in _symbols(code_units(text)) if value != _PAD)
        return valid * 6 // 8


codec = Base64Codec()
