"""Hex: two hex digits per byte, lower-case on output, either case on input."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from strcodec.base import Codec, EncodeResult, WritableBuffer, as_bytes, window_length
from strcodec.encodings.aliases import Encoding
from strcodec.errors import MalformedInput
from strcodec.units import code_units

_HEX_DIGITS = "0123456789abcdef"
_HEX_VALUES = MappingProxyType(
    {
        **{ord(ch): idx for idx, ch in enumerate(_HEX_DIGITS)},
        **{ord(ch): idx for idx, ch in enumerate(_HEX_DIGITS.upper())},
    }
)


def _parse(units: list[int]) -> bytes:
    if len(units) % 2:
        raise MalformedInput("odd-length hex string", len(units) - 1)
    out = bytearray()
    for idx in range(0, len(units), 2):
        high = _HEX_VALUES.get(units[idx])
        if high is None:
            raise MalformedInput("non-hex digit", idx)
        low = _HEX_VALUES.get(units[idx + 1])
        if low is None:
            raise MalformedInput("non-hex digit", idx + 1)
        out.append((high << 4) | low)
    return bytes(out)


class HexCodec(Codec):
    __slots__ = ()

    encoding = Encoding.HEX
    name = Encoding.HEX.value

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        data = _parse(code_units(text))
        count = min(len(data), window_length(buffer, offset, length))
        buffer[offset : offset + count] = data[:count]
        return EncodeResult(count, count * 2)

    def decode(self, data: Any) -> str:
        return as_bytes(data).hex()

    def byte_length(self, text: str) -> int:
        return len(code_units(text)) // 2


codec = HexCodec()
