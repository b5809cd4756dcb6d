"""Legacy one-byte-per-unit packing.

Each byte is stored as ``byte + 0x20`` so every unit stays in 0x20-0x11F,
clear of control characters and the surrogate range.
"""

from __future__ import annotations

from typing import Any

from strcodec.base import Codec, EncodeResult, WritableBuffer, as_bytes, window_length
from strcodec.encodings.aliases import Encoding
from strcodec.units import code_units

UNIT_BIAS = 0x20


class BinaryStringIECodec(Codec):
    __slots__ = ()

    encoding = Encoding.BINSTRIE
    name = Encoding.BINSTRIE.value

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        units = code_units(text)
        count = min(len(units), window_length(buffer, offset, length))
        buffer[offset : offset + count] = bytes(
            (unit - UNIT_BIAS) & 0xFF for unit in units[:count]
        )
        return EncodeResult(count, count)

    def decode(self, data: Any) -> str:
        return "".join(chr(byte + UNIT_BIAS) for byte in as_bytes(data))

    def byte_length(self, text: str) -> int:
        return len(code_units(text))


codec = BinaryStringIECodec()
