"""UCS-2 / UTF-16LE: two little-endian bytes per code unit."""

from __future__ import annotations

from typing import Any

from strcodec.base import Codec, EncodeResult, WritableBuffer, as_bytes, window_length
from strcodec.encodings.aliases import Encoding
from strcodec.errors import MalformedInput
from strcodec.units import code_units, from_code_units


class UCS2Codec(Codec):
    __slots__ = ()

    encoding = Encoding.UCS2
    name = Encoding.UCS2.value

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        units = code_units(text)
        # An odd trailing byte in the window cannot hold a unit; leave it alone.
        count = min(len(units), window_length(buffer, offset, length) // 2)
        out = bytearray()
        for unit in units[:count]:
            out.append(unit & 0xFF)
            out.append(unit >> 8)
        buffer[offset : offset + len(out)] = out
        return EncodeResult(len(out), count)

    def decode(self, data: Any) -> str:
        raw = as_bytes(data)
        if len(raw) % 2:
            raise MalformedInput("odd-length UCS-2 input", len(raw) - 1)
        return from_code_units(
            raw[idx] | (raw[idx + 1] << 8) for idx in range(0, len(raw), 2)
        )

    def byte_length(self, text: str) -> int:
        return len(code_units(text)) * 2


codec = UCS2Codec()
