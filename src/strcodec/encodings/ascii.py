"""7-bit ASCII. Lossy for units outside 0-127."""

from __future__ import annotations

from typing import Any

from strcodec.base import Codec, EncodeResult, WritableBuffer, as_bytes, window_length
from strcodec.encodings.aliases import Encoding
from strcodec.units import code_units


class ASCIICodec(Codec):
    __slots__ = ()

    encoding = Encoding.ASCII
    name = Encoding.ASCII.value

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        units = code_units(text)
        count = min(len(units), window_length(buffer, offset, length))
        buffer[offset : offset + count] = bytes(unit & 0x7F for unit in units[:count])
        return EncodeResult(count, count)

    def decode(self, data: Any) -> str:
        return "".join(chr(byte & 0x7F) for byte in as_bytes(data))

    def byte_length(self, text: str) -> int:
        return len(code_units(text))


codec = ASCIICodec()
