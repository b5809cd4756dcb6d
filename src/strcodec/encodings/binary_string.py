"""Packed binary strings: two bytes per 16-bit unit plus a parity marker.

The first unit records whether the payload length is odd. For an odd payload
it is ``0x0100 | first_byte``; for an even payload it is ``0x0000``. Every
following unit carries two bytes, big-endian. An empty payload is the empty
string with no marker.
"""

from __future__ import annotations

from typing import Any

from strcodec.base import Codec, EncodeResult, WritableBuffer, as_bytes, window_length
from strcodec.encodings.aliases import Encoding
from strcodec.errors import MalformedInput
from strcodec.units import code_units, from_code_units

ODD_MARKER = 0x100


class BinaryStringCodec(Codec):
    __slots__ = ()

    encoding = Encoding.BINSTR
    name = Encoding.BINSTR.value

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        units = code_units(text)
        if not units:
            return EncodeResult(0, 0)
        marker = units[0]
        if marker != 0 and marker >> 8 != ODD_MARKER >> 8:
            raise MalformedInput("invalid parity marker", 0)
        end = offset + window_length(buffer, offset, length)
        pos = offset
        if marker:
            if pos + 1 > end:
                return EncodeResult(0, 0)
            buffer[pos] = marker & 0xFF
            pos += 1
        consumed = 1
        for unit in units[1:]:
            if pos + 2 > end:
                break
            buffer[pos] = unit >> 8
            buffer[pos + 1] = unit & 0xFF
            pos += 2
            consumed += 1
        return EncodeResult(pos - offset, consumed)

    def decode(self, data: Any) -> str:
        raw = as_bytes(data)
        if not raw:
            return ""
        if len(raw) % 2:
            units = [ODD_MARKER | raw[0]]
            start = 1
        else:
            units = [0]
            start = 0
        for idx in range(start, len(raw), 2):
            units.append((raw[idx] << 8) | raw[idx + 1])
        return from_code_units(units)

    def byte_length(self, text: str) -> int:
        units = code_units(text)
        if not units:
            return 0
        size = (len(units) - 1) * 2
        if units[0] != 0:
            size += 1
        return size


codec = BinaryStringCodec()
