"""UTF-8 over 16-bit code units."""

from __future__ import annotations

from typing import Any

from strcodec.base import Codec, EncodeResult, WritableBuffer, as_bytes, window_length
from strcodec.encodings.aliases import Encoding
from strcodec.errors import MalformedInput
from strcodec.units import (
    MAX_CODE_POINT,
    SUPPLEMENTARY_START,
    code_units,
    combine_surrogates,
    from_code_units,
    is_high_surrogate,
    is_low_surrogate,
    split_code_point,
)


def _sequence(value: int) -> bytes:
    if value < 0x80:
        return bytes((value,))
    if value < 0x800:
        return bytes((0xC0 | (value >> 6), 0x80 | (value & 0x3F)))
    if value < SUPPLEMENTARY_START:
        return bytes(
            (
                0xE0 | (value >> 12),
                0x80 | ((value >> 6) & 0x3F),
                0x80 | (value & 0x3F),
            )
        )
    return bytes(
        (
            0xF0 | (value >> 18),
            0x80 | ((value >> 12) & 0x3F),
            0x80 | ((value >> 6) & 0x3F),
            0x80 | (value & 0x3F),
        )
    )


def _pair_at(units: list[int], idx: int) -> bool:
    return (
        is_high_surrogate(units[idx])
        and idx + 1 < len(units)
        and is_low_surrogate(units[idx + 1])
    )


class UTF8Codec(Codec):
    __slots__ = ()

    encoding = Encoding.UTF8
    name = Encoding.UTF8.value

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        end = offset + window_length(buffer, offset, length)
        units = code_units(text)
        pos = offset
        idx = 0
        while idx < len(units):
            if _pair_at(units, idx):
                value = combine_surrogates(units[idx], units[idx + 1])
                step = 2
            else:
                value = units[idx]
                step = 1
            seq = _sequence(value)
            if pos + len(seq) > end:
                break
            buffer[pos : pos + len(seq)] = seq
            pos += len(seq)
            idx += step
        return EncodeResult(pos - offset, idx)

    def decode(self, data: Any) -> str:
        raw = as_bytes(data)
        size = len(raw)
        out: list[int] = []
        idx = 0
        while idx < size:
            lead = raw[idx]
            if lead < 0x80:
                out.append(lead)
                idx += 1
                continue
            if lead < 0xC0:
                raise MalformedInput("unexpected continuation byte", idx)
            if lead < 0xE0:
                count, value = 1, lead & 0x1F
            elif lead < 0xF0:
                count, value = 2, lead & 0x0F
            elif lead < 0xF8:
                count, value = 3, lead & 0x07
            else:
                raise MalformedInput("invalid leading byte", idx)
            if idx + count >= size:
                raise MalformedInput("truncated multi-byte sequence", idx)
            for pos in range(idx + 1, idx + count + 1):
                cont = raw[pos]
                if cont & 0xC0 != 0x80:
                    raise MalformedInput("expected continuation byte", pos)
                value = (value << 6) | (cont & 0x3F)
            if count == 3:
                if not SUPPLEMENTARY_START <= value <= MAX_CODE_POINT:
                    raise MalformedInput(
                        "4-byte sequence outside the supplementary planes", idx
                    )
                out.extend(split_code_point(value))
            else:
                out.append(value)
            idx += count + 1
        return from_code_units(out)

    def byte_length(self, text: str) -> int:
        units = code_units(text)
        total = 0
        idx = 0
        while idx < len(units):
            if _pair_at(units, idx):
                total += 4
                idx += 2
                continue
            unit = units[idx]
            if unit < 0x80:
                total += 1
            elif unit < 0x800:
                total += 2
            else:
                total += 3
            idx += 1
        return total


codec = UTF8Codec()
