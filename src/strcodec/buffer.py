"""Host buffer boundary.

These are the calls a storage layer makes against its own byte buffers. They
validate the caller's window, resolve the encoding and hand off to a codec.
"""

from __future__ import annotations

from typing import Any

from strcodec import registry
from strcodec.base import EncodeResult, WritableBuffer, as_bytes
from strcodec.diagnostics import reporter
from strcodec.encodings.aliases import Encoding
from strcodec.encodings.binary_string_ie import UNIT_BIAS
from strcodec.errors import InvalidArgument
from strcodec.units import code_units

__all__ = ["check_window", "from_text", "to_text", "write"]


def check_window(buffer: Any, offset: int, length: int | None = None) -> int:
    """Validate ``[offset, offset + length)`` against ``buffer``.

    Returns the effective length; ``None`` selects the rest of the buffer.
    """
    size = len(buffer)
    if offset < 0 or offset > size:
        raise InvalidArgument(f"offset {offset} is outside a buffer of {size} bytes")
    if length is None:
        return size - offset
    if length < 0:
        raise InvalidArgument(f"length must be non-negative, not {length}")
    if offset + length > size:
        raise InvalidArgument(
            f"window [{offset}, {offset + length}) exceeds a buffer of {size} bytes"
        )
    return length


def _lossy_units(kind: Encoding, units: list[int]) -> list[tuple[int, int]]:
    if kind is Encoding.ASCII:
        return [(idx, unit) for idx, unit in enumerate(units) if unit > 0x7F]
    if kind is Encoding.BINSTRIE:
        return [
            (idx, unit)
            for idx, unit in enumerate(units)
            if not UNIT_BIAS <= unit <= UNIT_BIAS + 0xFF
        ]
    return []


def write(
    buffer: WritableBuffer,
    text: str,
    offset: int = 0,
    length: int | None = None,
    encoding: object | None = None,
) -> EncodeResult:
    if isinstance(buffer, bytes) or (
        isinstance(buffer, memoryview) and buffer.readonly
    ):
        raise InvalidArgument("buffer is read-only")
    length = check_window(buffer, offset, length)
    codec = registry.codec_for(encoding)
    result = codec.encode(buffer, text, offset, length)
    units = code_units(text)
    if result.units_consumed < len(units):
        reporter.truncated(
            codec.name, result.units_consumed, len(units), result.bytes_written
        )
    for position, unit in _lossy_units(codec.encoding, units[: result.units_consumed]):
        reporter.lossy(codec.name, position, unit)
    return result


def to_text(
    data: Any,
    encoding: object | None = None,
    start: int = 0,
    end: int | None = None,
) -> str:
    raw = as_bytes(data)
    if end is None:
        end = len(raw)
    if start < 0 or end < start or end > len(raw):
        raise InvalidArgument(
            f"slice [{start}, {end}) is outside a buffer of {len(raw)} bytes"
        )
    return registry.codec_for(encoding).decode(raw[start:end])


def from_text(text: str, encoding: object | None = None) -> bytearray:
    return bytearray(registry.encode(text, encoding))
