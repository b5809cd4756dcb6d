"""Shared codec contract."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from strcodec.encodings.aliases import Encoding

WritableBuffer = Union[bytearray, memoryview]


@dataclass(frozen=True)
class EncodeResult:
    bytes_written: int
    units_consumed: int


def as_bytes(data: Any) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    try:
        return memoryview(data).tobytes()
    except TypeError as exc:
        raise TypeError(
            f"a bytes-like object is required, not '{type(data).__name__}'"
        ) from exc


class Codec:
    """One encoding kind behind the ``encode``/``decode``/``byte_length`` trio.

    ``encode`` writes into ``buffer[offset:offset + length]`` and never past
    it. When the whole text does not fit, only complete units are written and
    the result says how many source code units were consumed. ``length`` of
    ``None`` means the rest of the buffer. The window itself is trusted; use
    :func:`strcodec.buffer.check_window` at the boundary.
    """

    __slots__ = ()

    encoding: Encoding
    name: str

    def encode(
        self,
        buffer: WritableBuffer,
        text: str,
        offset: int = 0,
        length: int | None = None,
    ) -> EncodeResult:
        raise NotImplementedError

    def decode(self, data: Any) -> str:
        raise NotImplementedError

    def byte_length(self, text: str) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


def window_length(buffer: WritableBuffer, offset: int, length: int | None) -> int:
    if length is None:
        return len(buffer) - offset
    return length
