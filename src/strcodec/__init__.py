"""Text <-> byte codecs over 16-bit code units."""

from __future__ import annotations

from strcodec.base import Codec, EncodeResult
from strcodec.encodings.aliases import Encoding
from strcodec.errors import (
    InvalidArgument,
    MalformedInput,
    StrCodecError,
    UnsupportedEncoding,
)
from strcodec.registry import (
    byte_length,
    decode,
    encode,
    is_encoding,
    list_encodings,
    lookup,
)

__all__ = [
    "Codec",
    "EncodeResult",
    "Encoding",
    "InvalidArgument",
    "MalformedInput",
    "StrCodecError",
    "UnsupportedEncoding",
    "byte_length",
    "decode",
    "encode",
    "is_encoding",
    "list_encodings",
    "lookup",
]
