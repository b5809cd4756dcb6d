"""Encoding name resolution and whole-string helpers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from strcodec import config
from strcodec.base import Codec
from strcodec.encodings import ascii as ascii_codec
from strcodec.encodings import (
    base64_codec,
    binary_string,
    binary_string_ie,
    hex_codec,
    utf_16_le,
    utf_8,
)
from strcodec.encodings.aliases import Encoding, aliases
from strcodec.errors import UnsupportedEncoding

__all__ = [
    "byte_length",
    "codec_for",
    "decode",
    "encode",
    "is_encoding",
    "list_encodings",
    "lookup",
]

_CODECS: MappingProxyType[Encoding, Codec] = MappingProxyType(
    {
        Encoding.UTF8: utf_8.codec,
        Encoding.ASCII: ascii_codec.codec,
        Encoding.BASE64: base64_codec.codec,
        Encoding.UCS2: utf_16_le.codec,
        Encoding.HEX: hex_codec.codec,
        Encoding.BINSTR: binary_string.codec,
        Encoding.BINSTRIE: binary_string_ie.codec,
    }
)


def lookup(encoding: object) -> Codec:
    if isinstance(encoding, Encoding):
        return _CODECS[encoding]
    kind = aliases.get(str(encoding).lower())
    if kind is None:
        raise UnsupportedEncoding(encoding)
    return _CODECS[kind]


def codec_for(encoding: object | None = None) -> Codec:
    if encoding is None:
        encoding = config.default_encoding()
    return lookup(encoding)


def is_encoding(encoding: object) -> bool:
    try:
        lookup(encoding)
    except UnsupportedEncoding:
        return False
    return True


def list_encodings() -> list[str]:
    return sorted(aliases)


def byte_length(text: str, encoding: object | None = None) -> int:
    return codec_for(encoding).byte_length(text)


def encode(text: str, encoding: object | None = None) -> bytes:
    codec = codec_for(encoding)
    buf = bytearray(codec.byte_length(text))
    result = codec.encode(buf, text, 0, len(buf))
    return bytes(buf[: result.bytes_written])


def decode(data: Any, encoding: object | None = None) -> str:
    return codec_for(encoding).decode(data)
