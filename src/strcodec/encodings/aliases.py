"""Encoding kinds and the alias names that select them."""

from __future__ import annotations

import enum
from types import MappingProxyType


class Encoding(enum.Enum):
    UTF8 = "utf8"
    ASCII = "ascii"
    BASE64 = "base64"
    UCS2 = "ucs2"
    HEX = "hex"
    BINSTR = "binary_string"
    BINSTRIE = "binary_string_ie"


aliases = MappingProxyType(
    {
        "utf8": Encoding.UTF8,
        "utf-8": Encoding.UTF8,
        "ascii": Encoding.ASCII,
        "binary": Encoding.ASCII,
        "ucs2": Encoding.UCS2,
        "ucs-2": Encoding.UCS2,
        "utf16le": Encoding.UCS2,
        "utf-16le": Encoding.UCS2,
        "hex": Encoding.HEX,
        "base64": Encoding.BASE64,
        "binary_string": Encoding.BINSTR,
        "binary_string_ie": Encoding.BINSTRIE,
    }
)
