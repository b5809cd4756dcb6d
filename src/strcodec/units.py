"""UTF-16 code unit helpers.

Text handled by the codecs is a ``str`` of 16-bit code units: every character
has an ordinal ``<= 0xFFFF`` and supplementary code points appear as a high
surrogate followed by a low surrogate. Native Python strings may hold astral
characters directly; ``code_units`` splits them so both forms are accepted.
"""

from __future__ import annotations

from typing import Iterable

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF
SUPPLEMENTARY_START = 0x10000
MAX_CODE_POINT = 0x10FFFF


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def combine_surrogates(high: int, low: int) -> int:
    return (
        ((high - HIGH_SURROGATE_START) << 10)
        + (low - LOW_SURROGATE_START)
        + SUPPLEMENTARY_START
    )


def split_code_point(code_point: int) -> tuple[int, int]:
    if not SUPPLEMENTARY_START <= code_point <= MAX_CODE_POINT:
        raise ValueError(f"code point {code_point:#x} has no surrogate pair")
    offset = code_point - SUPPLEMENTARY_START
    return (
        HIGH_SURROGATE_START | (offset >> 10),
        LOW_SURROGATE_START | (offset & 0x3FF),
    )


def code_units(text: str) -> list[int]:
    units: list[int] = []
    for ch in text:
        value = ord(ch)
        if value >= SUPPLEMENTARY_START:
            units.extend(split_code_point(value))
        else:
            units.append(value)
    return units


def unit_length(text: str) -> int:
    return sum(2 if ord(ch) >= SUPPLEMENTARY_START else 1 for ch in text)


def from_code_units(units: Iterable[int]) -> str:
    return "".join(map(chr, units))


def to_native(text: str) -> str:
    """Join surrogate pairs into astral characters.

    Lone surrogates are kept as-is, so the result may still not be encodable
    with ``str.encode("utf-8")``.
    """
    out: list[str] = []
    idx = 0
    size = len(text)
    while idx < size:
        unit = ord(text[idx])
        if is_high_surrogate(unit) and idx + 1 < size:
            nxt = ord(text[idx + 1])
            if is_low_surrogate(nxt):
                out.append(chr(combine_surrogates(unit, nxt)))
                idx += 2
                continue
        out.append(text[idx])
        idx += 1
    return "".join(out)
