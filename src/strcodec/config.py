"""Environment-driven settings for strcodec."""

from __future__ import annotations

import os

DEFAULT_ENCODING = "utf8"
_TRUTHY = {"1", "true", "yes", "on"}


def _raw_getenv(key: str, default: str = "") -> str:
    try:
        return os.getenv(key, default)
    except Exception:
        return default


_ENCODING_CACHE: str | None = None
_ENCODING_RAW: str | None = None
_DIAGNOSTICS_CACHE: bool | None = None
_DIAGNOSTICS_RAW: str | None = None


def default_encoding() -> str:
    global _ENCODING_CACHE, _ENCODING_RAW
    raw = _raw_getenv("STRCODEC_DEFAULT_ENCODING", "")
    if _ENCODING_CACHE is None or raw != _ENCODING_RAW:
        _ENCODING_RAW = raw
        _ENCODING_CACHE = raw.strip() or DEFAULT_ENCODING
    return _ENCODING_CACHE


def diagnostics_enabled() -> bool:
    global _DIAGNOSTICS_CACHE, _DIAGNOSTICS_RAW
    raw = _raw_getenv("STRCODEC_DIAGNOSTICS", "")
    if _DIAGNOSTICS_CACHE is None or raw != _DIAGNOSTICS_RAW:
        _DIAGNOSTICS_RAW = raw
        _DIAGNOSTICS_CACHE = raw.strip().lower() in _TRUTHY
    return _DIAGNOSTICS_CACHE
