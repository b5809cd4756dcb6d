"""Codec implementations, one module per encoding kind."""

from __future__ import annotations

from . import aliases as aliases
from .aliases import Encoding

__all__ = ["Encoding", "aliases"]
