from __future__ import annotations


class StrCodecError(Exception):
    """Base error for strcodec failures."""


class UnsupportedEncoding(StrCodecError, LookupError):
    """No codec is registered under the requested encoding name."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown encoding: {name}")
        self.name = name


class MalformedInput(StrCodecError, ValueError):
    """Input is structurally invalid for the encoding."""

    def __init__(self, reason: str, position: int | None = None) -> None:
        if position is None:
            message = reason
        else:
            message = f"{reason} (at position {position})"
        super().__init__(message)
        self.reason = reason
        self.position = position


class InvalidArgument(StrCodecError, ValueError):
    """Offset or length falls outside the buffer."""
