"""Encode reports: what one ``encode`` call wrote, as JSON or msgpack.

JSON has no bytes type, so the written bytes travel as standard Base64 text
produced by strcodec's own Base64 codec. msgpack carries them as ``bin``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import msgpack
from msgpack.exceptions import UnpackException

from strcodec import registry
from strcodec.base import EncodeResult
from strcodec.encodings.aliases import Encoding
from strcodec.errors import MalformedInput

WIRE_FORMATS = ("json", "msgpack")

_FIELDS = ("encoding", "data", "bytes_written", "units_consumed")


@dataclass(frozen=True)
class EncodeReport:
    encoding: str
    data: bytes
    bytes_written: int
    units_consumed: int

    @classmethod
    def from_result(
        cls, encoding: str, data: bytes, result: EncodeResult
    ) -> "EncodeReport":
        return cls(
            encoding=registry.lookup(encoding).name,
            data=bytes(data[: result.bytes_written]),
            bytes_written=result.bytes_written,
            units_consumed=result.units_consumed,
        )

    def text(self) -> str:
        return registry.decode(self.data, self.encoding)


def _check_wire(wire: str) -> None:
    if wire not in WIRE_FORMATS:
        raise ValueError(f"Unknown wire format '{wire}'")


def dump_report(report: EncodeReport, wire: str) -> bytes:
    _check_wire(wire)
    fields: dict[str, Any] = {
        "encoding": report.encoding,
        "data": report.data,
        "bytes_written": report.bytes_written,
        "units_consumed": report.units_consumed,
    }
    if wire == "msgpack":
        return msgpack.packb(fields, use_bin_type=True)
    fields["data"] = registry.decode(report.data, Encoding.BASE64)
    return json.dumps(fields, separators=(",", ":"), sort_keys=True).encode("utf-8")


def load_report(payload: bytes, wire: str) -> EncodeReport:
    """Parse a report written by :func:`dump_report`.

    Raises ``MalformedInput`` when the payload does not parse, lacks a field,
    or its byte count disagrees with its data.
    """
    _check_wire(wire)
    try:
        if wire == "msgpack":
            fields = msgpack.unpackb(payload, raw=False)
        else:
            fields = json.loads(payload.decode("utf-8"))
    except (ValueError, UnpackException) as exc:
        raise MalformedInput(f"unreadable {wire} report: {exc}") from exc
    if not isinstance(fields, dict):
        raise MalformedInput(f"{wire} report is not a mapping")
    missing = [name for name in _FIELDS if name not in fields]
    if missing:
        raise MalformedInput(f"report is missing {', '.join(missing)}")

    data = fields["data"]
    if wire == "json":
        if not isinstance(data, str):
            raise MalformedInput("report data must be Base64 text")
        data = registry.encode(data, Encoding.BASE64)
    if not isinstance(data, bytes):
        raise MalformedInput("report data must be bytes")
    for name in ("bytes_written", "units_consumed"):
        if not isinstance(fields[name], int) or fields[name] < 0:
            raise MalformedInput(f"report {name} must be a non-negative integer")
    report = EncodeReport(
        encoding=registry.lookup(fields["encoding"]).name,
        data=data,
        bytes_written=fields["bytes_written"],
        units_consumed=fields["units_consumed"],
    )
    if report.bytes_written != len(report.data):
        raise MalformedInput(
            f"report claims {report.bytes_written} bytes but carries "
            f"{len(report.data)}"
        )
    return report
