"""Opt-in stderr notices for buffer writes that lose data."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Literal

from strcodec import config

IssueKind = Literal["truncated", "lossy"]


@dataclass(frozen=True)
class WriteIssue:
    kind: IssueKind
    encoding: str
    detail: str

    def format_warning(self) -> str:
        lines = [
            f"[STRCODEC] kind={self.kind} encoding={self.encoding}",
            f"  detail: {self.detail}",
        ]
        return "\n".join(lines)


class DiagnosticsReporter:
    def __init__(self, stream=None) -> None:
        self._stream = stream

    def warn(self, issue: WriteIssue) -> None:
        if not config.diagnostics_enabled():
            return
        print(issue.format_warning(), file=self._stream or sys.stderr)

    def truncated(self, encoding: str, consumed: int, total: int, written: int) -> None:
        self.warn(
            WriteIssue(
                kind="truncated",
                encoding=encoding,
                detail=f"wrote {written} bytes for {consumed} of {total} code units",
            )
        )

    def lossy(self, encoding: str, position: int, unit: int) -> None:
        self.warn(
            WriteIssue(
                kind="lossy",
                encoding=encoding,
                detail=(
                    f"code unit {unit:#06x} at position {position} "
                    "does not survive a round trip"
                ),
            )
        )


reporter = DiagnosticsReporter()
