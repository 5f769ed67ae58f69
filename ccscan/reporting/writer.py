"""
Incremental report log.

The log is truncated once when the writer is entered and every record is
appended and flushed as soon as it is produced, so a run that stops early
leaves only complete lines behind.
"""

from __future__ import annotations

from typing import IO, Iterable, Optional

from ccscan.core.errors import ReportWriteError
from ccscan.core.records import ComplexityRecord
from ccscan.reporting.formatters import get_formatter


class ReportWriter:
    def __init__(self, path: str, fmt: str = "text") -> None:
        self.path = path
        self.format = fmt
        self.count = 0
        self._formatter = get_formatter(fmt)
        self._handle: Optional[IO[str]] = None

    def __enter__(self) -> "ReportWriter":
        try:
            self._handle = open(self.path, "w", encoding="utf-8")
        except OSError as exc:
            raise ReportWriteError("Unable to open report", {"path": self.path}) from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        try:
            handle.close()
        except OSError as exc:
            raise ReportWriteError("Unable to close report", {"path": self.path}) from exc

    def write(self, record: ComplexityRecord) -> None:
        if self._handle is None:
            raise ReportWriteError("Report is not open", {"path": self.path})
        try:
            self._handle.write(self._formatter(record))
            self._handle.flush()
        except OSError as exc:
            raise ReportWriteError("Unable to write report", {"path": self.path}) from exc
        self.count += 1

    def write_all(self, records: Iterable[ComplexityRecord]) -> int:
        written = 0
        for record in records:
            self.write(record)
            written += 1
        return written
