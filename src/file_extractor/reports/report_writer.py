"""Streaming report writer.

Layout::

    File Content Extraction Report
    Generated: 2024-01-31 23:59:59
    Source Directory: src
    ==================================================

    src/a.go

    <raw bytes>

    --------------------------------------------------

    ...

    Extraction Summary
    Files processed: 1
    Completed: 2024-01-31 23:59:59

Content is written verbatim.  Nothing is held in memory beyond the sink's
buffer, so a run that dies mid-walk leaves a report without its footer.
"""

from __future__ import annotations

import os
from datetime import datetime
from types import TracebackType
from typing import BinaryIO

SEPARATOR_WIDTH = 50
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_BUFFER_SIZE = 64 * 1024
_HEADER_RULE = "=" * SEPARATOR_WIDTH
_ENTRY_RULE = "-" * SEPARATOR_WIDTH


def format_timestamp(when: datetime) -> str:
    return when.strftime(TIMESTAMP_FORMAT)


def _encode_path(path: str | os.PathLike[str]) -> bytes:
    return os.fsencode(path)


class ReportWriter:
    """Append-only writer over a buffered binary sink.

    Use ``ReportWriter.open()`` as a context manager; the sink is flushed
    and closed on every way out of the block.
    """

    def __init__(self, sink: BinaryIO) -> None:
        self._sink = sink

    @classmethod
    def open(cls, destination: str | os.PathLike[str]) -> ReportWriter:
        """Create (or truncate) *destination*.  Raises ``OSError``."""
        return cls(open(destination, "wb", buffering=_BUFFER_SIZE))

    def __enter__(self) -> ReportWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._sink.closed

    @property
    def identity(self) -> tuple[int, int]:
        """``(st_dev, st_ino)`` of the open sink."""
        st = os.fstat(self._sink.fileno())
        return st.st_dev, st.st_ino

    def close(self) -> None:
        if self._sink.closed:
            return
        try:
            self._sink.flush()
        finally:
            self._sink.close()

    def _write_text(self, text: str) -> None:
        self._sink.write(text.encode("utf-8"))

    def write_header(self, root: str | os.PathLike[str], timestamp: datetime) -> None:
        self._write_text("File Content Extraction Report\n")
        self._write_text(f"Generated: {format_timestamp(timestamp)}\n")
        self._sink.write(b"Source Directory: " + _encode_path(root) + b"\n")
        self._write_text(f"{_HEADER_RULE}\n\n")

    def write_entry(self, path: str | os.PathLike[str], content: bytes) -> None:
        self._sink.write(_encode_path(path) + b"\n\n")
        self._sink.write(content)
        self._write_text(f"\n\n{_ENTRY_RULE}\n\n")

    def write_footer(self, file_count: int, timestamp: datetime) -> None:
        self._write_text("\nExtraction Summary\n")
        self._write_text(f"Files processed: {file_count}\n")
        self._write_text(f"Completed: {format_timestamp(timestamp)}\n")
