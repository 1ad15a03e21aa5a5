"""Engine — walks the tree, filters each entry, streams survivors to the report.

Per entry, in order (first failing check wins):

1. the walk reported an error for it            -> log, continue
2. symlink while symlinks are not followed      -> skip
3. directory: name in ``exclude_dirs``          -> prune subtree
              otherwise                          -> descend (never emitted)
4. file: extension filtered out                 -> skip
         metadata unreadable / not regular /
         the report itself / over the size limit -> skip
         binary (NUL in the first 512 bytes)    -> skip
         content unreadable                     -> skip
         otherwise                              -> emit

Only output and walk failures abort a run: the report cannot be created or
written, or the root cannot be walked.  These surface as ``ExtractionError``.
"""

from __future__ import annotations

import logging
import stat
from datetime import datetime
from typing import Callable

from file_extractor.core.config import ScanConfig
from file_extractor.core.filters import dir_excluded, dir_included, extension_allowed
from file_extractor.core.sniff import looks_binary
from file_extractor.core.walk import Entry, EntryKind, WalkError, iter_entries
from file_extractor.model.extraction_result import ExtractionResult
from file_extractor.reports.report_writer import ReportWriter

_logger = logging.getLogger(__name__)


class ExtractionError(RuntimeError):
    """The run could not be completed; the report may be partial."""


def _read_content(path: str) -> bytes:
    with open(path, "rb") as fh:
        return fh.read()


def _visit_directory(entry: Entry, cfg: ScanConfig) -> None:
    if dir_excluded(entry.name, cfg.exclude_dirs):
        entry.prune()
        if cfg.verbose:
            _logger.info("Skipping excluded directory: %s", entry.path)
        return
    if cfg.verbose and not dir_included(entry.name, cfg.include_dirs):
        _logger.info("Scanning for matching descendants: %s", entry.path)


def _select_file(entry: Entry, cfg: ScanConfig, report_identity: tuple[int, int]) -> bytes | None:
    """Run the file checks; return the content to emit or ``None`` to skip."""
    if not extension_allowed(entry.path, cfg.include_exts, cfg.exclude_exts):
        return None

    try:
        st = entry.stat()
    except OSError as exc:
        if cfg.verbose:
            _logger.warning("Cannot get file info for %s: %s", entry.path, exc)
        return None

    if not stat.S_ISREG(st.st_mode):
        if cfg.verbose:
            _logger.info("Skipping non-regular file: %s", entry.path)
        return None

    if (st.st_dev, st.st_ino) == report_identity:
        if cfg.verbose:
            _logger.info("Skipping output file: %s", entry.path)
        return None

    if st.st_size > cfg.max_file_size:
        if cfg.verbose:
            _logger.info("Skipping large file: %s (%d bytes)", entry.path, st.st_size)
        return None

    if looks_binary(entry.path):
        if cfg.verbose:
            _logger.info("Skipping binary file: %s", entry.path)
        return None

    try:
        return _read_content(entry.path)
    except OSError as exc:
        if cfg.verbose:
            _logger.warning("Cannot read file %s: %s", entry.path, exc)
        return None


def _extract_into(
    writer: ReportWriter,
    cfg: ScanConfig,
    result: ExtractionResult,
    clock: Callable[[], datetime],
) -> None:
    writer.write_header(cfg.root, result.started_at)
    report_identity = writer.identity

    for entry in iter_entries(cfg.root, follow_symlinks=cfg.follow_symlinks):
        if entry.error is not None:
            if cfg.verbose:
                _logger.warning("Error accessing %s: %s", entry.path, entry.error)
            continue

        if entry.kind is EntryKind.SYMLINK and not cfg.follow_symlinks:
            if cfg.verbose:
                _logger.info("Skipping symbolic link: %s", entry.path)
            continue

        if entry.is_dir(follow_symlinks=cfg.follow_symlinks):
            _visit_directory(entry, cfg)
            continue

        content = _select_file(entry, cfg, report_identity)
        if content is None:
            continue

        writer.write_entry(entry.path, content)
        result.record()
        if cfg.verbose:
            _logger.info("Processed: %s", entry.path)

    result.finish(clock())
    writer.write_footer(result.files_processed, result.completed_at)


def run_extraction(
    cfg: ScanConfig,
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> ExtractionResult:
    """Extract every matching file under ``cfg.root`` into ``cfg.output``.

    *clock* supplies the header and footer timestamps.

    Raises ``ExtractionError`` if the output cannot be written or the root
    cannot be walked; every other problem only skips the entry concerned.
    """
    result = ExtractionResult(root=cfg.root, output=cfg.output, started_at=clock())

    try:
        writer = ReportWriter.open(cfg.output)
    except OSError as exc:
        raise ExtractionError(f"failed to create output file: {exc}") from exc

    # Leaving the block flushes the sink; a failing flush is a write error.
    try:
        with writer:
            _extract_into(writer, cfg, result, clock)
    except WalkError as exc:
        raise ExtractionError(f"error walking directory: {exc}") from exc
    except OSError as exc:
        raise ExtractionError(f"failed to write output file: {exc}") from exc

    return result
