"""ExtractionResult — running tally of one extraction run."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(slots=True)
class ExtractionResult:
    """Created when extraction starts, bumped once per emitted file.

    ``completed_at`` stays ``None`` until the walk has finished and the
    footer is about to be written.
    """

    root: Path
    output: Path
    started_at: datetime
    completed_at: datetime | None = None
    files_processed: int = 0

    def record(self) -> None:
        self.files_processed += 1

    def finish(self, when: datetime) -> None:
        self.completed_at = when

    @property
    def completed(self) -> bool:
        return self.completed_at is not None
