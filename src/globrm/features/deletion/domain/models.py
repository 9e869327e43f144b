"""src/globrm/features/deletion/domain/models.py
Where: Deletion feature domain layer.
What: Per-file outcomes and the aggregate run summary.
Why: Keep counting rules next to the records they count.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from globrm.features.resolution import ResolvedFile


class OutcomeStatus(StrEnum):
    """What happened to one resolved file."""

    DELETED = "deleted"
    SKIPPED = "skipped"
    FAILED = "failed"


class DeletionEvent(StrEnum):
    """Structured event identifiers for deletion logs."""

    RUN_START = "deletion.run.start"
    RUN_COMPLETE = "deletion.run.complete"
    FILE_DELETED = "deletion.file.deleted"
    FILE_SKIPPED = "deletion.file.skipped"
    FILE_FAILED = "deletion.file.failed"


@dataclass(slots=True, frozen=True)
class DeletionOutcome:
    """Result of processing one resolved file."""

    file: ResolvedFile
    status: OutcomeStatus
    reason: str | None = None

    @property
    def event(self) -> DeletionEvent:
        """Log event matching this outcome."""

        return {
            OutcomeStatus.DELETED: DeletionEvent.FILE_DELETED,
            OutcomeStatus.SKIPPED: DeletionEvent.FILE_SKIPPED,
            OutcomeStatus.FAILED: DeletionEvent.FILE_FAILED,
        }[self.status]


@dataclass(slots=True)
class RunSummary:
    """Aggregate counts for a run, built one outcome at a time."""

    dry_run: bool = False
    total_considered: int = 0
    deleted: int = 0
    skipped: int = 0
    failed: int = 0
    bytes_considered: int = 0
    bytes_freed: int = 0
    start_time: float = field(default_factory=time.perf_counter)
    elapsed_seconds: float | None = None

    def record(self, outcome: DeletionOutcome) -> None:
        """Count one outcome."""

        if self.elapsed_seconds is not None:
            raise RuntimeError("Cannot record outcomes on a finalized summary")

        self.total_considered += 1
        self.bytes_considered += outcome.file.size_bytes
        if outcome.status is OutcomeStatus.DELETED:
            self.deleted += 1
            self.bytes_freed += outcome.file.size_bytes
        elif outcome.status is OutcomeStatus.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

    def finalize(self) -> "RunSummary":
        """Freeze the elapsed time; further recording is rejected."""

        if self.elapsed_seconds is None:
            self.elapsed_seconds = time.perf_counter() - self.start_time
        return self

    @property
    def duration_seconds(self) -> float:
        """Elapsed time so far, or the frozen value once finalized."""

        if self.elapsed_seconds is not None:
            return self.elapsed_seconds
        return time.perf_counter() - self.start_time

    def summary_extra(self) -> dict[str, Any]:
        """Return a dictionary suitable for structured logging extras."""

        return {
            "total_files": self.total_considered,
            "deleted": self.deleted,
            "skipped": self.skipped,
            "failed": self.failed,
            "dry_run": self.dry_run,
            "duration_seconds": round(self.duration_seconds, 4),
        }


__all__ = ["DeletionEvent", "DeletionOutcome", "OutcomeStatus", "RunSummary"]
