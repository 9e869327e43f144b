"""
Summary: Delete (or pretend to delete) resolved files one at a time, isolating failures.
Why: Every resolved file gets exactly one outcome, in resolution order, whatever happens to the others.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import final

from globrm.features.resolution import ResolvedFile
from globrm.platform.logging import logger as app_logger
from globrm.shared.display import printable_path
from globrm.shared.errors import DeletionError

from ..adapters.local import LocalFilesystem
from ..domain.models import DeletionEvent, DeletionOutcome, OutcomeStatus, RunSummary
from .ports import FilesystemPort


@final
class DeletionExecutor:
    """Produce a ``DeletionOutcome`` for every resolved file."""

    filesystem: FilesystemPort
    dry_run: bool
    logger: logging.Logger

    def __init__(
        self,
        filesystem: FilesystemPort | None = None,
        *,
        dry_run: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.filesystem = filesystem or LocalFilesystem()
        self.dry_run = dry_run
        self.logger = logger or app_logger

    def iter_outcomes(self, files: Sequence[ResolvedFile]) -> Iterator[DeletionOutcome]:
        """Yield outcomes lazily so callers can report while the run proceeds."""

        total = len(files)
        for sequence, resolved in enumerate(files, start=1):
            outcome = self._process(resolved)
            self.logger.debug(
                "%s: %s",
                outcome.status.value,
                printable_path(resolved.path),
                extra={
                    "deletion_event": outcome.event.value,
                    "path": str(resolved.path),
                    "sequence": sequence,
                    "total_files": total,
                    "reason": outcome.reason,
                },
            )
            yield outcome

    def execute(
        self,
        files: Sequence[ResolvedFile],
        on_outcome: Callable[[DeletionOutcome], None] | None = None,
    ) -> RunSummary:
        """Process every file and return the finalized summary.

        Args:
            files: Resolved files in resolution order.
            on_outcome: Called with each outcome as soon as it is recorded.

        Returns:
            RunSummary: Counts matching the outcomes produced.
        """
        summary = RunSummary(dry_run=self.dry_run)
        self.logger.debug(
            "Deletion run started [files=%d, dry_run=%s]",
            len(files),
            self.dry_run,
            extra={
                "deletion_event": DeletionEvent.RUN_START.value,
                "total_files": len(files),
                "dry_run": self.dry_run,
            },
        )

        for outcome in self.iter_outcomes(files):
            summary.record(outcome)
            if on_outcome is not None:
                self._notify(on_outcome, outcome)

        _ = summary.finalize()
        self.logger.debug(
            "Deletion run complete [deleted=%d, skipped=%d, failed=%d]",
            summary.deleted,
            summary.skipped,
            summary.failed,
            extra={"deletion_event": DeletionEvent.RUN_COMPLETE.value, **summary.summary_extra()},
        )
        return summary

    def _notify(
        self,
        on_outcome: Callable[[DeletionOutcome], None],
        outcome: DeletionOutcome,
    ) -> None:
        """Hand one outcome to the observer; a reporting failure never ends the run."""

        try:
            on_outcome(outcome)
        except (OSError, ValueError) as exc:
            self.logger.error(
                "Could not report %s for %s: %s",
                outcome.status.value,
                printable_path(outcome.file.path),
                exc,
            )

    def _process(self, resolved: ResolvedFile) -> DeletionOutcome:
        if self.dry_run:
            return DeletionOutcome(file=resolved, status=OutcomeStatus.SKIPPED)

        try:
            self.filesystem.remove_file(resolved.path)
        except OSError as exc:
            error = DeletionError(resolved.path, exc)
            return DeletionOutcome(file=resolved, status=OutcomeStatus.FAILED, reason=error.reason)
        return DeletionOutcome(file=resolved, status=OutcomeStatus.DELETED)


__all__ = ["DeletionExecutor"]
