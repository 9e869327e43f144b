"""Tests for deletion outcome and run summary models."""

from pathlib import Path

import pytest

from globrm.features.deletion import DeletionEvent, DeletionOutcome, OutcomeStatus, RunSummary
from globrm.features.resolution import ResolvedFile


def _outcome(status: OutcomeStatus, size: int = 10) -> DeletionOutcome:
    return DeletionOutcome(file=ResolvedFile(path=Path("f"), pattern="f", size_bytes=size), status=status)


def test_summary_counts_match_recorded_outcomes() -> None:
    """Each outcome lands in exactly one bucket."""

    summary = RunSummary()
    for status in (OutcomeStatus.DELETED, OutcomeStatus.FAILED, OutcomeStatus.DELETED):
        summary.record(_outcome(status))

    assert summary.total_considered == 3
    assert summary.deleted == 2
    assert summary.failed == 1
    assert summary.skipped == 0
    assert summary.bytes_considered == 30
    assert summary.bytes_freed == 20


def test_finalized_summary_rejects_new_outcomes() -> None:
    """Finalizing freezes the elapsed time and the counts."""

    summary = RunSummary().finalize()
    elapsed = summary.elapsed_seconds

    with pytest.raises(RuntimeError):
        summary.record(_outcome(OutcomeStatus.DELETED))
    assert summary.finalize().elapsed_seconds == elapsed
    assert summary.duration_seconds == elapsed


def test_outcome_event_mapping() -> None:
    """Outcome statuses map onto their log events."""

    assert _outcome(OutcomeStatus.DELETED).event is DeletionEvent.FILE_DELETED
    assert _outcome(OutcomeStatus.SKIPPED).event is DeletionEvent.FILE_SKIPPED
    assert _outcome(OutcomeStatus.FAILED).event is DeletionEvent.FILE_FAILED
