"""
Summary: Public surface of the deletion feature.
Why: Expose the executor and its outcome types through one import path.
"""

from __future__ import annotations

from .adapters.local import LocalFilesystem
from .domain.models import DeletionEvent, DeletionOutcome, OutcomeStatus, RunSummary
from .usecases.executor import DeletionExecutor
from .usecases.ports import FilesystemPort

__all__ = [
    "DeletionEvent",
    "DeletionExecutor",
    "DeletionOutcome",
    "FilesystemPort",
    "LocalFilesystem",
    "OutcomeStatus",
    "RunSummary",
]
