"""src/globrm/shared/errors.py
What: Exception hierarchy shared by resolution and deletion features.
Why: Keep per-pattern and per-file failures distinct from fatal errors.
"""

from __future__ import annotations

from pathlib import Path


class GlobrmError(Exception):
    """Base class for all globrm errors."""


class PatternError(GlobrmError):
    """Raised when a single input pattern cannot be resolved."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"{pattern}: {reason}")
        self.pattern: str = pattern
        self.reason: str = reason


class InvalidPatternError(PatternError):
    """Raised when a glob pattern is syntactically invalid."""


class DeletionError(GlobrmError):
    """Carry the reason a file could not be removed."""

    def __init__(self, path: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(f"Unable to remove {path}: {reason}")
        self.path: Path = path
        self.reason: str = reason
        self.error: OSError = error
