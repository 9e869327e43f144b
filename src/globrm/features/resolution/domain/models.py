"""
Summary: Value objects produced by pattern resolution.
Why: Hand the executor a stable, deduplicated list with per-pattern errors kept aside.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from globrm.shared.errors import PatternError


@dataclass(slots=True, frozen=True)
class ResolvedFile:
    """A concrete file that existed when its pattern was expanded."""

    path: Path
    pattern: str
    size_bytes: int = 0


@dataclass(slots=True)
class ResolutionResult:
    """Ordered files and per-pattern errors for one resolution pass."""

    files: list[ResolvedFile] = field(default_factory=list)
    errors: list[PatternError] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Whether no pattern resolved to any file."""

        return not self.files

    @property
    def paths(self) -> list[Path]:
        """Resolved paths in resolution order."""

        return [resolved.path for resolved in self.files]


__all__ = ["ResolutionResult", "ResolvedFile"]
