"""src/globrm/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass

from globrm.features.deletion import RunSummary
from globrm.features.resolution import ResolutionResult


@dataclass(slots=True, frozen=True)
class RunReport:
    """What a delete command resolved and what happened to it."""

    resolution: ResolutionResult
    summary: RunSummary | None

    @property
    def nothing_resolved(self) -> bool:
        """Whether every pattern failed or matched nothing."""

        return self.resolution.is_empty


__all__ = ["RunReport"]
