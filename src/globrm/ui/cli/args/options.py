"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from globrm.config.options import RunOptions


@final
@dataclass(slots=True, frozen=True)
class DeleteArgs:
    """Parsed command line: the patterns to resolve and the run options."""

    patterns: tuple[str, ...]
    options: RunOptions


__all__ = ["DeleteArgs"]
