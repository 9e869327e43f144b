"""Where: src/globrm/config/options.py
What: Immutable run options threaded through resolver, executor and reporter.
Why: Keep verbosity and mode switches explicit instead of process-global.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

TRACE: Final[int] = 5
logging.addLevelName(TRACE, "TRACE")


@dataclass(slots=True, frozen=True)
class RunOptions:
    """Switches that shape a single deletion run."""

    dry_run: bool = False
    quiet: bool = False
    show_detail: bool = True
    print_summary: bool = False
    verbosity: int = 0

    @property
    def console_level(self) -> int:
        """Return the console log level implied by quiet and debug flags."""

        if self.quiet:
            return logging.ERROR
        if self.verbosity >= 2:
            return TRACE
        if self.verbosity == 1:
            return logging.DEBUG
        return logging.WARNING

    @property
    def emits_detail(self) -> bool:
        """Whether per-file lines should be printed."""

        return self.show_detail and not self.quiet

    @property
    def emits_summary(self) -> bool:
        """Whether the final summary line should be printed."""

        return self.print_summary and not self.quiet


__all__ = ["TRACE", "RunOptions"]
