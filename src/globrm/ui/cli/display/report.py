"""src/globrm/ui/cli/display/report.py
What: Render per-file outcome lines, pattern errors and the run summary.
Why: Apply quiet, detail-off and print-summary consistently in one place.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import final

from rich.console import Console
from rich.markup import escape

from globrm.config.options import RunOptions
from globrm.features.deletion import DeletionOutcome, OutcomeStatus, RunSummary
from globrm.shared.display import printable_path
from globrm.shared.errors import PatternError


def _markup_path(path: PurePath | str) -> str:
    """Printable, markup-escaped form of a path or pattern."""

    return escape(printable_path(path))


def thousands(value: int) -> str:
    """Format an integer with comma thousands separators, e.g. ``10,000``."""

    return f"{value:,}"


@final
class ReportFormatter:
    """Streams outcome lines to stdout and errors to stderr."""

    options: RunOptions
    console: Console
    error_console: Console

    def __init__(
        self,
        options: RunOptions,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            options: Run options carrying the quiet, detail and summary flags.
            console: Console for per-file and summary lines.
            error_console: Console for errors; always written, even in quiet mode.
        """
        self.options = options
        self.console = console or Console(soft_wrap=True, emoji=False)
        self.error_console = error_console or Console(stderr=True, soft_wrap=True, emoji=False)

    def report_outcome(self, outcome: DeletionOutcome) -> None:
        """Print the line for one outcome as soon as it is produced."""

        path = _markup_path(outcome.file.path)
        if outcome.status is OutcomeStatus.FAILED:
            reason = escape(printable_path(outcome.reason or "unknown error"))
            self.error_console.print(f"[red]Failed: {path} ({reason})[/red]", emoji=False)
            return

        if not self.options.emits_detail:
            return

        size = thousands(outcome.file.size_bytes)
        if outcome.status is OutcomeStatus.DELETED:
            self.console.print(f"[green]Deleted:[/green] {path} ({size} bytes)", emoji=False)
        else:
            self.console.print(f"[yellow]Would delete:[/yellow] {path} ({size} bytes)", emoji=False)

    def report_pattern_error(self, error: PatternError) -> None:
        """Print a pattern that could not be resolved."""

        self.error_console.print(
            f"[red]Pattern error: {_markup_path(error.pattern)} ({escape(printable_path(error.reason))})[/red]",
            emoji=False,
        )

    def report_no_matches(self) -> None:
        """Print the fatal notice for a run where nothing resolved."""

        self.error_console.print("[red]No files matched any of the given patterns[/red]")

    def report_summary(self, summary: RunSummary) -> None:
        """Print the single summary line when requested and not quiet."""

        if not self.options.emits_summary:
            return

        self.console.print(self.format_summary(summary))

    @staticmethod
    def format_summary(summary: RunSummary) -> str:
        """Build the summary line for ``summary``."""

        parts = [
            f"{thousands(summary.total_considered)} considered",
            f"{thousands(summary.deleted)} deleted",
            f"{thousands(summary.failed)} failed",
        ]
        if summary.dry_run:
            parts.append(f"{thousands(summary.skipped)} skipped (dry run)")
            parts.append(f"{thousands(summary.bytes_considered)} bytes would be freed")
        else:
            parts.append(f"{thousands(summary.bytes_freed)} bytes freed")
        return f"[bold]Summary:[/bold] {', '.join(parts)} in {summary.duration_seconds:.2f}s"


__all__ = ["ReportFormatter", "thousands"]
