"""src/globrm/ui/cli/commands/delete.py
What: Wire resolver, executor and report formatter into one run.
Why: Keep the pipeline in strict order: resolve, then delete and report per file.
"""

from __future__ import annotations

from pathlib import Path

from globrm.features.deletion import DeletionExecutor, FilesystemPort
from globrm.features.resolution import PatternResolver
from globrm.platform.logging import logger
from globrm.ui.cli.args.options import DeleteArgs
from globrm.ui.cli.display.report import ReportFormatter
from globrm.ui.cli.models import RunReport


class DeleteCommand:
    """Resolve patterns, delete the matches and report as it goes."""

    args: DeleteArgs
    resolver: PatternResolver
    executor: DeletionExecutor
    formatter: ReportFormatter

    def __init__(
        self,
        args: DeleteArgs,
        *,
        root: Path | None = None,
        filesystem: FilesystemPort | None = None,
        formatter: ReportFormatter | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            args: Parsed command line arguments.
            root: Directory relative patterns are resolved against (cwd by default).
            filesystem: Filesystem used for removal (local disk by default).
            formatter: Report formatter (stdout/stderr consoles by default).
        """
        self.args = args
        self.resolver = PatternResolver(root=root, logger=logger)
        self.executor = DeletionExecutor(filesystem, dry_run=args.options.dry_run, logger=logger)
        self.formatter = formatter or ReportFormatter(args.options)

    def execute(self) -> RunReport:
        """Run the pipeline.

        Returns:
            RunReport: Resolution result and, when anything resolved, the run summary.
        """
        if self.args.options.dry_run:
            logger.info("Dry-run starting.")

        resolution = self.resolver.resolve(self.args.patterns)
        for error in resolution.errors:
            self.formatter.report_pattern_error(error)

        if resolution.is_empty:
            self.formatter.report_no_matches()
            return RunReport(resolution=resolution, summary=None)

        summary = self.executor.execute(resolution.files, on_outcome=self.formatter.report_outcome)
        self.formatter.report_summary(summary)
        return RunReport(resolution=resolution, summary=summary)
