"""Command line argument parser."""

import argparse
from collections.abc import Sequence
from typing import final

from globrm import __version__
from globrm.config.options import RunOptions
from globrm.config.paths import resolve_log_file
from globrm.platform.logging import setup_logger
from globrm.ui.cli.args.options import DeleteArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="globrm",
            description="Delete files matching glob patterns.",
            epilog=(
                "Quote patterns containing '**' so the shell passes them through unexpanded, "
                "e.g. globrm 'build/**/*.o'."
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "patterns",
            nargs="+",
            help="Files or glob patterns (*, ?, [..], **) to delete",
            metavar="PATTERN",
        )
        _ = parser.add_argument(
            "-d",
            "--debug",
            action="count",
            default=0,
            help="Increase log detail (repeat for trace output)",
        )
        _ = parser.add_argument(
            "-D",
            "--detail-off",
            action="store_true",
            help="Do not print a line for every file",
        )
        _ = parser.add_argument(
            "-n",
            "--dry-run",
            action="store_true",
            help="Report what would be deleted without deleting anything",
        )
        _ = parser.add_argument(
            "-s",
            "--print-summary",
            action="store_true",
            help="Print a summary line at the end of the run",
        )
        _ = parser.add_argument(
            "-q",
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "-V",
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> DeleteArgs:
        """Process command line arguments and configure logging.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            DeleteArgs: Processed command line arguments.

        Raises:
            SystemExit: On malformed invocations (exit code 2), ``--help`` or ``--version``.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        options = RunOptions(
            dry_run=parsed_args.dry_run,
            quiet=parsed_args.quiet,
            show_detail=not parsed_args.detail_off,
            print_summary=parsed_args.print_summary,
            verbosity=parsed_args.debug,
        )
        _ = setup_logger(log_file=resolve_log_file(), console_level=options.console_level)

        return DeleteArgs(patterns=tuple(parsed_args.patterns), options=options)
