"""Command line interface for globrm."""

import sys
from typing import final

from globrm.platform.logging import logger
from globrm.ui.cli.args import ArgumentParser, DeleteArgs
from globrm.ui.cli.commands import DeleteCommand

EXIT_OK = 0
EXIT_NOTHING_RESOLVED = 1
EXIT_INTERRUPTED = 130


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: ``0`` when the run completed, even if some deletions failed;
            ``1`` when no pattern resolved to any file.
        """
        args: DeleteArgs = ArgumentParser.process_args(args_list)
        try:
            report = DeleteCommand(args).execute()
        except KeyboardInterrupt:
            logger.error("Operation cancelled by user")
            return EXIT_INTERRUPTED
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1

        if report.nothing_resolved:
            return EXIT_NOTHING_RESOLVED
        return EXIT_OK


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code. Argument errors exit with code 2 from
        ``argparse`` before this returns.
    """
    return CommandProcessor.process_command(sys.argv[1:])
