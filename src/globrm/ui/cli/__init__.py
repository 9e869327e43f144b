"""CLI package exposing the console entry point."""

from globrm.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
