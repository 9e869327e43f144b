"""Command execution package for CLI."""

from globrm.ui.cli.commands.delete import DeleteCommand

__all__ = ["DeleteCommand"]
