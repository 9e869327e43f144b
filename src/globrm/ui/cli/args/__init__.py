"""Command line argument handling package."""

from globrm.ui.cli.args.options import DeleteArgs
from globrm.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "DeleteArgs"]
