# Where: globrm.shared.__init__
# What: Provide a concise import surface for shared errors and display helpers.
# Why: Let every feature raise from a common hierarchy and print paths the same way.

"""Shared cross-cutting utilities exposed at the package level."""

from .display import printable_path
from .errors import DeletionError, GlobrmError, InvalidPatternError, PatternError

__all__ = ["DeletionError", "GlobrmError", "InvalidPatternError", "PatternError", "printable_path"]
