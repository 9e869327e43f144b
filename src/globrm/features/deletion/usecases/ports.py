"""Ports consumed by the deletion executor."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FilesystemPort(Protocol):
    """Filesystem operations needed to delete files."""

    def remove_file(self, path: Path) -> None:
        """Remove ``path``, raising ``OSError`` on failure."""
        ...


__all__ = ["FilesystemPort"]
