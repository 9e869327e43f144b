"""Local filesystem adapter backed by ``pathlib``."""

from __future__ import annotations

from pathlib import Path
from typing import final


@final
class LocalFilesystem:
    """Remove files from the local disk."""

    def remove_file(self, path: Path) -> None:
        path.unlink()


__all__ = ["LocalFilesystem"]
