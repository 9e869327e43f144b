"""Shared pytest fixtures for filesystem-backed tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Iterable[str]], Path]:
    """Return a helper that creates files (and their parents) below ``tmp_path``."""

    def _make(relative_paths: Iterable[str]) -> Path:
        for relative in relative_paths:
            target = tmp_path / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(relative, encoding="utf-8")
        return tmp_path

    return _make
