"""Shared path utilities for optional log file locations.

globrm keeps no configuration file. The only location it ever writes
besides the files it deletes is an optional log file, enabled through the
``GLOBRM_LOG_FILE`` environment variable.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final


LOG_FILE_ENV: Final[str] = "GLOBRM_LOG_FILE"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    if default_path is None:
        return None
    return default_path.expanduser().resolve()


def resolve_log_file(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path | None:
    """Return the log file to write, or ``None`` when file logging is off."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=LOG_FILE_ENV,
        default_factory=lambda: None,
    )


__all__ = ["LOG_FILE_ENV", "resolve_log_file", "resolve_overridable_path"]
