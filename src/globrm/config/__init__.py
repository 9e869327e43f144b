"""Runtime configuration for globrm."""

from globrm.config.options import TRACE, RunOptions
from globrm.config.paths import LOG_FILE_ENV, resolve_log_file, resolve_overridable_path

__all__ = [
    "LOG_FILE_ENV",
    "TRACE",
    "RunOptions",
    "resolve_log_file",
    "resolve_overridable_path",
]
