"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure logging defaults and expose the shared application logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from globrm.config.paths import resolve_log_file

from .handlers import EventRichHandler


LOGGER_NAME: Final[str] = "globrm"
DEFAULT_LOG_FILE: Final[Path | None] = resolve_log_file()


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output.
        file_level: Logging level for file output.
        console: Rich console to render to. Defaults to a stderr console.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(console_level, file_level) if log_file else console_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = EventRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
