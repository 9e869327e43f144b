"""Rich console handler for structured globrm log records."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from globrm.shared.display import printable_path


class EventRichHandler(RichHandler):
    """Rich handler that renders ``deletion_event`` records with icons and compact paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "deletion.run.start": ("🚀", "cyan"),
        "deletion.run.complete": ("✅", "green"),
        "deletion.file.deleted": ("🗑️", "green"),
        "deletion.file.skipped": ("↪️", "yellow"),
        "deletion.file.failed": ("⛔", "red"),
        "resolution.pattern.matched": ("🔎", "blue"),
        "resolution.pattern.empty": ("ℹ️", "yellow"),
        "resolution.pattern.error": ("❌", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "deletion.run.start": "Run start",
        "deletion.run.complete": "Run complete",
        "deletion.file.deleted": "Deleted ",
        "deletion.file.skipped": "Skipped ",
        "deletion.file.failed": "Failed ",
        "resolution.pattern.matched": "Pattern ",
        "resolution.pattern.empty": "No match for ",
        "resolution.pattern.error": "Pattern error ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with coloured separators and ellipsis truncation."""

        pure_path = self._to_pure_path(path)
        separator = "\\" if isinstance(pure_path, PureWindowsPath) else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = anchor if anchor else ""
        if truncated:
            display_string += "…" + separator
        display_string += separator.join(body_parts)
        if not display_string:
            display_string = "."
        display_string = printable_path(display_string)

        text = Text()
        for char in display_string:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_event_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured deletion events with dedicated styling."""

        event = getattr(record, "deletion_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if event.startswith("deletion.file") and isinstance(sequence, int):
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        _ = body.append(self._EVENT_LABELS.get(event, event))

        pattern = getattr(record, "pattern", None)
        path = getattr(record, "path", None)
        if event.startswith("resolution") and pattern:
            _ = body.append(repr(str(pattern)))
        elif path:
            _ = body.append_text(self._format_path(str(path)))

        details: list[str] = []
        if event == "deletion.run.start":
            if isinstance(total_files, int):
                details.append(f"total={total_files}")
            if getattr(record, "dry_run", False):
                details.append("dry-run")
        elif event == "deletion.run.complete":
            for key in ("deleted", "skipped", "failed"):
                value = getattr(record, key, None)
                if isinstance(value, int):
                    details.append(f"{key}={value}")
            duration = getattr(record, "duration_seconds", None)
            if isinstance(duration, (int, float)):
                details.append(f"duration={duration:.2f}s")
        elif event == "resolution.pattern.matched":
            matches = getattr(record, "matches", None)
            if isinstance(matches, int):
                details.append(f"matches={matches}")

        reason = getattr(record, "reason", None)
        if reason:
            details.append(str(reason))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for deletion events."""

        event_text = self._render_event_message(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)
