"""Display management for CLI interface."""

from globrm.ui.cli.display.report import ReportFormatter, thousands

__all__ = ["ReportFormatter", "thousands"]
