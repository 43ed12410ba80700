"""UI."""

from report_export.ui.reporter import Reporter

__all__ = ["Reporter"]
