"""Rendering adapters - Implementations of ReportRendererPort.

Available implementations:
- TextReportRenderer: Plain-text matrix and path report
"""

from .text_report import TextReportRenderer, format_path_line

__all__ = ["TextReportRenderer", "format_path_line"]
