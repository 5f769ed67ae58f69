"""Report formatting and the append-only result log."""

from ccscan.reporting.formatters import format_json, format_text, get_formatter
from ccscan.reporting.writer import ReportWriter

__all__ = [
    "format_json",
    "format_text",
    "get_formatter",
    "ReportWriter",
]
