"""Report formatting."""

from .formatter import format_deep_report, format_simple_report

__all__ = ["format_deep_report", "format_simple_report"]
