"""Reporting module - JSON test reports."""

from .formatters import default_class_name, default_name_formatter, format_error
from .json_reporter import JsonReporter
from .paths import resolve_output_file, sanitize_browser_name

__all__ = [
    "JsonReporter",
    "default_class_name",
    "default_name_formatter",
    "format_error",
    "resolve_output_file",
    "sanitize_browser_name",
]
