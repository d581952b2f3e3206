"""Default formatters for test case names and class names."""

import traceback
from typing import Any

from ..events import Browser, SpecResult


def default_name_formatter(browser: Browser, result: SpecResult) -> str:
    """Join the suite path and the spec description with spaces."""
    return " ".join(result.suite) + " " + result.description


def default_class_name(
    browser: Browser,
    result: SpecResult,
    package: str = "",
    use_browser_name: bool = True,
) -> str:
    """Build the default class name of a test case.

    ``<browser>.<package>.<first suite>``, where the browser part has dots
    replaced by underscores and is only present when output is namespaced
    by browser.
    """
    browser_part = browser.safe_name.replace(".", "_") + "." if use_browser_name else ""
    package_part = package + "." if package else ""
    return browser_part + package_part + result.first_suite


def format_error(error: Any) -> str:
    """Format a raw error log entry as text."""
    if isinstance(error, BaseException):
        return "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    return str(error)
