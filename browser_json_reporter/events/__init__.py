"""Events module - host runner payloads."""

from .payloads import Browser, BrowserResult, SpecResult, sanitize_browser_name

__all__ = [
    "Browser",
    "BrowserResult",
    "SpecResult",
    "sanitize_browser_name",
]
