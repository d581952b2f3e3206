"""Runner module - per-browser result collection."""

from .result_collector import (
    BrowserRunState,
    MessageLog,
    TestCase,
    TestFailure,
    TestSuiteReport,
)

__all__ = [
    "BrowserRunState",
    "MessageLog",
    "TestCase",
    "TestFailure",
    "TestSuiteReport",
]
