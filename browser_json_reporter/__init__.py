"""
browser-json-reporter: JSON test reports for browser test runners.

Collects spec results per browser and writes one JSON report file per
browser when its run completes.
"""

from .config import ReporterConfig, load_config
from .events import Browser, BrowserResult, SpecResult
from .reporting import JsonReporter

__version__ = "0.1.0"
__all__ = [
    "JsonReporter",
    "ReporterConfig",
    "load_config",
    "Browser",
    "BrowserResult",
    "SpecResult",
]
