"""Config module - reporter configuration."""

from .schema import DEFAULT_OUTPUT_DIR, ReporterConfig
from .parser import load_config, parse_config_data, resolve_callable

__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "ReporterConfig",
    "load_config",
    "parse_config_data",
    "resolve_callable",
]
