"""Reporter configuration model."""

import os
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..events import Browser, SpecResult

DEFAULT_OUTPUT_DIR = "."


@dataclass
class ReporterConfig:
    """Configuration of the JSON reporter, supplied once at construction."""
    suite: str = ""
    output_dir: Optional[str] = None
    output_file: Optional[str] = None
    use_browser_name: Optional[bool] = None
    name_formatter: Optional[Callable[[Browser, SpecResult], str]] = None
    class_name_formatter: Any = None
    properties: dict[str, str] = field(default_factory=dict)
    base_path: Optional[str] = None

    def __post_init__(self):
        if self.output_dir is None:
            self.output_dir = DEFAULT_OUTPUT_DIR
        if self.use_browser_name is None:
            self.use_browser_name = True
        if self.base_path is None:
            self.base_path = os.getcwd()
        if self.properties is None:
            self.properties = {}

    def resolved_output_dir(self, normalize: Callable[[str], str] = os.path.normpath) -> str:
        """Output directory resolved against the base path, with a trailing separator."""
        resolved = os.path.abspath(os.path.join(self.base_path, self.output_dir))
        return normalize(resolved) + os.sep
