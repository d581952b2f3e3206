"""Host runner event payloads.

Dataclasses for the objects the host test runner hands to reporter hooks:
the browser a run executes in, its final result summary, and the result
of a single spec.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


def sanitize_browser_name(name: str) -> str:
    """Replace spaces so the browser name can be used in file names."""
    return name.replace(" ", "_")


@dataclass
class BrowserResult:
    """Final result summary of a browser run."""
    total: int = 0
    success: int = 0
    failed: int = 0
    skipped: int = 0
    disconnected: bool = False
    error: bool = False
    net_time: float = 0  # milliseconds

    @property
    def has_errors(self) -> bool:
        return bool(self.disconnected or self.error)


@dataclass
class Browser:
    """A test execution target managed by the host runner."""
    id: Any
    name: str
    full_name: str = ""
    last_result: Optional[BrowserResult] = None

    @property
    def safe_name(self) -> str:
        """Display name with spaces replaced by underscores."""
        return sanitize_browser_name(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass
class SpecResult:
    """Outcome of a single spec execution."""
    suite: list[str] = field(default_factory=list)
    description: str = ""
    time: float = 0  # milliseconds
    skipped: bool = False
    success: bool = True
    log: list[Any] = field(default_factory=list)

    @property
    def first_suite(self) -> str:
        return self.suite[0] if self.suite else ""
