"""Result collector for browser test runs.

Holds the per-browser test suite reports while a run is in progress and the
process-wide message log that ends up in each report's system output.
"""

import socket
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from ..events import Browser

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _number(data: dict[str, Any], key: str) -> float:
    """Read a numeric report field, defaulting to 0."""
    value = data.get(key, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {type(value).__name__}")
    return value


@dataclass
class TestFailure:
    """A single formatted failure of a test case."""
    __test__ = False

    error: str

    def to_dict(self) -> dict[str, str]:
        return {"error": self.error}


@dataclass
class TestCase:
    """A recorded spec result."""
    __test__ = False

    name: str
    time: float
    class_name: str
    skipped: bool = False
    failures: Optional[list[TestFailure]] = None

    def add_failure(self, error: str) -> None:
        """Add a formatted failure entry."""
        if self.failures is None:
            self.failures = []
        self.failures.append(TestFailure(error=error))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "time": self.time,
            "className": self.class_name,
        }
        if self.skipped:
            data["skipped"] = True
        if self.failures is not None:
            data["failures"] = [f.to_dict() for f in self.failures]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TestCase":
        """Parse a test case entry.

        Raises:
            ValueError: If the entry or its failures have the wrong shape.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Test case must be a mapping, got {type(data).__name__}")

        failures = data.get("failures")
        if failures is not None:
            if not isinstance(failures, list) or not all(isinstance(f, dict) for f in failures):
                raise ValueError("'failures' must be a list of mappings")

        return cls(
            name=data.get("name", ""),
            time=_number(data, "time"),
            class_name=data.get("className", ""),
            skipped=bool(data.get("skipped", False)),
            failures=(
                [TestFailure(error=f.get("error", "")) for f in failures]
                if failures is not None else None
            ),
        )


@dataclass
class TestSuiteReport:
    """Aggregated test suite summary for one browser."""
    __test__ = False

    name: str
    package: str = ""
    timestamp: str = ""
    hostname: str = ""
    properties: dict[str, str] = field(default_factory=dict)
    test_cases: list[TestCase] = field(default_factory=list)
    tests: int = 0
    errors: int = 0
    failures: int = 0
    time: float = 0
    system_out: str = ""
    system_err: str = ""

    @classmethod
    def for_browser(
        cls,
        browser: Browser,
        package: str = "",
        properties: Optional[dict[str, str]] = None,
        now: Optional[datetime] = None,
    ) -> "TestSuiteReport":
        """Create a fresh report for a browser that is starting a run.

        Args:
            browser: Browser the run executes in.
            package: Package (suite) name.
            properties: Extra properties merged after ``browser.fullName``.
            now: Current time. Defaults to the current UTC time.
        """
        now = now or datetime.now(timezone.utc)
        suite_properties = {"browser.fullName": browser.full_name}
        suite_properties.update(properties or {})

        return cls(
            name=browser.name,
            package=package,
            timestamp=now.strftime(TIMESTAMP_FORMAT),
            hostname=socket.gethostname(),
            properties=suite_properties,
        )

    def add_test_case(self, test_case: TestCase) -> None:
        self.test_cases.append(test_case)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON report document."""
        return {
            "testSuite": {
                "name": self.name,
                "package": self.package,
                "timestamp": self.timestamp,
                "hostname": self.hostname,
                "properties": dict(self.properties),
                "testCases": [tc.to_dict() for tc in self.test_cases],
                "tests": self.tests,
                "errors": self.errors,
                "failures": self.failures,
                "time": self.time,
                "systemOut": self.system_out,
                "systemErr": self.system_err,
            }
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TestSuiteReport":
        """Parse a JSON report document.

        Raises:
            ValueError: If the document has no ``testSuite`` mapping or
                        one of its fields has the wrong shape.
        """
        suite = data.get("testSuite") if isinstance(data, dict) else None
        if not isinstance(suite, dict):
            raise ValueError("Report document must contain a 'testSuite' mapping")

        test_cases = suite.get("testCases", [])
        if not isinstance(test_cases, list):
            raise ValueError("'testCases' must be a list")

        properties = suite.get("properties") or {}
        if not isinstance(properties, dict):
            raise ValueError("'properties' must be a mapping")

        return cls(
            name=suite.get("name", ""),
            package=suite.get("package", ""),
            timestamp=suite.get("timestamp", ""),
            hostname=suite.get("hostname", ""),
            properties=dict(properties),
            test_cases=[TestCase.from_dict(tc) for tc in test_cases],
            tests=_number(suite, "tests"),
            errors=_number(suite, "errors"),
            failures=_number(suite, "failures"),
            time=_number(suite, "time"),
            system_out=suite.get("systemOut", ""),
            system_err=suite.get("systemErr", ""),
        )


class BrowserRunState:
    """Reports of the browsers currently running, keyed by browser id."""

    def __init__(self):
        self._reports: dict[Any, Optional[TestSuiteReport]] = {}

    def start(self, browser: Browser, report: TestSuiteReport) -> TestSuiteReport:
        """Store a fresh report for a browser, replacing any previous one."""
        self._reports[browser.id] = report
        return report

    def get(self, browser: Browser) -> Optional[TestSuiteReport]:
        return self._reports.get(browser.id)

    def release(self, browser: Browser) -> None:
        """Drop the browser's report once it has been handed off for writing."""
        self._reports[browser.id] = None

    def __contains__(self, browser: Browser) -> bool:
        return self._reports.get(browser.id) is not None


class MessageLog:
    """Process-wide log of messages captured during a run."""

    def __init__(self):
        self.messages: list[str] = []

    def append(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()

    def text(self) -> str:
        """All messages joined, followed by a newline."""
        return "".join(self.messages) + "\n"

    def __len__(self) -> int:
        return len(self.messages)
