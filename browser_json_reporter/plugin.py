"""
Pytest plugin that writes JSON reports through JsonReporter.

Registered via the pytest11 entry point in setup.py. The running Python
interpreter is reported as a single browser.
"""

import platform
import threading
import time
from typing import Optional

import pytest

from .config import ReporterConfig, load_config
from .events import Browser, BrowserResult, SpecResult
from .reporting import JsonReporter

# Seconds to wait for pending report files at exit
EXIT_TIMEOUT = 30.0


def pytest_addoption(parser):
    """Add command-line options for the JSON reporter."""
    group = parser.getgroup("json-reporter")
    group.addoption(
        "--json-reporter",
        action="store_true",
        default=False,
        help="Write a JSON test report after the run",
    )
    group.addoption(
        "--json-reporter-output-dir",
        action="store",
        default=None,
        help="Directory for JSON reports (default: current directory)",
    )
    group.addoption(
        "--json-reporter-output-file",
        action="store",
        default=None,
        help="Fixed report file name (default: TESTS-<browser>.json)",
    )
    group.addoption(
        "--json-reporter-config",
        action="store",
        default=None,
        help="YAML file with the reporter configuration",
    )


def pytest_configure(config):
    """Register the session plugin when --json-reporter is passed."""
    if not config.getoption("--json-reporter", default=False):
        return

    reporter = JsonReporter(build_reporter_config(config))
    config.pluginmanager.register(
        JsonReporterPlugin(reporter), "json_reporter_plugin"
    )


def build_reporter_config(config) -> ReporterConfig:
    """Build the reporter configuration from pytest options."""
    config_path = config.getoption("--json-reporter-config")
    if config_path:
        reporter_config = load_config(config_path)
    else:
        reporter_config = ReporterConfig(base_path=str(config.rootpath))

    output_dir = config.getoption("--json-reporter-output-dir")
    if output_dir:
        reporter_config.output_dir = output_dir

    output_file = config.getoption("--json-reporter-output-file")
    if output_file:
        reporter_config.output_file = output_file

    return reporter_config


def python_browser() -> Browser:
    """Describe the running interpreter as a browser."""
    return Browser(
        id="python",
        name=f"Python {platform.python_version()}",
        full_name=f"{platform.python_implementation()} {platform.python_version()} ({platform.platform()})",
    )


def should_record(report: pytest.TestReport) -> bool:
    """Whether a setup or call report carries the test's outcome."""
    if report.when == "call":
        return True
    return report.when == "setup" and (report.failed or report.skipped)


def spec_result_from_report(report: pytest.TestReport) -> SpecResult:
    """Convert a pytest phase report to a spec result."""
    parts = report.nodeid.split("::")
    return SpecResult(
        suite=parts[:-1],
        description=parts[-1],
        time=(report.duration or 0) * 1000,
        skipped=report.skipped,
        success=not report.failed,
        log=[report.longreprtext] if report.failed else [],
    )


class JsonReporterPlugin:
    """Drives a JsonReporter from pytest's session hooks."""

    def __init__(self, reporter: JsonReporter, browser: Optional[Browser] = None):
        self.reporter = reporter
        self.browser = browser or python_browser()
        self.result = BrowserResult()
        self._start_time: Optional[float] = None
        # nodeid -> result held until the test's teardown report
        self._pending: dict[str, SpecResult] = {}

    def pytest_sessionstart(self, session):
        self._start_time = time.time()
        self.reporter.on_run_start([self.browser])
        self.reporter.on_browser_start(self.browser)

    def pytest_runtest_logreport(self, report: pytest.TestReport):
        if report.when != "teardown":
            if should_record(report):
                self._pending[report.nodeid] = spec_result_from_report(report)
                if report.capstdout:
                    self.reporter.write(report.capstdout)
            return

        result = self._pending.pop(report.nodeid, None)
        if report.failed:
            if result is None:
                result = spec_result_from_report(report)
            else:
                result.success = False
                result.log.append(report.longreprtext)
        if result is not None:
            self._record(result)

    def _record(self, result: SpecResult) -> None:
        self.result.total += 1
        if not result.success:
            self.result.failed += 1
            handler = self.reporter.spec_failure
        elif result.skipped:
            self.result.skipped += 1
            handler = self.reporter.spec_skipped
        else:
            self.result.success += 1
            handler = self.reporter.spec_success

        handler(self.browser, result)

    @pytest.hookimpl(trylast=True)
    def pytest_sessionfinish(self, session, exitstatus):
        # Tests interrupted before their teardown
        for result in self._pending.values():
            self._record(result)
        self._pending.clear()

        if self._start_time is not None:
            self.result.net_time = (time.time() - self._start_time) * 1000
        self.result.error = exitstatus in (
            pytest.ExitCode.INTERRUPTED,
            pytest.ExitCode.INTERNAL_ERROR,
        )

        self.browser.last_result = self.result
        self.reporter.on_browser_complete(self.browser)
        self.reporter.on_run_complete([self.browser], self.result)

    def pytest_unconfigure(self, config):
        """Wait for report files before pytest exits."""
        drained = threading.Event()
        self.reporter.on_exit(drained.set)
        if not drained.wait(timeout=EXIT_TIMEOUT):
            self.reporter.log.warning(
                "Report files still pending after %.0fs", EXIT_TIMEOUT
            )
        self.reporter.close()
