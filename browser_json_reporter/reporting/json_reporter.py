"""JSON reporter for browser test runs.

Listens to the host runner's lifecycle events, collects the results of every
browser into a test suite report and writes one JSON file per browser when
that browser completes.
"""

import logging
from typing import Any, Callable, Iterable, Optional

from ..config import ReporterConfig
from ..events import Browser, SpecResult
from ..runner.result_collector import (
    BrowserRunState,
    MessageLog,
    TestCase,
    TestSuiteReport,
)
from ..writer import LocalFilesystem, ReportWriter
from .formatters import default_class_name, default_name_formatter, format_error
from .paths import resolve_output_file

LOGGER_NAME = "reporter.json"


class JsonReporter:
    """Collects per-browser results and writes them as JSON reports.

    Hooks mirror the host runner's events:
    on_run_start, on_browser_start, spec_success / spec_skipped /
    spec_failure, on_browser_complete, on_run_complete and on_exit.
    """

    def __init__(
        self,
        config: Optional[ReporterConfig] = None,
        logger_factory: Callable[[str], logging.Logger] = logging.getLogger,
        filesystem: Optional[LocalFilesystem] = None,
        format_error: Callable[[Any], str] = format_error,
        writer: Optional[ReportWriter] = None,
    ):
        """Initialize JSON reporter.

        Args:
            config: Reporter configuration. Default: ReporterConfig().
            logger_factory: Creates the reporter's logger from a name.
            filesystem: Filesystem helper used for path normalization and writes.
            format_error: Formats a raw error log entry as text.
            writer: Report writer. Default: a ReportWriter on ``filesystem``.
        """
        self.config = config or ReporterConfig()
        self.log = logger_factory(LOGGER_NAME)
        self.filesystem = filesystem or LocalFilesystem()
        self.format_error = format_error
        self.writer = writer or ReportWriter(self.filesystem, log=self.log)

        self.output_dir = self.config.resolved_output_dir(self.filesystem.normalize_path)
        self.name_formatter = self.config.name_formatter or default_name_formatter
        if callable(self.config.class_name_formatter):
            self.class_name_formatter = self.config.class_name_formatter
        else:
            self.class_name_formatter = self._default_class_name

        self.state = BrowserRunState()
        self.messages = MessageLog()
        self.adapters: list[Callable[[str], None]] = [self.messages.append]

    def _initialize_browser(self, browser: Browser) -> TestSuiteReport:
        report = TestSuiteReport.for_browser(
            browser,
            package=self.config.suite,
            properties=self.config.properties,
        )
        return self.state.start(browser, report)

    def _default_class_name(self, browser: Browser, result: SpecResult) -> str:
        return default_class_name(
            browser,
            result,
            package=self.config.suite,
            use_browser_name=self.config.use_browser_name,
        )

    def output_file_for(self, browser: Browser) -> str:
        """Resolve the report file path of a browser."""
        return resolve_output_file(
            self.output_dir,
            browser.name,
            output_file=self.config.output_file,
            use_browser_name=self.config.use_browser_name,
        )

    def write(self, message: str) -> None:
        """Pass a message to every adapter."""
        for adapter in self.adapters:
            adapter(message)

    # "run_start" - a test run is beginning for all browsers
    def on_run_start(self, browsers: Iterable[Browser]) -> None:
        for browser in browsers:
            self._initialize_browser(browser)

    # "browser_start" - a test run is beginning in this browser
    def on_browser_start(self, browser: Browser) -> None:
        self._initialize_browser(browser)

    def on_spec_complete(self, browser: Browser, result: SpecResult) -> None:
        """Record a spec result in the browser's report."""
        report = self.state.get(browser)
        if report is None:
            return  # browser never started

        test_case = TestCase(
            name=self.name_formatter(browser, result),
            time=(result.time or 0) / 1000,
            class_name=self.class_name_formatter(browser, result),
        )

        if result.skipped:
            test_case.skipped = True

        if not result.success:
            test_case.failures = []
            for error in result.log:
                test_case.add_failure(self.format_error(error))

        report.add_test_case(test_case)

    spec_success = on_spec_complete
    spec_skipped = on_spec_complete
    spec_failure = on_spec_complete

    # "browser_complete" - a test run has completed in this browser
    def on_browser_complete(self, browser: Browser) -> None:
        report = self.state.get(browser)
        result = browser.last_result
        if report is None or result is None:
            return  # browser never started

        report.tests = result.total or 0
        report.errors = 1 if result.has_errors else 0
        report.failures = result.failed or 0
        report.time = (result.net_time or 0) / 1000
        report.system_out = self.messages.text()
        report.system_err = self.messages.text()

        self.writer.write(self.output_file_for(browser), report.to_dict())

        # Release memory held by the test suite
        self.state.release(browser)

    # "run_complete" - a test run has completed on all browsers
    def on_run_complete(self, *args: Any) -> None:
        self.messages.clear()

    def on_exit(self, done: Callable[[], None]) -> None:
        """Call ``done`` once every report file has been written."""
        if self.writer.pending.pending:
            self.log.debug("Waiting for %d report file(s)", self.writer.pending.pending)
        self.writer.when_drained(done)

    def close(self) -> None:
        """Stop the report writer."""
        self.writer.shutdown()
