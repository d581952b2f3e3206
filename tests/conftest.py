pytest_plugins = ["pytester"]

import threading
from pathlib import Path

import pytest

from browser_json_reporter.config import ReporterConfig
from browser_json_reporter.events import Browser, BrowserResult, SpecResult
from browser_json_reporter.reporting import JsonReporter

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class FakeFilesystem:
    """In-memory filesystem; writes can be held until released."""

    def __init__(self, block: bool = False, fail_on: tuple[str, ...] = ()):
        self.files: dict[str, str] = {}
        self.dirs: list[str] = []
        self.fail_on = fail_on
        self.release = threading.Event()
        if not block:
            self.release.set()

    def normalize_path(self, path):
        return path

    def mkdir_recursive(self, path):
        self.dirs.append(path)

    def write_file(self, path, content):
        self.release.wait(timeout=5)
        if path in self.fail_on:
            raise OSError(f"disk full: {path}")
        self.files[path] = content


def wait_for_writes(reporter, timeout=5.0) -> bool:
    drained = threading.Event()
    reporter.on_exit(drained.set)
    return drained.wait(timeout)


@pytest.fixture
def sample_report_path():
    return FIXTURES_DIR / "TESTS-Chrome_91.0.json"


@pytest.fixture
def filesystem():
    return FakeFilesystem()


@pytest.fixture
def chrome():
    return Browser(id=1, name="Chrome 91.0", full_name="Chrome 91.0 (Linux x86_64)")


@pytest.fixture
def firefox():
    return Browser(id=2, name="Firefox 89.0", full_name="Firefox 89.0 (Linux x86_64)")


@pytest.fixture
def make_reporter(filesystem, tmp_path):
    reporters = []

    def factory(fs=None, **config_kwargs):
        config_kwargs.setdefault("base_path", str(tmp_path))
        config_kwargs.setdefault("output_dir", "out")
        reporter = JsonReporter(ReporterConfig(**config_kwargs), filesystem=fs or filesystem)
        reporters.append(reporter)
        return reporter

    yield factory

    for reporter in reporters:
        reporter.close()


def passed(*suite, description="works", time=12):
    return SpecResult(suite=list(suite), description=description, time=time)


def completed(browser, total=1, failed=0, net_time=1500, **kwargs):
    browser.last_result = BrowserResult(total=total, failed=failed, net_time=net_time, **kwargs)
    return browser
