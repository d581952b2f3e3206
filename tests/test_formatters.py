import os

import pytest

from browser_json_reporter.events import Browser, SpecResult
from browser_json_reporter.reporting.formatters import (
    default_class_name,
    default_name_formatter,
    format_error,
)
from browser_json_reporter.reporting.paths import (
    resolve_output_file,
    sanitize_browser_name,
)


@pytest.fixture
def browser():
    return Browser(id=1, name="Chrome 91.0", full_name="Chrome 91.0 (Linux)")


class TestDefaultNameFormatter:
    def test_joins_suite_and_description(self, browser):
        result = SpecResult(suite=["Foo", "Bar"], description="works")
        assert default_name_formatter(browser, result) == "Foo Bar works"

    def test_single_suite(self, browser):
        result = SpecResult(suite=["Foo"], description="works")
        assert default_name_formatter(browser, result) == "Foo works"


class TestDefaultClassName:
    def test_namespaced_with_package(self, browser):
        result = SpecResult(suite=["Foo", "Bar"], description="works")
        name = default_class_name(browser, result, package="app", use_browser_name=True)
        assert name == "Chrome_91_0.app.Foo"

    def test_namespaced_without_package(self, browser):
        result = SpecResult(suite=["Foo"], description="works")
        assert default_class_name(browser, result) == "Chrome_91_0.Foo"

    def test_not_namespaced(self, browser):
        result = SpecResult(suite=["Foo"], description="works")
        name = default_class_name(browser, result, package="app", use_browser_name=False)
        assert name == "app.Foo"

    def test_not_namespaced_no_package(self, browser):
        result = SpecResult(suite=["Foo"], description="works")
        assert default_class_name(browser, result, use_browser_name=False) == "Foo"


class TestFormatError:
    def test_string_passthrough(self):
        assert format_error("boom") == "boom"

    def test_exception_includes_type(self):
        try:
            raise ValueError("bad value")
        except ValueError as e:
            text = format_error(e)
        assert "ValueError: bad value" in text


class TestSanitizeBrowserName:
    def test_spaces(self):
        assert sanitize_browser_name("Chrome Headless 91.0") == "Chrome_Headless_91.0"

    def test_file_name_and_class_name_agree(self):
        browser = Browser(id=1, name="Chrome Headless 91.0")
        path = resolve_output_file("out", browser.name)
        class_name = default_class_name(browser, SpecResult(suite=["Login"]))

        assert path == os.path.join("out", f"TESTS-{browser.safe_name}.json")
        assert class_name == browser.safe_name.replace(".", "_") + ".Login"


class TestResolveOutputFile:
    def test_default_namespaced(self):
        path = resolve_output_file("./out", "Chrome")
        assert path == os.path.join("./out", "TESTS-Chrome.json")

    def test_default_sanitizes_name(self):
        path = resolve_output_file("out", "Chrome 91.0")
        assert path == os.path.join("out", "TESTS-Chrome_91.0.json")

    def test_not_namespaced(self):
        path = resolve_output_file("out", "Chrome", use_browser_name=False)
        assert path == os.path.join("out", "TESTS.json")

    def test_relative_output_file_namespaced(self):
        path = resolve_output_file("out", "Chrome 91.0", output_file="report.json")
        assert path == os.path.join("out", "Chrome_91.0", "report.json")

    def test_relative_output_file_not_namespaced(self):
        path = resolve_output_file(
            "out", "Chrome", output_file="report.json", use_browser_name=False
        )
        assert path == os.path.join("out", "report.json")

    def test_absolute_output_file_verbatim(self, tmp_path):
        absolute = str(tmp_path / "report.json")
        path = resolve_output_file("out", "Chrome", output_file=absolute)
        assert path == absolute

    def test_idempotent(self):
        first = resolve_output_file("out", "Firefox 89", output_file="r.json")
        second = resolve_output_file("out", "Firefox 89", output_file="r.json")
        assert first == second
