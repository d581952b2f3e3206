import os

import pytest

from browser_json_reporter.config import (
    ReporterConfig,
    load_config,
    parse_config_data,
    resolve_callable,
)
from browser_json_reporter.reporting.formatters import default_name_formatter


class TestReporterConfigDefaults:
    def test_defaults(self):
        config = ReporterConfig()
        assert config.suite == ""
        assert config.output_dir == "."
        assert config.output_file is None
        assert config.use_browser_name is True
        assert config.properties == {}
        assert config.base_path == os.getcwd()

    def test_resolved_output_dir(self, tmp_path):
        config = ReporterConfig(base_path=str(tmp_path), output_dir="./a/../reports")
        assert config.resolved_output_dir() == str(tmp_path / "reports") + os.sep

    def test_absolute_output_dir_ignores_base_path(self, tmp_path):
        config = ReporterConfig(base_path="/somewhere/else", output_dir=str(tmp_path))
        assert config.resolved_output_dir() == str(tmp_path) + os.sep


class TestParseConfigData:
    def test_json_reporter_section(self):
        config = parse_config_data({
            "jsonReporter": {
                "suite": "app",
                "outputDir": "reports",
                "outputFile": "results.json",
                "useBrowserName": False,
                "properties": {"build": 42},
            },
            "basePath": "/project",
        })
        assert config.suite == "app"
        assert config.output_dir == "reports"
        assert config.output_file == "results.json"
        assert config.use_browser_name is False
        assert config.properties == {"build": "42"}
        assert config.base_path == "/project"

    def test_junit_reporter_section_fallback(self):
        config = parse_config_data({"junitReporter": {"outputDir": "junit"}})
        assert config.output_dir == "junit"

    def test_top_level_keys(self):
        config = parse_config_data({"outputDir": "flat", "suite": "s"})
        assert config.output_dir == "flat"
        assert config.suite == "s"

    def test_formatter_reference_resolved(self):
        config = parse_config_data({
            "nameFormatter": "browser_json_reporter.reporting.formatters:default_name_formatter",
        })
        assert config.name_formatter is default_name_formatter

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="mapping"):
            parse_config_data(["outputDir"])

    def test_section_not_a_mapping(self):
        with pytest.raises(ValueError, match="'jsonReporter' must be a mapping"):
            parse_config_data({"jsonReporter": "reports"})

    def test_properties_not_a_mapping(self):
        with pytest.raises(ValueError, match="'properties'"):
            parse_config_data({"properties": ["a", "b"]})

    def test_default_base_path(self, tmp_path):
        assert parse_config_data({}, default_base_path=str(tmp_path)).base_path == str(tmp_path)
        assert parse_config_data({}).base_path == os.getcwd()
        explicit = parse_config_data({"basePath": "root"}, default_base_path=str(tmp_path))
        assert explicit.base_path == "root"


class TestResolveCallable:
    def test_nested_attribute(self):
        assert resolve_callable("os:path.join") is os.path.join

    def test_missing_separator(self):
        with pytest.raises(ValueError, match="module:function"):
            resolve_callable("os.path.join")

    def test_unknown_module(self):
        with pytest.raises(ValueError, match="Cannot import"):
            resolve_callable("no_such_module_xyz:fn")

    def test_unknown_attribute(self):
        with pytest.raises(ValueError, match="not found"):
            resolve_callable("os:no_such_function")


class TestLoadConfig:
    def test_load_yaml(self, tmp_path):
        config_file = tmp_path / "reporter.yaml"
        config_file.write_text(
            "jsonReporter:\n"
            "  suite: web\n"
            "  outputDir: reports\n"
            "  properties:\n"
            "    env: ci\n",
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.suite == "web"
        assert config.properties == {"env": "ci"}
        assert config.base_path == str(tmp_path)
        assert config.resolved_output_dir() == str(tmp_path / "reports") + os.sep

    def test_empty_file_gives_defaults(self, tmp_path):
        config_file = tmp_path / "empty.yml"
        config_file.write_text("", encoding="utf-8")

        config = load_config(config_file)

        assert config.output_dir == "."
        assert config.base_path == str(tmp_path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_wrong_suffix(self, tmp_path):
        config_file = tmp_path / "reporter.json"
        config_file.write_text("{}", encoding="utf-8")
        with pytest.raises(ValueError, match=".yaml"):
            load_config(config_file)

    def test_malformed_yaml(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("jsonReporter: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Malformed YAML"):
            load_config(config_file)
