"""CLI entry point for browser-json-reporter.

Summarizes JSON report files written by the reporter:
    browser-json-reporter summary out/TESTS-*.json [--pretty]
"""

import json
import sys
from pathlib import Path
from typing import Any

import click

from .runner.result_collector import TestSuiteReport
from .writer import to_json_string


@click.group()
def main():
    """JSON test report tool."""


@main.command()
@click.argument("reports", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("--pretty", is_flag=True, help="Pretty print output")
def summary(reports: tuple[str, ...], pretty: bool):
    """Summarize one or more JSON report files."""
    suites: list[dict[str, Any]] = []

    for report_path in reports:
        path = Path(report_path)
        if not path.exists():
            output_error(f"Report file not found: {report_path}", pretty=pretty)
            sys.exit(1)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            report = TestSuiteReport.from_dict(data)
        except (json.JSONDecodeError, ValueError) as e:
            output_error(f"Failed to read report {report_path}: {e}", pretty=pretty)
            sys.exit(1)

        suites.append(summarize_report(report, str(path)))

    output = generate_summary_output(suites)
    click.echo(to_json_string(output, pretty))

    if not output["success"]:
        sys.exit(1)


def summarize_report(report: TestSuiteReport, path: str) -> dict[str, Any]:
    """Summary of a single report."""
    skipped = sum(1 for tc in report.test_cases if tc.skipped)
    return {
        "path": path,
        "name": report.name,
        "timestamp": report.timestamp,
        "tests": report.tests,
        "failures": report.failures,
        "errors": report.errors,
        "skipped": skipped,
        "time": report.time,
    }


def generate_summary_output(suites: list[dict[str, Any]]) -> dict[str, Any]:
    """Generate flow CLI compatible JSON output.

    {
        "success": bool,
        "command": "summary",
        "data": { ... },
        "message": str
    }
    """
    total = sum(s["tests"] for s in suites)
    failures = sum(s["failures"] for s in suites)
    errors = sum(s["errors"] for s in suites)
    success = failures == 0 and errors == 0

    if errors:
        message = f"{errors} of {len(suites)} browsers reported errors"
    elif failures:
        message = f"{failures} of {total} tests failed"
    else:
        message = "All tests passed"

    return {
        "success": success,
        "command": "summary",
        "data": {
            "total_tests": total,
            "failures": failures,
            "errors": errors,
            "suites": suites,
        },
        "message": message,
    }


def output_error(message: str, pretty: bool = False, **extra):
    """Output error in flow JSON format."""
    output = {
        "success": False,
        "command": "summary",
        "data": extra or None,
        "message": message,
    }
    click.echo(to_json_string(output, pretty))


if __name__ == "__main__":
    main()
