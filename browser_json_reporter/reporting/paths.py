"""Output path resolution for JSON report files."""

import os
from typing import Optional

from ..events import sanitize_browser_name

REPORT_PREFIX = "TESTS"
REPORT_SUFFIX = ".json"


def resolve_output_file(
    output_dir: str,
    browser_name: str,
    output_file: Optional[str] = None,
    use_browser_name: bool = True,
) -> str:
    """Resolve the report file path for a browser.

    In priority order:
    1. An absolute ``output_file`` is used verbatim.
    2. A relative ``output_file`` is joined with the output directory, or
       with a per-browser subdirectory of it when namespaced by browser.
    3. Without ``output_file``, namespaced output goes to
       ``<output_dir>/TESTS-<browser>.json``.
    4. Otherwise everything goes to ``<output_dir>/TESTS.json``.

    Args:
        output_dir: Base output directory.
        browser_name: Display name of the browser.
        output_file: Explicit output file name, if configured.
        use_browser_name: Namespace output by browser.

    Returns:
        Path of the report file.
    """
    safe_name = sanitize_browser_name(browser_name)

    if output_file and os.path.isabs(output_file):
        return output_file

    if output_file is not None:
        directory = os.path.join(output_dir, safe_name) if use_browser_name else output_dir
        return os.path.join(directory, output_file)

    if use_browser_name:
        return os.path.join(output_dir, f"{REPORT_PREFIX}-{safe_name}{REPORT_SUFFIX}")

    return os.path.join(output_dir, f"{REPORT_PREFIX}{REPORT_SUFFIX}")
