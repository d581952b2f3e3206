"""Asynchronous JSON report writer.

Report files are written on a worker thread so the reporter hooks never
block on disk I/O. Every write is tracked by a PendingWrites latch, which
lets the host wait for outstanding files before the process exits.
"""

import json
import logging
import os
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

from .filesystem import LocalFilesystem
from .pending import PendingWrites

logger = logging.getLogger(__name__)


def to_json_string(report: dict[str, Any], pretty: bool = True) -> str:
    """Convert a report document to a JSON string."""
    if pretty:
        return json.dumps(report, indent=2, ensure_ascii=False)
    return json.dumps(report, ensure_ascii=False)


class ReportWriter:
    """Writes report documents to disk without blocking the caller."""

    def __init__(
        self,
        filesystem: Optional[LocalFilesystem] = None,
        log: Optional[logging.Logger] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        pending: Optional[PendingWrites] = None,
    ):
        """Initialize report writer.

        Args:
            filesystem: Filesystem helper. Default: LocalFilesystem.
            log: Logger for write outcomes. Default: module logger.
            executor: Executor that runs the writes. Default: a private
                      single-worker ThreadPoolExecutor.
            pending: Latch tracking in-flight writes.
        """
        self.filesystem = filesystem or LocalFilesystem()
        self.log = log or logger
        self.pending = pending or PendingWrites()
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="json-report-writer"
        )

    def write(self, path: str, report: dict[str, Any]) -> Optional[Future]:
        """Issue an asynchronous write of ``report`` to ``path``.

        The pending count is raised before the write is submitted and
        lowered when it finishes. Failures are logged, never raised.
        """
        self.pending.acquire()
        try:
            return self._executor.submit(self._write, path, report)
        except RuntimeError as e:
            # Executor already shut down
            self._log_failure(e)
            self.pending.release()
            return None

    def _write(self, path: str, report: dict[str, Any]) -> bool:
        try:
            directory = os.path.dirname(path)
            if directory:
                self.filesystem.mkdir_recursive(directory)
            self.filesystem.write_file(path, to_json_string(report))
        except (OSError, TypeError, ValueError) as e:
            self._log_failure(e)
            return False
        else:
            self.log.debug('JSON results written to "%s".', path)
            return True
        finally:
            self.pending.release()

    def _log_failure(self, error: Exception) -> None:
        self.log.warning("Cannot write JSON\n\t%s", error)

    def when_drained(self, done: Callable[[], None]) -> None:
        """Call ``done`` once all issued writes have completed."""
        self.pending.when_drained(done)

    def shutdown(self, wait: bool = True) -> None:
        """Stop the writer's own executor."""
        if self._owns_executor:
            self._executor.shutdown(wait=wait)
