"""Pending-write latch.

Counts report writes that are still in flight and runs a single waiter
once the count drops back to zero.
"""

import threading
from typing import Callable, Optional


class PendingWrites:
    """Counter of in-flight writes with a one-shot drain callback."""

    def __init__(self):
        self._count = 0
        self._lock = threading.Lock()
        self._waiter: Optional[Callable[[], None]] = None

    @property
    def pending(self) -> int:
        """Number of writes issued but not yet completed."""
        with self._lock:
            return self._count

    def acquire(self) -> None:
        """Register a write that is about to be issued."""
        with self._lock:
            self._count += 1

    def release(self) -> None:
        """Mark a write as completed, successfully or not."""
        with self._lock:
            if self._count == 0:
                raise RuntimeError("release() called without a pending write")
            self._count -= 1
            waiter = None
            if self._count == 0:
                waiter, self._waiter = self._waiter, None

        if waiter is not None:
            waiter()

    def when_drained(self, done: Callable[[], None]) -> None:
        """Call ``done`` once no writes are pending.

        Runs ``done`` immediately if nothing is pending. Otherwise it is kept
        until the last pending write completes; a later call replaces it.
        """
        with self._lock:
            if self._count:
                self._waiter = done
                return

        done()
