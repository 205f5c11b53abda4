"""Progress reporting for scans."""

from __future__ import annotations

import threading
from typing import Protocol


class ProgressSink(Protocol):
    """Receives one ``increment()`` call per file visited.

    Implementations are called from worker threads and must tolerate
    concurrent calls.
    """

    def increment(self) -> None: ...


class FileCounter:
    """Thread-safe counter of visited files."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def increment(self) -> None:
        with self._lock:
            self._count += 1
