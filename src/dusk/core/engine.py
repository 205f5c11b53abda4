"""Scan orchestration engine."""

from __future__ import annotations

import logging
import os
import stat
import threading
from concurrent.futures import ThreadPoolExecutor

from dusk.core.errors import ScanError, report_failure
from dusk.core.progress import FileCounter, ProgressSink
from dusk.core.walker import walk_size
from dusk.models.scan_item import ScanItem

log = logging.getLogger(__name__)


def default_workers() -> int:
    """Worker pool size used when none is configured."""
    return os.cpu_count() or 1


class DiskScanner:
    """Computes the size of a target and each of its immediate children.

    Children are classified concurrently on a bounded thread pool, one task
    per child. Each task walks its own subtree sequentially.
    """

    def __init__(self, progress: ProgressSink | None = None, max_workers: int | None = None) -> None:
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.progress: ProgressSink = progress if progress is not None else FileCounter()
        self.max_workers = max_workers or default_workers()

    def scan(self, target: str | os.PathLike[str]) -> list[ScanItem]:
        """Scan *target* and return one item per immediate child.

        A non-directory target yields a single item for itself. The order of
        the returned list is unspecified.

        Raises:
            ScanError: If the target cannot be stat-ed or listed.
        """
        target = os.fspath(target)
        try:
            st = os.stat(target)
        except OSError as exc:
            raise ScanError(target, exc) from exc

        if not stat.S_ISDIR(st.st_mode):
            self.progress.increment()
            return [ScanItem(path=target, size=st.st_size, is_dir=False)]

        children = self._list_children(target)
        log.debug("Found %d entries in %s", len(children), target)

        results: list[ScanItem] = []
        workers = min(self.max_workers, len(children))
        if workers > 1:
            self._scan_parallel(children, workers, results)
        else:
            self._scan_sequential(children, results)
        return results

    def classify(self, path: str) -> ScanItem:
        """Stat *path* without following links and size it.

        Directories are summed recursively; anything else reports its own
        length and counts as one visited file.

        Raises:
            OSError: If *path* cannot be stat-ed.
        """
        st = os.lstat(path)
        if stat.S_ISDIR(st.st_mode):
            return ScanItem(path=path, size=walk_size(path, self.progress), is_dir=True)
        self.progress.increment()
        return ScanItem(path=path, size=st.st_size, is_dir=False)

    def _list_children(self, target: str) -> list[str]:
        """Return the paths of the immediate entries of *target*."""
        paths: list[str] = []
        try:
            it = os.scandir(target)
        except OSError as exc:
            raise ScanError(target, exc) from exc

        with it:
            while True:
                try:
                    entry = next(it)
                except StopIteration:
                    break
                except OSError as exc:
                    report_failure("Could not read an entry in", target, exc)
                    break
                paths.append(entry.path)
        return paths

    def _classify_safe(self, path: str) -> ScanItem | None:
        try:
            return self.classify(path)
        except OSError as exc:
            report_failure("Failed to scan", path, exc)
            return None

    def _scan_sequential(
        self,
        children: list[str],
        results: list[ScanItem],
    ) -> None:
        """Classify children one at a time."""
        for path in children:
            item = self._classify_safe(path)
            if item is None:
                continue
            results.append(item)

    def _scan_parallel(
        self,
        children: list[str],
        workers: int,
        results: list[ScanItem],
    ) -> None:
        """Classify children concurrently via a thread pool."""
        lock = threading.Lock()

        def _scan_child(path: str) -> None:
            item = self._classify_safe(path)
            if item is None:
                return
            with lock:
                results.append(item)

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_scan_child, path) for path in children]
            for future in futures:
                future.result()
