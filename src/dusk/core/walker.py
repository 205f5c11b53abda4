"""Recursive directory size aggregation."""

from __future__ import annotations

import logging
import os

from dusk.core.errors import report_failure
from dusk.core.progress import ProgressSink
from dusk.utils import saturating_add

log = logging.getLogger(__name__)


def walk_size(root: str, progress: ProgressSink | None = None) -> int:
    """Return the total size of all regular files below *root*.

    Symbolic links are never followed. Directories that cannot be read and
    entries that cannot be stat-ed are skipped, so the result is the best
    total obtainable from the readable part of the tree. This function does
    not raise for filesystem errors.
    """
    total = 0
    stack: list[str] = [root]
    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            stack.append(entry.path)
                            continue
                        if not entry.is_file(follow_symlinks=False):
                            continue
                    except OSError as exc:
                        report_failure("Traversal issue under", entry.path, exc)
                        continue

                    if progress is not None:
                        progress.increment()
                    try:
                        size = entry.stat(follow_symlinks=False).st_size
                    except OSError as exc:
                        report_failure("Metadata read failed for", entry.path, exc)
                        continue
                    total = saturating_add(total, size)
        except OSError as exc:
            report_failure("Traversal issue under", current, exc)

    log.debug("Walked %s: %d bytes", root, total)
    return total
