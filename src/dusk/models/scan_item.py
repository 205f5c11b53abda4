"""Scan item dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ScanItem:
    """One row of a disk usage report.

    ``size`` is the file length for files and the sum of every readable
    descendant file for directories.
    """

    path: str
    size: int
    is_dir: bool

    @property
    def type_label(self) -> str:
        return "DIR" if self.is_dir else "FILE"

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "size_bytes": self.size,
            "is_dir": self.is_dir,
        }
