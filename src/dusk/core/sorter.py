"""Deterministic ordering and truncation of scan results."""

from __future__ import annotations

from enum import Enum

from dusk.models.scan_item import ScanItem


class SortMode(str, Enum):
    """Report ordering."""

    SIZE = "size"
    NAME = "name"

    @classmethod
    def parse(cls, value: str) -> SortMode:
        """Parse ``size`` or ``name`` (case-insensitive)."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown sort mode '{value}' (expected one of: {choices})") from None


def _by_size(item: ScanItem) -> tuple[int, str]:
    return (-item.size, item.path)


def _by_name(item: ScanItem) -> tuple[str, int]:
    return (item.path, -item.size)


def sort_items(items: list[ScanItem], mode: SortMode) -> list[ScanItem]:
    """Sort *items* in place and return the same list.

    SIZE orders largest first with ties broken by ascending path; NAME orders
    by ascending path with ties broken by descending size.
    """
    match mode:
        case SortMode.SIZE:
            items.sort(key=_by_size)
        case SortMode.NAME:
            items.sort(key=_by_name)
        case _:
            raise ValueError(f"Unsupported sort mode: {mode!r}")
    return items


def limit_items(items: list[ScanItem], limit: int | None) -> list[ScanItem]:
    """Truncate *items* in place to the first *limit* entries.

    ``None`` or a limit at least as large as the list leaves it unchanged.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit cannot be negative: {limit}")
    if limit is not None and len(items) > limit:
        del items[limit:]
    return items
