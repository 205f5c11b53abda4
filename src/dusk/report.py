"""Plain-text table rendering of scan results."""

from __future__ import annotations

from dusk.models.scan_item import ScanItem
from dusk.utils import bytes_to_human

NO_ITEMS = "No items found."

_TYPE_WIDTH = 4
_MIN_SIZE_WIDTH = 4
_PATH_RULE = 40


def render_table(items: list[ScanItem]) -> list[str]:
    """Render *items*, in their current order, as report lines."""
    if not items:
        return [NO_ITEMS]

    sizes = [bytes_to_human(item.size) for item in items]
    width = max(_MIN_SIZE_WIDTH, *(len(s) for s in sizes))

    lines = [
        f"{'Size':<{width}}  {'Type':<{_TYPE_WIDTH}}  Path",
        "-" * (width + 2 + _TYPE_WIDTH + 2 + _PATH_RULE),
    ]
    for item, size in zip(items, sizes):
        lines.append(f"{size:<{width}}  {item.type_label:<{_TYPE_WIDTH}}  {item.path}")
    return lines
