"""Dusk data models."""

from dusk.models.scan_item import ScanItem

__all__ = [
    "ScanItem",
]
