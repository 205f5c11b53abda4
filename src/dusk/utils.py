"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path

U64_MAX = 2**64 - 1

_UNITS = ("B", "KB", "MB", "GB", "TB")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def saturating_add(total: int, size: int) -> int:
    """Add *size* to *total*, clamping at the largest unsigned 64-bit value."""
    return min(total + size, U64_MAX)


def bytes_to_human(size_bytes: int) -> str:
    """Convert byte count to a human-readable string.

    Counts below 1 KB are printed as integers (``"512 B"``); anything larger
    is scaled by 1024 up to at most TB and printed with two decimals
    (``"1.50 KB"``).
    """
    if size_bytes < 0:
        raise ValueError(f"byte count cannot be negative: {size_bytes}")
    if size_bytes < 1024:
        return f"{size_bytes} B"

    value = float(size_bytes)
    idx = 0
    while value >= 1024.0 and idx < len(_UNITS) - 1:
        value /= 1024.0
        idx += 1
    return f"{value:.2f} {_UNITS[idx]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
