"""Read-only JSON settings store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dusk.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "dusk"
_SETTINGS_FILE = "settings.json"


class Settings:
    """User defaults loaded from a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("scan.sort")  # reads data["scan"]["sort"]
    """

    _instance: Settings | None = None

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @classmethod
    def instance(cls) -> Settings:
        """Return the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_int(self, key: str, default: int | None = None, minimum: int = 0) -> int | None:
        """Get an integer setting, ignoring values that are not ints >= *minimum*."""
        value = self.get(key)
        if value is None:
            return default
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            log.warning("Ignoring invalid value for '%s' in %s: %r", key, self._path, value)
            return default
        return value

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: expected a JSON object", self._path)
            return
        self._data = data
