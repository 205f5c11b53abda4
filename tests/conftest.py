"""Shared test fixtures."""

from __future__ import annotations

import json
import os

import pytest

from dusk.settings import Settings


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Redirect settings to a temp config directory."""
    config_home = tmp_path / "config"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setattr(Settings, "_instance", None)
    return config_home / "dusk" / "settings.json"


@pytest.fixture
def write_settings(isolate_settings):
    """Write a settings file into the isolated config directory."""

    def _write(data) -> None:
        isolate_settings.parent.mkdir(parents=True, exist_ok=True)
        isolate_settings.write_text(json.dumps(data), encoding="utf-8")

    return _write


@pytest.fixture
def sample_tree(tmp_path):
    """Build a small tree with known sizes.

    root/
        alpha/a.bin            100 bytes
        alpha/nested/b.bin     250 bytes
        beta/c.bin              50 bytes
        empty/
        top.txt                 10 bytes
    """
    root = tmp_path / "root"
    (root / "alpha" / "nested").mkdir(parents=True)
    (root / "alpha" / "a.bin").write_bytes(b"a" * 100)
    (root / "alpha" / "nested" / "b.bin").write_bytes(b"b" * 250)
    (root / "beta").mkdir()
    (root / "beta" / "c.bin").write_bytes(b"c" * 50)
    (root / "empty").mkdir()
    (root / "top.txt").write_bytes(b"t" * 10)
    return root


@pytest.fixture
def fail_scandir(monkeypatch):
    """Make ``os.scandir`` raise for chosen paths.

    Returns a dict mapping path strings to the exception to raise.
    """
    failures: dict[str, OSError] = {}
    real_scandir = os.scandir

    def fake_scandir(path="."):
        exc = failures.get(os.fspath(path))
        if exc is not None:
            raise exc
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    return failures


@pytest.fixture
def fail_lstat(monkeypatch):
    """Make ``os.lstat`` raise for chosen paths."""
    failures: dict[str, OSError] = {}
    real_lstat = os.lstat

    def fake_lstat(path, *args, **kwargs):
        exc = failures.get(os.fspath(path))
        if exc is not None:
            raise exc
        return real_lstat(path, *args, **kwargs)

    monkeypatch.setattr(os, "lstat", fake_lstat)
    return failures

