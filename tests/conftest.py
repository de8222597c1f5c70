"""Pytest configuration - keep app data out of the real user directories."""
from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_app_dirs(tmp_path, monkeypatch):
    """Point every app path at a per-test temp dir."""
    data_dir = tmp_path / "appdata"
    monkeypatch.setenv("FXCHAIN_DATA_DIR", str(data_dir))
    monkeypatch.delenv("FXCHAIN_PRESETS_DIR", raising=False)
    return data_dir


@pytest.fixture
def presets_dir(tmp_path):
    """Return an empty presets directory."""
    path = tmp_path / "presets"
    path.mkdir()
    return path
