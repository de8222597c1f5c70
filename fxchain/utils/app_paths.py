"""App path helpers (cross-platform).

SSOT for fxchain data paths.

Environment overrides (useful for portable/dev launches):
- FXCHAIN_DATA_DIR: base data dir (chain presets live in <base>/chain_presets)
- FXCHAIN_PRESETS_DIR: explicit chain presets dir (overrides FXCHAIN_DATA_DIR)
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "fxchain"


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_app_data_dir() -> Path:
    """Base app data dir."""
    data_dir = _env_path("FXCHAIN_DATA_DIR")
    if data_dir is not None:
        return data_dir
    return Path(user_data_dir(APP_NAME, appauthor=False, roaming=True)).resolve()


def get_chain_presets_dir() -> Path:
    """Chain presets dir, created on first use."""
    presets_dir = _env_path("FXCHAIN_PRESETS_DIR")
    if presets_dir is None:
        presets_dir = get_app_data_dir() / "chain_presets"
    presets_dir.mkdir(parents=True, exist_ok=True)
    return presets_dir
