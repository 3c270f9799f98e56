"""Helpers to locate the per-user cubetimer directories."""

from __future__ import annotations

import os
from pathlib import Path

__all__ = [
    "APP_DIRNAME",
    "CONFIG_FILENAME",
    "HISTORY_FILENAME",
    "config_dir",
    "data_dir",
    "default_config_path",
    "default_history_path",
]

APP_DIRNAME = "cubetimer"
CONFIG_FILENAME = "config.toml"
HISTORY_FILENAME = "times.txt"


def _xdg_dir(variable: str, fallback: str) -> Path:
    raw = os.environ.get(variable)
    base = Path(raw).expanduser() if raw else Path.home() / fallback
    return base / APP_DIRNAME


def config_dir() -> Path:
    """Return ``$XDG_CONFIG_HOME/cubetimer`` (``~/.config/cubetimer``)."""

    return _xdg_dir("XDG_CONFIG_HOME", ".config")


def data_dir() -> Path:
    """Return ``$XDG_DATA_HOME/cubetimer`` (``~/.local/share/cubetimer``)."""

    return _xdg_dir("XDG_DATA_HOME", str(Path(".local") / "share"))


def default_config_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def default_history_path(*, create_parent: bool = False) -> Path:
    """Return the default history file path, optionally creating its directory."""

    path = data_dir() / HISTORY_FILENAME
    if create_parent:
        path.parent.mkdir(parents=True, exist_ok=True)
    return path
