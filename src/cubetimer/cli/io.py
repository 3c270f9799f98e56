"""Configuration and history helpers for the cubetimer CLI."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11 fallback
    import tomli as tomllib  # type: ignore

from ..configuration import TimerSettings, load_config_file, write_default_config
from ..core.history import SolveHistory
from ..io.history_file import load_history, save_history
from ..resources.paths import default_config_path
from .errors import CliError

CONFIG_ENV_VAR = "CUBETIMER_CONFIG"

__all__ = [
    "CONFIG_ENV_VAR",
    "load_cli_config",
    "open_history",
    "resolve_history_path",
    "write_history",
]


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        payload = load_config_file(path)
    except tomllib.TOMLDecodeError as exc:
        raise CliError.config_invalid(path, f"not valid TOML: {exc}") from exc
    except OSError as exc:
        raise CliError.from_os_error("Unable to read configuration", exc, path=path) from exc
    payload["_config_path"] = str(path.expanduser().resolve())
    return payload


def load_cli_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration used by every command.

    ``path`` wins over ``$CUBETIMER_CONFIG``; both must exist. Without either
    the per-user ``config.toml`` is used and created with defaults when absent.
    """

    env_value = os.environ.get(CONFIG_ENV_VAR)
    explicit = path if path is not None else (Path(env_value) if env_value else None)
    if explicit is not None:
        explicit = explicit.expanduser()
        if not explicit.is_file():
            raise CliError.config_missing(explicit)
        return _read_config(explicit)

    default_path = default_config_path()
    if default_path.is_file():
        return _read_config(default_path)
    try:
        payload = write_default_config(default_path)
    except OSError as exc:
        raise CliError.from_os_error("Unable to create configuration", exc, path=default_path) from exc
    payload["_config_path"] = str(default_path.resolve())
    return payload


def open_history(path: Path) -> SolveHistory:
    """Load the history stored at ``path``; failures are fatal ``io`` errors."""

    try:
        return load_history(path)
    except OSError as exc:
        raise CliError.from_os_error("Unable to open history file", exc, path=path) from exc


def write_history(history: SolveHistory, path: Path) -> None:
    try:
        save_history(history, path)
    except OSError as exc:
        raise CliError.from_os_error("Unable to save history file", exc, path=path) from exc


def resolve_history_path(override: Optional[Path], settings: TimerSettings) -> Path:
    """``--history`` wins over ``[history] path``, then the user data directory."""

    if override is not None:
        return override.expanduser()
    try:
        return settings.resolved_history_path()
    except OSError as exc:
        raise CliError.from_os_error("Unable to create data directory", exc) from exc
