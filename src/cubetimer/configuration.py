"""Helpers to load and normalise the user configuration file."""

from __future__ import annotations

import logging
from collections.abc import Mapping as ABCMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11 fallback
    import tomli as tomllib  # type: ignore

from .resources.paths import default_history_path

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE_MS = 100
DEFAULT_MARGIN = 2
DEFAULT_SCRAMBLE_LENGTH = 20

DEFAULT_CONFIG_TOML = """\
# cubetimer configuration

[terminal]
# Milliseconds between timer ticks (screen refreshes while idle).
tick_rate = 100

[frontend]
# Cells between the panels and the terminal border.
margin = 2

[history]
# File holding one solve time per line. Defaults to the user data directory.
# path = "~/.local/share/cubetimer/times.txt"
autosave = true

[scramble]
length = 20

[logging]
level = "warning"
output = "stderr"
format = "json"
"""


def _as_dict(payload: ABCMapping[str, Any]) -> dict[str, Any]:
    """Recursively coerce TOML mappings into regular dictionaries."""

    result: dict[str, Any] = {}
    for key, value in payload.items():
        key_str = str(key)
        if isinstance(value, ABCMapping):
            result[key_str] = _as_dict(value)
        elif isinstance(value, list):
            result[key_str] = [
                _as_dict(item) if isinstance(item, ABCMapping) else item for item in value
            ]
        else:
            result[key_str] = value
    return result


def parse_config_text(text: str) -> dict[str, Any]:
    """Parse TOML ``text`` into plain dictionaries.

    Raises :class:`tomllib.TOMLDecodeError` for invalid documents.
    """

    return _as_dict(tomllib.loads(text))


def load_config_file(path: Path) -> dict[str, Any]:
    """Load the TOML document stored at ``path``."""

    with Path(path).expanduser().open("rb") as handle:
        data = tomllib.load(handle)
    return _as_dict(data)


def write_default_config(path: Path) -> dict[str, Any]:
    """Create ``path`` with the default configuration and return its contents."""

    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    logger.info(
        "Configuration generated.",
        extra={"event": "config.generated", "path": str(path)},
    )
    return parse_config_text(DEFAULT_CONFIG_TOML)


def _section(config: ABCMapping[str, Any], name: str) -> dict[str, Any]:
    value = config.get(name, {})
    if isinstance(value, ABCMapping):
        return dict(value)
    logger.warning(
        "Ignoring configuration section that is not a table.",
        extra={"event": "config.invalid", "key": name, "value": value},
    )
    return {}


def _coerce(
    section: ABCMapping[str, Any],
    key: str,
    default: Any,
    convert: Callable[[Any], Any],
    valid: Callable[[Any], bool],
) -> Any:
    if key not in section:
        return default
    raw = section[key]
    try:
        value = convert(raw)
    except (TypeError, ValueError):
        value = None
    if value is None or not valid(value):
        logger.warning(
            "Ignoring invalid configuration value.",
            extra={"event": "config.invalid", "key": key, "value": raw},
        )
        return default
    return value


@dataclass(frozen=True, slots=True)
class TimerSettings:
    """Normalised runtime settings."""

    tick_rate: float = DEFAULT_TICK_RATE_MS / 1000.0
    margin: int = DEFAULT_MARGIN
    history_path: Optional[Path] = None
    autosave: bool = True
    scramble_length: int = DEFAULT_SCRAMBLE_LENGTH

    @classmethod
    def from_config(cls, config: Optional[ABCMapping[str, Any]] = None) -> "TimerSettings":
        config = config or {}
        terminal_cfg = _section(config, "terminal")
        frontend_cfg = _section(config, "frontend")
        history_cfg = _section(config, "history")
        scramble_cfg = _section(config, "scramble")

        tick_ms = _coerce(terminal_cfg, "tick_rate", DEFAULT_TICK_RATE_MS, _as_int, lambda v: v >= 1)
        margin = _coerce(frontend_cfg, "margin", DEFAULT_MARGIN, _as_int, lambda v: v >= 0)
        autosave = _coerce(history_cfg, "autosave", True, _as_bool, lambda v: True)
        scramble_length = _coerce(
            scramble_cfg, "length", DEFAULT_SCRAMBLE_LENGTH, _as_int, lambda v: v >= 1
        )
        raw_path = history_cfg.get("path")
        history_path = Path(str(raw_path)).expanduser() if raw_path else None

        return cls(
            tick_rate=tick_ms / 1000.0,
            margin=margin,
            history_path=history_path,
            autosave=autosave,
            scramble_length=scramble_length,
        )

    def resolved_history_path(self) -> Path:
        if self.history_path is not None:
            return self.history_path
        return default_history_path(create_parent=True)


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    return None


def _as_int(value: Any) -> Optional[int]:
    # TOML booleans are ints in Python; floats must be whole numbers.
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


__all__ = [
    "DEFAULT_CONFIG_TOML",
    "TimerSettings",
    "load_config_file",
    "parse_config_text",
    "write_default_config",
]
