"""Logging configuration for cubetimer."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional

__all__ = ["JsonFormatter", "setup_logging"]

_HANDLER_MARKER = "_cubetimer_handler"
_ROOT_LOGGER_NAME = "cubetimer"

# Attributes present on every ``LogRecord``; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def _json_default(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    return repr(value)


class JsonFormatter(logging.Formatter):
    """Render log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=_json_default, ensure_ascii=False)


def _resolve_level(value: Any) -> int:
    if isinstance(value, int):
        return value
    name = str(value or "warning").strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    raise ValueError(f"Unknown logging level: {value!r}")


def _build_handler(output: str) -> logging.Handler:
    target = output.strip() or "stderr"
    lowered = target.lower()
    if lowered == "stderr":
        return logging.StreamHandler(sys.stderr)
    if lowered == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(target).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, encoding="utf-8")


def setup_logging(config: Optional[Mapping[str, Any]] = None) -> logging.Logger:
    """Configure the ``cubetimer`` logger from the ``[logging]`` table.

    Repeated calls replace the handler installed by the previous call so tests
    and the CLI can reconfigure freely.
    """

    logging_cfg: Mapping[str, Any] = {}
    if config:
        section = config.get("logging", {})
        if isinstance(section, Mapping):
            logging_cfg = section

    level = _resolve_level(logging_cfg.get("level", "warning"))
    output = str(logging_cfg.get("output", "stderr"))
    fmt = str(logging_cfg.get("format", "json")).lower()

    handler = _build_handler(output)
    if fmt == "text":
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(JsonFormatter())
    setattr(handler, _HANDLER_MARKER, True)

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
