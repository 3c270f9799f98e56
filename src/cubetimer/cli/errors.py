"""Failures reported by the cubetimer commands and their exit statuses."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

__all__ = ["EXIT_STATUS", "CliError", "log_cli_error"]

logger = logging.getLogger(__name__)

EXIT_STATUS: Mapping[str, int] = {
    "runtime": 1,
    "usage": 2,
    "io": 3,
    "not_found": 4,
}


def _loggable(context: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in (context or {}).items():
        if value is None or isinstance(value, (str, int, float, bool)):
            flat[key] = value
        else:
            flat[key] = str(value)
    return flat


class CliError(RuntimeError):
    """A command failure; ``category`` selects the process exit status.

    The named constructors cover the failures the commands can hit: the
    configuration file, the history file and invalid user input.
    """

    def __init__(
        self,
        message: str,
        *,
        category: str = "runtime",
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        if category not in EXIT_STATUS:
            raise ValueError(f"unknown error category {category!r}")
        super().__init__(message)
        self.category = category
        self.status_code = EXIT_STATUS[category]
        self.context = _loggable(context)
        self.logged = False

    @classmethod
    def from_os_error(cls, message: str, exc: OSError, *, path: Any = None) -> "CliError":
        """Wrap a filesystem failure on the config or history file."""

        context = {"path": path if path is not None else exc.filename, "reason": exc.strerror}
        return cls(f"{message}: {exc}", category="io", context=context)

    @classmethod
    def config_missing(cls, path: Path) -> "CliError":
        return cls(
            f"Configuration file {path} does not exist",
            category="not_found",
            context={"path": path},
        )

    @classmethod
    def config_invalid(cls, path: Any, reason: str) -> "CliError":
        return cls(
            f"Configuration file {path} is invalid: {reason}",
            category="usage",
            context={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_solve_time(cls, raw: str) -> "CliError":
        return cls(
            f"Invalid solve time '{raw}'; expected a non-negative number of seconds.",
            category="usage",
            context={"value": raw},
        )


def log_cli_error(error: CliError, *, target: Optional[logging.Logger] = None) -> None:
    """Log ``error`` with its category and context, at most once."""

    if error.logged:
        return
    (target or logger).error(
        str(error),
        extra={
            "event": "cli.error",
            "category": error.category,
            "status_code": error.status_code,
            "context": dict(error.context),
        },
        exc_info=error,
    )
    error.logged = True
