"""Argument parsing helpers for the cubetimer CLI."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Mapping, Optional

from .._version import __version__
from . import history as history_commands
from . import timer as timer_command


def build_parser(config: Optional[Mapping[str, Any]] = None) -> argparse.ArgumentParser:
    config = dict(config or {})
    logging_cfg_raw = config.get("logging", {})
    if isinstance(logging_cfg_raw, Mapping):
        logging_cfg = dict(logging_cfg_raw)
    else:
        logging_cfg = {}

    parser = argparse.ArgumentParser(
        prog="cubetimer",
        description="cubetimer – terminal speedcube timer",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to the TOML configuration file to load.",
    )
    parser.add_argument(
        "--history",
        dest="history_path",
        type=Path,
        default=None,
        help="History file overriding history.path from the configuration.",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=logging_cfg.get("level", "warning"),
        help="Logging level (e.g. debug, info, warning).",
    )
    parser.add_argument(
        "--log-output",
        dest="log_output",
        default=logging_cfg.get("output", "stderr"),
        help="Logging destination (stdout, stderr or a file path).",
    )
    parser.add_argument(
        "--log-format",
        dest="log_format",
        choices=("json", "text"),
        default=logging_cfg.get("format", "json"),
        help="Logging formatter (json or text).",
    )

    subparsers = parser.add_subparsers(dest="command")
    timer_command.register_subparser(subparsers, config=config)
    history_commands.register_subparsers(subparsers, config=config)
    parser.set_defaults(handler=timer_command.handle, command="timer")
    return parser


__all__ = ["build_parser"]
