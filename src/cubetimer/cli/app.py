"""Command line application entry point for cubetimer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Callable, Mapping, NoReturn, Optional, Sequence

from ..logging.config import setup_logging
from .errors import CliError, log_cli_error
from .io import load_cli_config
from .parser import build_parser

CommandHandler = Callable[[argparse.Namespace, Mapping[str, Any]], str]


def _write_line(text: str) -> None:
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")


def _fail(exc: CliError) -> NoReturn:
    log_cli_error(exc)
    _write_line(str(exc))
    raise SystemExit(exc.status_code) from exc


def _preliminary_parser() -> argparse.ArgumentParser:
    config_parser = argparse.ArgumentParser(add_help=False)
    config_parser.add_argument(
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to the TOML configuration file to load.",
    )
    config_parser.add_argument("--log-level", dest="log_level", default=None)
    config_parser.add_argument("--log-output", dest="log_output", default=None)
    config_parser.add_argument(
        "--log-format", dest="log_format", choices=("json", "text"), default=None
    )
    return config_parser


def run_cli(args: Optional[Sequence[str]] = None) -> str:
    """Execute the cubetimer command line interface."""

    preliminary, remaining = _preliminary_parser().parse_known_args(args)

    try:
        config = load_cli_config(preliminary.config_path)
    except CliError as exc:
        setup_logging({})
        _fail(exc)

    logging_section = config.get("logging", {})
    if not isinstance(logging_section, Mapping):
        setup_logging({})
        _fail(
            CliError.config_invalid(
                config.get("_config_path"), "'logging' must be a table"
            )
        )
    logging_config = dict(logging_section)
    if preliminary.log_level is not None:
        logging_config["level"] = preliminary.log_level
    if preliminary.log_output is not None:
        logging_config["output"] = preliminary.log_output
    if preliminary.log_format is not None:
        logging_config["format"] = preliminary.log_format
    logging_config.setdefault("level", "warning")
    logging_config.setdefault("output", "stderr")
    logging_config.setdefault("format", "json")
    config["logging"] = logging_config
    try:
        setup_logging(config)
    except ValueError as exc:
        setup_logging({})
        _fail(CliError(str(exc), category="usage", context={"level": logging_config["level"]}))

    parser = build_parser(config)
    parser.set_defaults(config_path=preliminary.config_path)
    parser.set_defaults(log_level=logging_config.get("level"))
    parser.set_defaults(log_output=logging_config.get("output"))
    parser.set_defaults(log_format=logging_config.get("format"))
    namespace = parser.parse_args(list(remaining), namespace=preliminary)
    namespace.config = config

    handler: CommandHandler = namespace.handler
    try:
        result = handler(namespace, config=config)
    except CliError as exc:
        _fail(exc)
    if result:
        _write_line(result)
    return result


def main() -> None:  # pragma: no cover - thin wrapper
    run_cli()


if __name__ == "__main__":  # pragma: no cover - CLI invocation guard
    main()
