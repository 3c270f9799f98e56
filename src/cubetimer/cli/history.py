"""Command helpers for the ``stats``, ``times`` and ``add`` sub-commands."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Any, List, Mapping

from ..configuration import TimerSettings
from ..core.history import SolveHistory
from ..core.records import SolveRecord, format_optional_time, format_time
from ..visualization.sparkline import render_sparkline
from .errors import CliError
from .io import open_history, resolve_history_path, write_history

DEFAULT_TIMES_LIMIT = 12
TREND_WIDTH = 40


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("value must be a positive integer")
    return number


def register_subparsers(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    *,
    config: Mapping[str, Any],
) -> None:
    """Register the history inspection and editing sub-commands."""

    stats_parser = subparsers.add_parser(
        "stats",
        help="Print statistics for the stored solve history.",
    )
    stats_parser.set_defaults(handler=handle_stats)

    times_parser = subparsers.add_parser(
        "times",
        help="List the most recent solves with their ao5/ao12.",
    )
    times_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=DEFAULT_TIMES_LIMIT,
        help=f"Number of solves to list (default: {DEFAULT_TIMES_LIMIT}).",
    )
    times_parser.set_defaults(handler=handle_times)

    add_parser = subparsers.add_parser(
        "add",
        help="Append manually timed solves (seconds) to the history.",
    )
    add_parser.add_argument(
        "seconds",
        nargs="+",
        help="Solve durations in seconds.",
    )
    add_parser.set_defaults(handler=handle_add)


def _load(namespace: argparse.Namespace, config: Mapping[str, Any]) -> tuple[SolveHistory, Path]:
    settings = TimerSettings.from_config(config)
    path = resolve_history_path(getattr(namespace, "history_path", None), settings)
    return open_history(path), path


def format_stats(history: SolveHistory) -> str:
    summary = history.summary()
    rows = [
        ("solves", str(summary.count)),
        ("best", format_optional_time(summary.best)),
        ("worst", format_optional_time(summary.worst)),
        ("mean", format_optional_time(summary.mean)),
        ("ao5", format_optional_time(summary.current_ao5)),
        ("ao12", format_optional_time(summary.current_ao12)),
        ("pb ao5", format_optional_time(summary.pb_ao5)),
        ("pb ao12", format_optional_time(summary.pb_ao12)),
        ("ao100", format_optional_time(summary.ao100)),
        ("ao1000", format_optional_time(summary.ao1000)),
    ]
    lines = [f"{label:<8} {value}" for label, value in rows]
    trend = render_sparkline(history.times(), width=TREND_WIDTH)
    if trend:
        lines.append(f"{'trend':<8} {trend}")
    return "\n".join(lines)


def format_records(records: List[SolveRecord], *, first_number: int) -> str:
    lines = [f"{'#':>5} {'time':>9} {'ao5':>9} {'ao12':>9}"]
    for offset, record in enumerate(records):
        lines.append(
            f"{first_number - offset:>5} {format_time(record.time):>9} "
            f"{format_optional_time(record.ao5):>9} {format_optional_time(record.ao12):>9}"
        )
    return "\n".join(lines)


def handle_stats(namespace: argparse.Namespace, *, config: Mapping[str, Any]) -> str:
    history, _ = _load(namespace, config)
    return format_stats(history)


def handle_times(namespace: argparse.Namespace, *, config: Mapping[str, Any]) -> str:
    history, _ = _load(namespace, config)
    if not history:
        return "No solves recorded."
    rows = history.display_rows()[: namespace.limit]
    return format_records(rows, first_number=len(history))


def _parse_seconds(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value) or value < 0:
        raise CliError.invalid_solve_time(raw)
    return value


def handle_add(namespace: argparse.Namespace, *, config: Mapping[str, Any]) -> str:
    values = [_parse_seconds(raw) for raw in namespace.seconds]
    history, path = _load(namespace, config)
    added = [history.insert(SolveRecord(time=value)) for value in values]
    write_history(history, path)
    return format_records(list(reversed(added)), first_number=len(history))


__all__ = [
    "register_subparsers",
    "handle_stats",
    "handle_times",
    "handle_add",
    "format_stats",
    "format_records",
]
