"""Command helpers for the interactive ``timer`` sub-command."""

from __future__ import annotations

import argparse
import curses
import locale
import logging
from typing import Any, Mapping

from ..app import TimerApp
from ..configuration import TimerSettings
from ..tui.loop import EventLoop
from ..tui.render import CursesKeySource, CursesRenderer
from .io import open_history, resolve_history_path, write_history

logger = logging.getLogger(__name__)

ESCAPE_DELAY_MS = 25


def register_subparser(
    subparsers: argparse._SubParsersAction[argparse.ArgumentParser],
    *,
    config: Mapping[str, Any],
) -> None:
    """Register the ``timer`` sub-command."""

    parser = subparsers.add_parser(
        "timer",
        help="Run the interactive terminal timer (default command).",
    )
    parser.set_defaults(handler=handle)


def build_app(namespace: argparse.Namespace, settings: TimerSettings) -> TimerApp:
    path = resolve_history_path(getattr(namespace, "history_path", None), settings)
    history = open_history(path)
    return TimerApp(
        history,
        history_path=path,
        tick_rate=settings.tick_rate,
        autosave=settings.autosave,
        scramble_length=settings.scramble_length,
    )


def _run_curses(window: Any, app: TimerApp, margin: int) -> None:
    curses.curs_set(0)
    if hasattr(curses, "set_escdelay"):
        curses.set_escdelay(ESCAPE_DELAY_MS)
    renderer = CursesRenderer(window, margin=margin)
    EventLoop(app, CursesKeySource(window), renderer.draw).run()


def handle(namespace: argparse.Namespace, *, config: Mapping[str, Any]) -> str:
    """Run the terminal interface until the user quits, then save."""

    settings = TimerSettings.from_config(config)
    app = build_app(namespace, settings)
    locale.setlocale(locale.LC_ALL, "")
    try:
        curses.wrapper(_run_curses, app, settings.margin)
    finally:
        if app.history_path is not None:
            write_history(app.history, app.history_path)
    logger.info(
        "Timer session finished.",
        extra={"event": "timer.finished", "records": len(app.history)},
    )
    return f"{len(app.history)} solves saved to {app.history_path}"


__all__ = ["register_subparser", "handle", "build_app"]
