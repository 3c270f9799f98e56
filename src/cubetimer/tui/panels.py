"""Panel geometry and text content, independent of curses."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional

from ..app import TimerApp
from ..core.navigation import Block
from ..core.records import format_optional_time, format_time
from ..visualization.sparkline import render_sparkline
from .keymap import HELP_LINES

__all__ = ["PanelContent", "Rect", "panel_content", "panel_rects"]

LEFT_COLUMN_WIDTH = 40
TOP_ROW_HEIGHT = 6
MIDDLE_ROW_HEIGHT = 9


class Rect(NamedTuple):
    y: int
    x: int
    height: int
    width: int


@dataclass
class PanelContent:
    lines: List[str] = field(default_factory=list)
    highlight: Optional[int] = None
    centered: bool = False


def panel_rects(height: int, width: int, margin: int = 0) -> Dict[Block, Rect]:
    """Split the screen into the panel grid.

    Every row has a fixed-width left panel and a right part taking the rest;
    the top row splits its left part between Tools and Help. Returns an empty
    mapping when the screen is too small to hold any panel.
    """

    top = left = margin
    usable_h = height - 2 * margin
    usable_w = width - 2 * margin
    if usable_h < TOP_ROW_HEIGHT + 6 or usable_w < 20:
        return {}

    left_w = min(LEFT_COLUMN_WIDTH, usable_w // 2)
    right_w = usable_w - left_w
    middle_h = min(MIDDLE_ROW_HEIGHT, usable_h - TOP_ROW_HEIGHT - 3)
    bottom_h = usable_h - TOP_ROW_HEIGHT - middle_h
    tools_w = left_w // 2

    middle_y = top + TOP_ROW_HEIGHT
    bottom_y = middle_y + middle_h
    return {
        Block.TOOLS: Rect(top, left, TOP_ROW_HEIGHT, tools_w),
        Block.HELP: Rect(top, left + tools_w, TOP_ROW_HEIGHT, left_w - tools_w),
        Block.SCRAMBLE: Rect(top, left + left_w, TOP_ROW_HEIGHT, right_w),
        Block.TIMER: Rect(middle_y, left, middle_h, left_w),
        Block.STATS: Rect(middle_y, left + left_w, middle_h, right_w),
        Block.TIMES: Rect(bottom_y, left, bottom_h, left_w),
        Block.MAIN: Rect(bottom_y, left + left_w, bottom_h, right_w),
    }


def _stats_lines(app: TimerApp) -> List[str]:
    summary = app.history.summary()
    return [
        f"solves  {summary.count}",
        f"best    {format_optional_time(summary.best)}",
        f"worst   {format_optional_time(summary.worst)}",
        f"mean    {format_optional_time(summary.mean)}",
        f"ao5     {format_optional_time(summary.current_ao5)}"
        f"   pb {format_optional_time(summary.pb_ao5)}",
        f"ao12    {format_optional_time(summary.current_ao12)}"
        f"   pb {format_optional_time(summary.pb_ao12)}",
        f"ao100   {format_optional_time(summary.ao100)}",
        f"ao1000  {format_optional_time(summary.ao1000)}",
    ]


def _times_content(app: TimerApp, rows: int) -> PanelContent:
    records = app.history.display_rows()
    if not records:
        return PanelContent(["no solves yet"])
    total = len(records)
    cursor = app.navigator.list_cursor
    rows = max(1, rows)
    first = 0
    if cursor is not None and cursor >= rows:
        first = cursor - rows + 1
    lines = []
    for row, record in enumerate(records[first : first + rows], start=first):
        number = total - row
        lines.append(
            f"{number:>4}. {format_time(record.time):>9} "
            f"{format_optional_time(record.ao5):>9} {format_optional_time(record.ao12):>9}"
        )
    highlight = None if cursor is None else cursor - first
    return PanelContent(lines, highlight=highlight)


def _main_lines(app: TimerApp) -> List[str]:
    record = app.selected_record()
    if record is None:
        return ["press space to start a solve"]
    cursor = app.navigator.list_cursor
    row = cursor if cursor is not None and cursor < len(app.history) else 0
    return [
        f"solve #{len(app.history) - row}",
        f"time  {format_time(record.time)}",
        f"ao5   {format_optional_time(record.ao5)}",
        f"ao12  {format_optional_time(record.ao12)}",
    ]


def panel_content(app: TimerApp, block: Block, rect: Rect) -> PanelContent:
    """Text shown inside ``block`` for a panel of size ``rect`` (borders excluded)."""

    inner_w = max(0, rect.width - 2)
    inner_h = max(0, rect.height - 2)
    if block is Block.TIMER:
        padding = max(0, inner_h // 2)
        return PanelContent([""] * padding + [app.stopwatch.display_text()], centered=True)
    if block is Block.TIMES:
        return _times_content(app, inner_h)
    if block is Block.STATS:
        return PanelContent(_stats_lines(app))
    if block is Block.SCRAMBLE:
        return PanelContent(textwrap.wrap(app.scramble, max(1, inner_w)), centered=True)
    if block is Block.HELP:
        return PanelContent(list(HELP_LINES))
    if block is Block.TOOLS:
        trend = render_sparkline(app.history.times(), width=inner_w)
        return PanelContent(["trend", trend])
    if block is Block.MAIN:
        return PanelContent(_main_lines(app))
    return PanelContent()
