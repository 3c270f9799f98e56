"""Curses drawing and key polling for the panel grid."""

from __future__ import annotations

import curses
from typing import Any, Dict, Optional

from ..app import TimerApp
from ..core.navigation import Block, StyleClass
from .panels import PanelContent, Rect, panel_content, panel_rects

__all__ = ["CursesKeySource", "CursesRenderer"]

_PAIR_ACTIVE = 1
_PAIR_SELECTED = 2
_PAIR_NORMAL = 3

TOO_SMALL_MESSAGE = "terminal too small"


class CursesKeySource:
    """Bounded-wait key polling on a curses window."""

    def __init__(self, window: Any) -> None:
        self._window = window

    def poll(self, timeout: float) -> Optional[int]:
        self._window.timeout(max(0, int(timeout * 1000)))
        key = self._window.getch()
        if key == -1:
            return None
        return key


class CursesRenderer:
    """Draw every panel with a border reflecting its focus state."""

    def __init__(self, window: Any, *, margin: int = 0) -> None:
        self._window = window
        self._margin = margin
        self._styles = self._init_styles()

    @staticmethod
    def _init_styles() -> Dict[StyleClass, int]:
        if not curses.has_colors():
            return {
                StyleClass.ACTIVE: curses.A_BOLD | curses.A_UNDERLINE,
                StyleClass.SELECTED: curses.A_BOLD,
                StyleClass.NORMAL: curses.A_DIM,
            }
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        curses.init_pair(_PAIR_ACTIVE, curses.COLOR_GREEN, background)
        curses.init_pair(_PAIR_SELECTED, curses.COLOR_BLUE, background)
        curses.init_pair(_PAIR_NORMAL, curses.COLOR_WHITE, background)
        return {
            StyleClass.ACTIVE: curses.color_pair(_PAIR_ACTIVE) | curses.A_BOLD,
            StyleClass.SELECTED: curses.color_pair(_PAIR_SELECTED) | curses.A_BOLD,
            StyleClass.NORMAL: curses.color_pair(_PAIR_NORMAL),
        }

    def draw(self, app: TimerApp) -> None:
        window = self._window
        window.erase()
        height, width = window.getmaxyx()
        rects = panel_rects(height, width, self._margin)
        if not rects:
            self._put(0, 0, TOO_SMALL_MESSAGE[: max(0, width - 1)], curses.A_BOLD)
        for block, rect in rects.items():
            style = self._styles[app.navigator.style_for(block)]
            self._draw_border(rect, block.title, style)
            self._draw_content(rect, panel_content(app, block, rect), style)
        window.refresh()

    def _put(self, y: int, x: int, text: str, attr: int = 0) -> None:
        try:
            self._window.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen.
            pass

    def _draw_border(self, rect: Rect, title: str, attr: int) -> None:
        y, x, height, width = rect
        if height < 2 or width < 2:
            return
        horizontal = "─" * (width - 2)
        self._put(y, x, "┌" + horizontal + "┐", attr)
        for row in range(y + 1, y + height - 1):
            self._put(row, x, "│", attr)
            self._put(row, x + width - 1, "│", attr)
        self._put(y + height - 1, x, "└" + horizontal + "┘", attr)
        label = f" {title} "[: max(0, width - 4)]
        self._put(y, x + 2, label, attr)

    def _draw_content(self, rect: Rect, content: PanelContent, style: int) -> None:
        inner_w = rect.width - 2
        inner_h = rect.height - 2
        if inner_w <= 0 or inner_h <= 0:
            return
        for offset, line in enumerate(content.lines[:inner_h]):
            text = line[:inner_w]
            x = rect.x + 1
            if content.centered:
                x += max(0, (inner_w - len(text)) // 2)
            attr = 0
            if content.highlight == offset:
                attr = style | curses.A_REVERSE
            self._put(rect.y + 1 + offset, x, text, attr)
