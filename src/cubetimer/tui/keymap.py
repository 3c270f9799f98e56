"""Default key bindings for the terminal front end."""

from __future__ import annotations

import curses
from types import MappingProxyType
from typing import Mapping, Optional

from ..app import Intent

__all__ = ["DEFAULT_KEYMAP", "HELP_LINES", "intent_for_key"]

ESCAPE_KEY = 27

DEFAULT_KEYMAP: Mapping[int, Intent] = MappingProxyType(
    {
        ord(" "): Intent.TOGGLE_TIMER,
        ord("q"): Intent.QUIT,
        ESCAPE_KEY: Intent.ESCAPE,
        ord("\n"): Intent.ENTER,
        ord("\r"): Intent.ENTER,
        curses.KEY_ENTER: Intent.ENTER,
        curses.KEY_UP: Intent.MOVE_UP,
        ord("k"): Intent.MOVE_UP,
        curses.KEY_DOWN: Intent.MOVE_DOWN,
        ord("j"): Intent.MOVE_DOWN,
        curses.KEY_LEFT: Intent.MOVE_LEFT,
        ord("h"): Intent.MOVE_LEFT,
        curses.KEY_RIGHT: Intent.MOVE_RIGHT,
        ord("l"): Intent.MOVE_RIGHT,
        ord("d"): Intent.DELETE,
        curses.KEY_DC: Intent.DELETE,
        curses.KEY_BACKSPACE: Intent.DELETE,
        127: Intent.DELETE,
        ord("s"): Intent.NEW_SCRAMBLE,
    }
)

HELP_LINES = (
    "spc timer  q quit",
    "hjkl/arrows move",
    "ret open  esc back",
    "d del  s scramble",
)


def intent_for_key(
    key: Optional[int], keymap: Mapping[int, Intent] = DEFAULT_KEYMAP
) -> Optional[Intent]:
    if key is None:
        return None
    return keymap.get(key)
