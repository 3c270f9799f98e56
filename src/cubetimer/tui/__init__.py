"""Curses front end for cubetimer."""

from .keymap import DEFAULT_KEYMAP, intent_for_key
from .loop import EventLoop, KeySource, next_timeout
from .panels import PanelContent, Rect, panel_content, panel_rects

__all__ = [
    "DEFAULT_KEYMAP",
    "EventLoop",
    "KeySource",
    "PanelContent",
    "Rect",
    "intent_for_key",
    "next_timeout",
    "panel_content",
    "panel_rects",
]
