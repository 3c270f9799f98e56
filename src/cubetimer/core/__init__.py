"""Timing, statistics and navigation state."""

from .averages import trimmed_mean, window_average
from .history import HistorySummary, SolveHistory
from .navigation import LAYOUT, Block, Direction, ListCursor, Navigator, StyleClass
from .records import SolveRecord, format_optional_time, format_time
from .stopwatch import Stopwatch

__all__ = [
    "Block",
    "Direction",
    "HistorySummary",
    "LAYOUT",
    "ListCursor",
    "Navigator",
    "SolveHistory",
    "SolveRecord",
    "Stopwatch",
    "StyleClass",
    "format_optional_time",
    "format_time",
    "trimmed_mean",
    "window_average",
]
