"""Top-level package for cubetimer.

A terminal speedcube timer: a stopwatch, solve history with trimmed-mean
averages and personal bests, and a keyboard-driven grid of panels.
"""

from ._version import __version__
from .app import Intent, TimerApp
from .core.averages import trimmed_mean
from .core.history import HistorySummary, SolveHistory
from .core.navigation import Block, Direction, ListCursor, Navigator, StyleClass
from .core.records import SolveRecord, format_time
from .core.stopwatch import Stopwatch
from .io.history_file import load_history, save_history

__all__ = [
    "Block",
    "Direction",
    "HistorySummary",
    "Intent",
    "ListCursor",
    "Navigator",
    "SolveHistory",
    "SolveRecord",
    "Stopwatch",
    "StyleClass",
    "TimerApp",
    "format_time",
    "load_history",
    "save_history",
    "trimmed_mean",
    "__version__",
]
