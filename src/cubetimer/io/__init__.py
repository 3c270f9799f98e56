"""Storage helpers for cubetimer."""

from .history_file import iter_times, load_history, parse_time_line, save_history

__all__ = ["iter_times", "load_history", "parse_time_line", "save_history"]
