"""Solve records and their textual representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["SolveRecord", "format_time", "format_optional_time"]

_MISSING = "-"


@dataclass(frozen=True, slots=True)
class SolveRecord:
    """One completed solve.

    ``ao5`` and ``ao12`` are filled in by :meth:`SolveHistory.insert` when the
    record is appended and stay untouched afterwards.
    """

    time: float
    ao5: Optional[float] = None
    ao12: Optional[float] = None

    def __str__(self) -> str:
        return repr(float(self.time))


def format_time(seconds: float) -> str:
    """Render ``seconds`` as ``M:SS.mmm`` (one minute or more) or ``S.mmm``."""

    minutes = int(seconds // 60)
    remainder = seconds - minutes * 60
    if minutes:
        return f"{minutes}:{remainder:06.3f}"
    return f"{remainder:.3f}"


def format_optional_time(seconds: Optional[float]) -> str:
    if seconds is None:
        return _MISSING
    return format_time(seconds)
