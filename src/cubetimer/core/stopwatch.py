"""Start/stop stopwatch producing solve records."""

from __future__ import annotations

import logging
from time import monotonic
from typing import Callable, Optional

from .records import SolveRecord

__all__ = ["Stopwatch"]

logger = logging.getLogger(__name__)


class Stopwatch:
    """Two-state (idle/running) stopwatch driven by :meth:`toggle`."""

    def __init__(self, *, time_fn: Callable[[], float] = monotonic) -> None:
        self._time_fn = time_fn
        self._start_instant: Optional[float] = None
        self._last_duration = 0.0

    @property
    def running(self) -> bool:
        return self._start_instant is not None

    @property
    def start_instant(self) -> Optional[float]:
        return self._start_instant

    @property
    def last_duration(self) -> float:
        return self._last_duration

    def elapsed(self) -> float:
        """Seconds since the stopwatch started, ``0.0`` while idle."""

        if self._start_instant is None:
            return 0.0
        return max(0.0, self._time_fn() - self._start_instant)

    def toggle(self) -> Optional[SolveRecord]:
        """Start an idle stopwatch or stop a running one.

        Stopping returns a :class:`SolveRecord` holding the elapsed time. The
        record has no averages yet; the caller folds it into the history.
        """

        if self._start_instant is None:
            self._start_instant = self._time_fn()
            logger.debug("Stopwatch started.", extra={"event": "stopwatch.start"})
            return None

        self._last_duration = self.elapsed()
        self._start_instant = None
        logger.debug(
            "Stopwatch stopped.",
            extra={"event": "stopwatch.stop", "duration": self._last_duration},
        )
        return SolveRecord(time=self._last_duration)

    def reset(self) -> None:
        """Drop a running solve without producing a record."""

        self._start_instant = None

    def display_text(self) -> str:
        if self._start_instant is not None:
            return f"{self.elapsed():.1f}"
        return f"{self._last_duration:.3f}"
