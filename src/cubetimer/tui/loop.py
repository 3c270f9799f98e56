"""Single-threaded control loop: wait for a key, handle it, tick, redraw."""

from __future__ import annotations

import logging
from time import monotonic
from typing import Callable, Mapping, Optional, Protocol

from ..app import Intent, TimerApp
from .keymap import DEFAULT_KEYMAP, intent_for_key

__all__ = ["EventLoop", "KeySource", "next_timeout"]

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    def poll(self, timeout: float) -> Optional[int]:
        """Block up to ``timeout`` seconds for a key code; ``None`` on timeout."""


def next_timeout(tick_rate: float, since_last_tick: float) -> float:
    """Remaining wait before the next tick, never negative."""

    return max(0.0, tick_rate - since_last_tick)


class EventLoop:
    """Drive a :class:`TimerApp` from a key source until it asks to quit."""

    def __init__(
        self,
        app: TimerApp,
        keys: KeySource,
        draw: Callable[[TimerApp], None],
        *,
        keymap: Mapping[int, Intent] = DEFAULT_KEYMAP,
        time_fn: Callable[[], float] = monotonic,
    ) -> None:
        self.app = app
        self._keys = keys
        self._draw = draw
        self._keymap = keymap
        self._time_fn = time_fn

    def run(self) -> None:
        app = self.app
        last_tick = self._time_fn()
        logger.debug("Event loop started.", extra={"event": "loop.start"})
        while not app.should_quit:
            self._draw(app)
            timeout = next_timeout(app.tick_rate, self._time_fn() - last_tick)
            intent = intent_for_key(self._keys.poll(timeout), self._keymap)
            if intent is not None:
                app.handle(intent)
                if app.should_quit:
                    break
            if self._time_fn() - last_tick >= app.tick_rate:
                app.on_tick()
                last_tick = self._time_fn()
        logger.debug("Event loop finished.", extra={"event": "loop.stop"})
