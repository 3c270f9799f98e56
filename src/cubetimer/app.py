"""Application state shared by the terminal front end and the CLI."""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Callable, Optional

from .core.history import SolveHistory
from .core.navigation import Block, Direction, Navigator
from .core.records import SolveRecord
from .core.stopwatch import Stopwatch
from .io.history_file import save_history
from .scramble import generate_scramble

__all__ = ["Intent", "TimerApp"]

logger = logging.getLogger(__name__)


class Intent(enum.Enum):
    """User intents produced by the key map."""

    TOGGLE_TIMER = "toggle_timer"
    QUIT = "quit"
    ESCAPE = "escape"
    ENTER = "enter"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    DELETE = "delete"
    NEW_SCRAMBLE = "new_scramble"


_MOVES = {
    Intent.MOVE_UP: Direction.UP,
    Intent.MOVE_DOWN: Direction.DOWN,
    Intent.MOVE_LEFT: Direction.LEFT,
    Intent.MOVE_RIGHT: Direction.RIGHT,
}


class TimerApp:
    """Owns the stopwatch, solve history, navigator and current scramble."""

    def __init__(
        self,
        history: Optional[SolveHistory] = None,
        *,
        history_path: Optional[Path] = None,
        tick_rate: float = 0.1,
        autosave: bool = True,
        scramble_length: int = 20,
        stopwatch: Optional[Stopwatch] = None,
        navigator: Optional[Navigator] = None,
        scramble_fn: Callable[[int], str] = generate_scramble,
    ) -> None:
        self.history = history if history is not None else SolveHistory()
        self.history_path = history_path
        self.tick_rate = tick_rate
        self.autosave = autosave
        self.scramble_length = scramble_length
        self.stopwatch = stopwatch or Stopwatch()
        self.navigator = navigator or Navigator()
        self._scramble_fn = scramble_fn
        self.scramble = scramble_fn(scramble_length)
        self.should_quit = False
        self.ticks = 0
        self.navigator.cursor.sync(len(self.history))

    def handle(self, intent: Intent) -> None:
        if intent is Intent.QUIT:
            self.quit()
        elif intent is Intent.TOGGLE_TIMER:
            self.toggle_timer()
        elif intent is Intent.ESCAPE:
            self.navigator.escape()
        elif intent is Intent.ENTER:
            self.navigator.enter()
        elif intent in _MOVES:
            self.navigator.move(_MOVES[intent], list_length=len(self.history))
        elif intent is Intent.DELETE:
            if self.navigator.active_block is Block.TIMES:
                self.delete_selected()
        elif intent is Intent.NEW_SCRAMBLE:
            self.new_scramble()

    def toggle_timer(self) -> Optional[SolveRecord]:
        """Start or stop the stopwatch; a finished solve joins the history."""

        record = self.stopwatch.toggle()
        if record is None:
            return None
        stored = self.history.insert(record)
        logger.info(
            "Solve recorded.",
            extra={
                "event": "app.solve",
                "time": stored.time,
                "ao5": stored.ao5,
                "ao12": stored.ao12,
            },
        )
        self.new_scramble()
        self._autosave()
        return stored

    def delete_selected(self) -> Optional[SolveRecord]:
        """Delete the solve under the list cursor."""

        cursor = self.navigator.cursor
        row = cursor.index
        removed = self.history.delete(row)
        if removed is None or row is None:
            return None
        cursor.removed(row, len(self.history))
        self._autosave()
        return removed

    def new_scramble(self) -> str:
        self.scramble = self._scramble_fn(self.scramble_length)
        return self.scramble

    def selected_record(self) -> Optional[SolveRecord]:
        """The highlighted solve, or the latest one when nothing is highlighted."""

        record = self.history.record_at_row(self.navigator.list_cursor)
        if record is None:
            return self.history.latest()
        return record

    def on_tick(self) -> None:
        self.ticks += 1

    def quit(self) -> None:
        if self.stopwatch.running:
            self.stopwatch.reset()
            logger.info("Running solve discarded on quit.", extra={"event": "app.discard"})
        self.should_quit = True

    def save(self) -> None:
        """Rewrite the history file; :class:`OSError` propagates."""

        if self.history_path is None:
            return
        save_history(self.history, self.history_path)

    def _autosave(self) -> None:
        if self.autosave:
            self.save()
