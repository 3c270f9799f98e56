"""Panel focus and list-selection state for the terminal front end."""

from __future__ import annotations

import enum
from typing import Optional, Tuple

__all__ = [
    "Block",
    "Direction",
    "LAYOUT",
    "ListCursor",
    "Navigator",
    "StyleClass",
    "block_at",
]


class Block(enum.Enum):
    """Focusable panels. ``HOME`` means no panel is entered."""

    HOME = "home"
    TOOLS = "tools"
    HELP = "help"
    TIMER = "timer"
    TIMES = "times"
    SCRAMBLE = "scramble"
    STATS = "stats"
    MAIN = "main"

    @property
    def title(self) -> str:
        return self.value.capitalize()


class Direction(enum.Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class StyleClass(enum.Enum):
    ACTIVE = "active"
    SELECTED = "selected"
    NORMAL = "normal"


LAYOUT: Tuple[Tuple[Block, ...], ...] = (
    (Block.TOOLS, Block.HELP, Block.SCRAMBLE),
    (Block.TIMER, Block.STATS),
    (Block.TIMES, Block.MAIN),
)

GridPos = Tuple[int, int]

DEFAULT_GRID_POS: GridPos = (2, 0)


def block_at(pos: GridPos, layout: Tuple[Tuple[Block, ...], ...] = LAYOUT) -> Block:
    row, col = pos
    return layout[row][col]


class ListCursor:
    """Selection inside a list whose length is owned by someone else.

    Indices refer to the most-recent-first display order. Every method takes
    the current list length so an empty list always leaves the cursor unset.
    """

    def __init__(self, index: Optional[int] = None) -> None:
        self.index = index

    def next(self, length: int) -> None:
        if length <= 0:
            return
        if self.index is None or self.index >= length - 1:
            self.index = 0
        else:
            self.index += 1

    def previous(self, length: int) -> None:
        if length <= 0:
            return
        if self.index is None:
            self.index = 0
        elif self.index == 0:
            self.index = length - 1
        else:
            self.index -= 1

    def sync(self, length: int) -> None:
        """Re-establish ``index`` in ``[0, length)`` or ``None`` when empty."""

        if length <= 0:
            self.index = None
        elif self.index is not None and self.index >= length:
            self.index = length - 1

    def removed(self, row: int, length: int) -> None:
        """Adjust after the entry at ``row`` was removed; ``length`` is the new size.

        Removing the last row moves the cursor to the new last row; any other
        row keeps the cursor in place, now pointing at the following entry.
        """

        if length <= 0:
            self.index = None
            return
        if row == length:
            self.previous(length + 1)
        self.sync(length)


class Navigator:
    """Grid position plus the selected and active panels."""

    def __init__(
        self,
        *,
        layout: Tuple[Tuple[Block, ...], ...] = LAYOUT,
        grid_pos: GridPos = DEFAULT_GRID_POS,
    ) -> None:
        row, col = grid_pos
        if not 0 <= row < len(layout) or not 0 <= col < len(layout[row]):
            raise ValueError(f"grid position {grid_pos!r} is outside the layout")
        self.layout = layout
        self.grid_pos: GridPos = (row, col)
        self.selected_block = block_at(self.grid_pos, layout)
        self.active_block = Block.HOME
        self.cursor = ListCursor()

    @property
    def list_cursor(self) -> Optional[int]:
        return self.cursor.index

    def move(self, direction: Direction, *, list_length: int = 0) -> None:
        """Move the grid cursor, or the list cursor while Times is active."""

        if self.active_block is Block.HOME:
            self._move_grid(direction)
        elif self.active_block is Block.TIMES:
            if direction is Direction.UP:
                self.cursor.previous(list_length)
            elif direction is Direction.DOWN:
                self.cursor.next(list_length)

    def enter(self) -> None:
        self.active_block = self.selected_block

    def escape(self) -> None:
        if self.active_block is not Block.HOME:
            self.active_block = Block.HOME

    def style_for(self, block: Block) -> StyleClass:
        if block is self.active_block:
            return StyleClass.ACTIVE
        if block is self.selected_block:
            return StyleClass.SELECTED
        return StyleClass.NORMAL

    def _move_grid(self, direction: Direction) -> None:
        row, col = self.grid_pos
        if direction is Direction.UP:
            if row == 0:
                return
            row -= 1
            col = min(col, len(self.layout[row]) - 1)
        elif direction is Direction.DOWN:
            if row + 1 >= len(self.layout):
                return
            row += 1
            col = min(col, len(self.layout[row]) - 1)
        elif direction is Direction.LEFT:
            if col == 0:
                return
            col -= 1
        elif direction is Direction.RIGHT:
            if col + 1 >= len(self.layout[row]):
                return
            col += 1
        self.grid_pos = (row, col)
        self.selected_block = block_at(self.grid_pos, self.layout)
