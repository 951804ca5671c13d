# grid.py
from __future__ import annotations
from enum import IntEnum
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np  # type: ignore

if TYPE_CHECKING:
    from .snake import Snake

Coord = Tuple[int, int]


class Symbol(IntEnum):
    BACKGROUND = 0
    BODY = 1
    FRUIT = 2


class Grid:
    """
    Fixed-size board of display symbols, stored as a (height, width)
    uint8 matrix indexed cells[y, x].

    The grid is a projection of the snake and the fruit. Callers keep it
    current with explicit "erase old, draw new" edits.
    """

    def __init__(self, height: int, width: int):
        if height < 1 or width < 1:
            raise ValueError(f"Grid dimensions must be positive, got {height}x{width}")
        self.height = height
        self.width = width
        self.cells = np.full((height, width), Symbol.BACKGROUND, dtype=np.uint8)

    @property
    def dimensions(self) -> Tuple[int, int]:
        return self.height, self.width

    def set(self, coord: Coord, symbol: Symbol) -> None:
        x, y = coord
        self.cells[y, x] = symbol

    def get(self, coord: Coord) -> Symbol:
        x, y = coord
        return Symbol(int(self.cells[y, x]))

    def draw_snake(self, snake: "Snake", old_tail: Optional[Coord] = None) -> None:
        """
        Erase the old tail, then paint the whole body.

        The erase has to come first: while the snake is growing the old
        tail is still part of the body and the redraw puts it back.
        """
        if old_tail is not None:
            self.set(old_tail, Symbol.BACKGROUND)
        for pos in snake.positions:
            self.set(pos, Symbol.BODY)

    def draw_fruit(self, coord: Coord) -> None:
        self.set(coord, Symbol.FRUIT)

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the cells for a renderer."""
        frame = self.cells.copy()
        frame.setflags(write=False)
        return frame
