# snake.py
from collections import deque
from enum import Enum
from typing import Deque, Tuple

Coord = Tuple[int, int]


class Direction(Enum):
    # (dx, dy); y grows downwards
    UP    = (0, -1)
    DOWN  = (0, 1)
    LEFT  = (-1, 0)
    RIGHT = (1, 0)


class Snake:
    """
    The player's snake.

    Attributes
    ----------
    positions : deque of (x, y) ordered tail -> head; positions[-1] is the head.
    direction : heading applied on the next move.
    grow      : pending growth; each unit keeps the tail for one extra move.
    """

    def __init__(self, height: int, width: int):
        if width < 1 or height // 2 < 1:
            raise ValueError(
                f"Board {height}x{width} is too small to place the snake"
            )
        x, y = width // 2, height // 2
        self.positions: Deque[Coord] = deque([(x, y), (x, y - 1)])
        self.direction = Direction.DOWN
        self.grow = 0

    @property
    def head(self) -> Coord:
        return self.positions[-1]

    @property
    def tail(self) -> Coord:
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, coord) -> bool:
        return coord in self.positions

    def grow_by_one(self) -> None:
        self.grow += 1

    def move_position(self, height: int, width: int) -> Coord:
        """
        Advance one cell in the current direction, wrapping at the edges.

        Returns the tail as it was before the move so the caller can erase
        it from the grid. While growth is pending the tail is kept, which
        is what makes the snake longer.
        """
        assert self.positions, "Snake has no segments."
        old_tail = self.positions[0]

        if self.grow > 0:
            self.grow -= 1
        else:
            self.positions.popleft()

        # length never drops below 2, so a head is always left to advance
        assert self.positions, "Snake lost its head while moving."
        hx, hy = self.positions[-1]
        dx, dy = self.direction.value
        self.positions.append(((hx + dx) % width, (hy + dy) % height))
        return old_tail
