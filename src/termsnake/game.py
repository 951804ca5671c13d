# game.py
from enum import Enum
import logging
import random
from typing import Optional

import numpy as np  # type: ignore

from .fruit import new_fruit_position
from .grid import Grid
from .snake import Direction, Snake

logger = logging.getLogger(__name__)


class Action(Enum):
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    QUIT = "quit"


MOVES = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}


class Game:
    """
    Owns the grid, the snake and the fruit, and advances them one tick at
    a time. No I/O happens here: a frontend feeds actions in and draws
    frame() out.
    """

    def __init__(self, height: int, width: int, rng: Optional[random.Random] = None):
        self.grid = Grid(height, width)
        self.snake = Snake(height, width)
        self.rng = rng if rng is not None else random.Random()
        self.fruit = new_fruit_position(height, width, self.rng)
        self.ticks = 0

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width

    def init(self) -> None:
        # fruit first so an overlapping snake stays visible
        self.grid.draw_fruit(self.fruit)
        self.grid.draw_snake(self.snake)
        logger.info("Board %dx%d, snake at %s, fruit at %s",
                    self.height, self.width, list(self.snake.positions), self.fruit)

    def keyboard_action(self, action) -> bool:
        """Apply one input action. Return False to quit."""
        if action is Action.QUIT:
            logger.info("Quit requested after %d ticks", self.ticks)
            return False
        if not isinstance(action, Action):
            return True
        direction = MOVES.get(action)
        if direction is not None:
            # reversing straight into the body is allowed
            self.snake.direction = direction
        return True

    def step(self) -> None:
        """Move the snake, eat any fruit under the body and update the board."""
        old_tail = self.snake.move_position(self.height, self.width)
        self.grid.draw_snake(self.snake, old_tail)

        # any segment counts, not only the head
        if self.fruit in self.snake:
            eaten = self.fruit
            self.fruit = new_fruit_position(self.height, self.width, self.rng)
            self.snake.grow_by_one()
            logger.debug("Tick %d: fruit eaten at %s, respawned at %s",
                         self.ticks, eaten, self.fruit)

        self.grid.draw_fruit(self.fruit)
        self.ticks += 1

    def frame(self) -> np.ndarray:
        return self.grid.snapshot()
