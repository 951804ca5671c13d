# fruit.py
import random
from typing import Tuple


def new_fruit_position(height: int, width: int, rng=random) -> Tuple[int, int]:
    """
    Uniformly random cell on the board.

    No rejection against the snake: the fruit may land under the body.
    """
    fx = rng.randrange(width)
    fy = rng.randrange(height)
    return (fx, fy)
