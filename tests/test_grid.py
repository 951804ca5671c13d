from collections import deque

import numpy as np
import pytest

from termsnake.grid import Grid, Symbol
from termsnake.snake import Snake


def test_new_grid_is_all_background():
    grid = Grid(3, 5)
    assert grid.dimensions == (3, 5)
    assert grid.cells.shape == (3, 5)
    assert (grid.cells == Symbol.BACKGROUND).all()


@pytest.mark.parametrize("height,width", [(0, 4), (4, 0), (0, 0)])
def test_zero_dimension_is_rejected(height, width):
    with pytest.raises(ValueError):
        Grid(height, width)


def test_set_and_get_use_x_y_coordinates():
    grid = Grid(2, 3)
    grid.set((2, 1), Symbol.FRUIT)
    assert grid.get((2, 1)) is Symbol.FRUIT
    assert grid.cells[1, 2] == Symbol.FRUIT
    assert grid.get((1, 1)) is Symbol.BACKGROUND


def test_draw_snake_erases_old_tail_and_paints_body():
    grid = Grid(4, 4)
    snake = Snake(4, 4)
    grid.draw_snake(snake)
    old_tail = snake.move_position(4, 4)

    grid.draw_snake(snake, old_tail)

    assert [c for c in snake.positions] == [(2, 1), (2, 2)]
    assert grid.get((2, 1)) is Symbol.BODY
    assert grid.get((2, 2)) is Symbol.BODY
    assert int((grid.cells == Symbol.BODY).sum()) == 2


def test_draw_snake_keeps_old_tail_that_is_still_body():
    # while growing the returned tail is still part of the snake
    grid = Grid(4, 4)
    snake = Snake(4, 4)
    snake.grow_by_one()
    old_tail = snake.move_position(4, 4)
    assert old_tail in snake

    grid.draw_snake(snake, old_tail)

    assert grid.get(old_tail) is Symbol.BODY


def test_draw_fruit_overwrites_body():
    grid = Grid(4, 4)
    snake = Snake(4, 4)
    grid.draw_snake(snake)
    grid.draw_fruit(snake.head)
    assert grid.get(snake.head) is Symbol.FRUIT


def test_snapshot_is_read_only_copy():
    grid = Grid(3, 3)
    frame = grid.snapshot()
    assert not frame.flags.writeable
    with pytest.raises(ValueError):
        frame[0, 0] = Symbol.BODY

    grid.set((0, 0), Symbol.BODY)
    assert frame[0, 0] == Symbol.BACKGROUND


def test_snapshots_of_same_state_are_identical():
    grid = Grid(4, 6)
    snake = Snake(4, 6)
    snake.positions = deque([(0, 0), (1, 0), (2, 0)])
    grid.draw_snake(snake)
    grid.draw_fruit((5, 3))

    first = grid.snapshot()
    second = grid.snapshot()
    assert first.tobytes() == second.tobytes()
    assert np.array_equal(first, second)
