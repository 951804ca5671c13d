"""Snake on a wrap-around grid, played in the terminal."""

from termsnake.game import Action, Game
from termsnake.grid import Grid, Symbol
from termsnake.snake import Direction, Snake

__all__ = ["Action", "Game", "Grid", "Symbol", "Direction", "Snake"]
