# frontends/terminal.py
import curses
from typing import Optional

import numpy as np  # type: ignore

from ..config import BACKGROUND_CHAR, BODY_CHAR, FRUIT_CHAR, HELP_TEXT, QUIT_KEY
from ..game import Action
from ..grid import Symbol

KEYS = {
    curses.KEY_UP: Action.MOVE_UP,
    curses.KEY_DOWN: Action.MOVE_DOWN,
    curses.KEY_LEFT: Action.MOVE_LEFT,
    curses.KEY_RIGHT: Action.MOVE_RIGHT,
    ord(QUIT_KEY): Action.QUIT,
}

CHARS = {
    Symbol.BACKGROUND: BACKGROUND_CHAR,
    Symbol.BODY: BODY_CHAR,
    Symbol.FRUIT: FRUIT_CHAR,
}


def render_rows(frame: np.ndarray) -> list:
    """One text line per board row, each cell drawn as ' c '."""
    return ["".join(f" {CHARS[Symbol(int(v))]} " for v in row) for row in frame]


class TerminalFrontend:
    """
    curses frontend. Meant to run inside curses.wrapper(), which owns
    terminal setup and restores it on the way out.
    """

    def __init__(self, stdscr, height: int, width: int):
        rows, cols = stdscr.getmaxyx()
        need_rows = height + 2              # board, blank line, help
        need_cols = max(width * 3, len(HELP_TEXT)) + 1
        if rows < need_rows or cols < need_cols:
            raise ValueError(
                f"Terminal is {cols}x{rows}, need at least {need_cols}x{need_rows} "
                f"for a {height}x{width} board"
            )
        self.stdscr = stdscr
        curses.curs_set(0)
        stdscr.nodelay(True)
        stdscr.keypad(True)

    def poll(self) -> Optional[Action]:
        """Read at most one pending key; None if nothing usable is waiting."""
        key = self.stdscr.getch()
        if key == -1:
            return None
        return KEYS.get(key)

    def draw(self, frame: np.ndarray) -> None:
        self.stdscr.erase()
        rows = render_rows(frame)
        for y, line in enumerate(rows):
            self.stdscr.addstr(y, 0, line)
        self.stdscr.addstr(len(rows) + 1, 0, HELP_TEXT)
        self.stdscr.refresh()

    def close(self) -> None:
        # endwin() itself is left to curses.wrapper
        self.stdscr.nodelay(False)
