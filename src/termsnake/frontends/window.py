# frontends/window.py
from typing import Optional, Tuple

import numpy as np  # type: ignore
import pygame  # type: ignore

from ..config import BG, CELL_SIZE, GREEN, HELP_STRIP, HELP_TEXT, RED, TEXT
from ..game import Action
from ..grid import Symbol

KEYS = {
    pygame.K_UP: Action.MOVE_UP,
    pygame.K_DOWN: Action.MOVE_DOWN,
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_q: Action.QUIT,
}

COLORS = {
    Symbol.BODY: GREEN,
    Symbol.FRUIT: RED,
}


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int],
              cell_size: int = CELL_SIZE) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)


class WindowFrontend:
    """pygame window showing the board as coloured cells."""

    def __init__(self, height: int, width: int, cell_size: int = CELL_SIZE):
        self.cell_size = cell_size
        self.board_px = height * cell_size
        pygame.init()
        self.screen = pygame.display.set_mode((width * cell_size, self.board_px + HELP_STRIP))
        pygame.display.set_caption("Snake")
        self.font = pygame.font.SysFont(None, 20)
        self.closed = False

    def poll(self) -> Optional[Action]:
        """
        Drain pending events. A close request wins; otherwise the most
        recent recognised key is returned.
        """
        action: Optional[Action] = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return Action.QUIT
            if event.type == pygame.KEYDOWN and event.key in KEYS:
                action = KEYS[event.key]
        return action

    def draw(self, frame: np.ndarray) -> None:
        self.screen.fill(BG)
        # background cells are 0, so nonzero() yields body and fruit only
        for gy, gx in zip(*np.nonzero(frame)):
            color = COLORS[Symbol(int(frame[gy, gx]))]
            draw_cell(self.screen, int(gx), int(gy), color, self.cell_size)
        txt = self.font.render(HELP_TEXT, True, TEXT)
        self.screen.blit(txt, (6, self.board_px + 4))
        pygame.display.flip()

    def close(self) -> None:
        if not self.closed:
            pygame.quit()
            self.closed = True
