from dataclasses import dataclass
from typing import Optional

# ----- Board -----
DEFAULT_HEIGHT, DEFAULT_WIDTH = 20, 20
DEFAULT_INTERVAL_MS = 80

# ----- Terminal symbols -----
BACKGROUND_CHAR = "."
BODY_CHAR = "o"
FRUIT_CHAR = "@"

HELP_TEXT = "q to exit; Control with arrow keys"
QUIT_KEY = "q"

# ----- Window (pygame) -----
CELL_SIZE = 20
HELP_STRIP = 24
BG    = (20, 20, 24)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

FRONTENDS = ("terminal", "window")

# ----- Tunables -----
@dataclass
class Config:
    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    interval_ms: int = DEFAULT_INTERVAL_MS
    seed: Optional[int] = None      # None -> seeded from the environment
    frontend: str = "terminal"
    cell_size: int = CELL_SIZE

    def __post_init__(self):
        if self.height < 1 or self.width < 1:
            raise ValueError(
                f"Board must be at least 1x1, got {self.height}x{self.width}"
            )
        # the snake starts with a segment at height//2 - 1
        if self.height < 2:
            raise ValueError(f"Board height must be at least 2, got {self.height}")
        if self.interval_ms < 0:
            raise ValueError(f"Frame interval must be >= 0 ms, got {self.interval_ms}")
        if self.frontend not in FRONTENDS:
            raise ValueError(f"Unknown frontend: {self.frontend}")

    @property
    def interval_s(self) -> float:
        return self.interval_ms / 1000.0
