from dataclasses import dataclass
from typing import Optional
import logging
import os

# ----- Window & grid -----
CELL_SIZE = 20
COLS, ROWS = 40, 30
WIDTH, HEIGHT = COLS * CELL_SIZE, ROWS * CELL_SIZE

# ----- Colors -----
BG         = (30, 30, 30)
FOOD       = (255, 0, 0)
HEAD       = (0, 255, 0)
BODY       = (0, 180, 0)
TEXT       = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Assets -----
FONT_PATHS = ("assets/arial.ttf", "arial.ttf")
HUD_FONT_SIZE = 18
INFO_FONT_SIZE = 28

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None       # None -> OS entropy
    move_delay: float = 0.12         # seconds between ticks at start
    speedup: float = 0.95            # interval multiplier per food
    min_delay: float = 0.03          # interval floor
    food_score: int = 10
    fps: int = 60
    highscore_path: str = "highscore.txt"

CFG = Config()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging; level falls back to $SNAKE_LOG_LEVEL, then INFO."""
    level = (level or os.environ.get("SNAKE_LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
