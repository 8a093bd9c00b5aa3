# game.py
from collections import deque
from enum import Enum
from itertools import islice
from typing import Deque, Iterator, Optional, Tuple
import logging
import random

from .config import CFG, COLS, ROWS, DIRECTIONS, RIGHT, Config
from .grid import Grid, Position
from .highscore import HighscoreStore, MemoryHighscoreStore

logger = logging.getLogger(__name__)

# ---------- Helpers ----------
def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def spawn_food(snake: "Snake", grid: Grid, rng: random.Random) -> Optional[Position]:
    """Pick a uniformly random free cell, or None when the snake fills the board."""
    if len(snake) >= grid.cell_count:
        return None
    while True:
        candidate = (rng.randrange(grid.columns), rng.randrange(grid.rows))
        if not snake.occupies(candidate):
            return candidate

# ---------- Snake ----------
class Snake:
    """Body segments head-first, the current heading and the grow flag."""

    def __init__(self, start: Position, heading: Tuple[int, int] = RIGHT):
        self.body: Deque[Position] = deque([start])
        self.heading = heading
        self.grow = False

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    @property
    def head(self) -> Position:
        return self.body[0]

    def heading_changed(self, request: Tuple[int, int]) -> None:
        """Turn towards `request`; an exact reversal is ignored (no 180° turns)."""
        if request not in DIRECTIONS:
            raise ValueError(f"Not a unit heading: {request!r}")
        if not is_opposite(request, self.heading):
            self.heading = request

    def next_head(self) -> Position:
        hx, hy = self.head
        dx, dy = self.heading
        return (hx + dx, hy + dy)

    def advance(self) -> None:
        self.body.appendleft(self.next_head())
        if self.grow:
            self.grow = False
        else:
            self.body.pop()

    def self_collision(self) -> bool:
        head = self.body[0]
        return any(segment == head for segment in islice(self.body, 1, None))

    def occupies(self, position: Position) -> bool:
        return position in self.body

# ---------- Session ----------
class Status(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameSession:
    """
    One run of the game: snake, food, score, speed and playing/game-over status.

    The caller drives it with `redirect()` for key presses and `update(dt)`
    with elapsed wall-clock seconds; `tick()` advances exactly one step.
    The high score is read from `store` once, here, and written back on a
    game over that beats it.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        config: Config = CFG,
        rng: Optional[random.Random] = None,
        store: Optional[HighscoreStore] = None,
    ):
        self.grid = grid or Grid(COLS, ROWS)
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.store = store if store is not None else MemoryHighscoreStore()
        self.highscore = self.store.load()
        self._new_run()

    def _new_run(self) -> None:
        self.snake = Snake(self.grid.center, RIGHT)
        self.food: Optional[Position] = spawn_food(self.snake, self.grid, self.rng)
        self.score = 0
        self.interval = self.config.move_delay
        self.elapsed = 0.0
        self.status = Status.PLAYING
        self.death_reason: Optional[str] = None

    @property
    def is_over(self) -> bool:
        return self.status is Status.GAME_OVER

    # ----- transitions -----
    def redirect(self, request: Tuple[int, int]) -> None:
        if self.status is Status.PLAYING:
            self.snake.heading_changed(request)

    def update(self, dt: float) -> bool:
        """Accumulate `dt` seconds; tick once if a full interval has passed."""
        if self.status is not Status.PLAYING:
            return False
        self.elapsed += dt
        if self.elapsed < self.interval:
            return False
        self.elapsed -= self.interval
        self.tick()
        return True

    def tick(self) -> Status:
        if self.status is not Status.PLAYING:
            return self.status

        self.snake.advance()
        head = self.snake.head

        if not self.grid.contains(head):
            self._game_over("wall")
        elif self.snake.self_collision():
            self._game_over("self")
        elif head == self.food:
            self.snake.grow = True
            self.score += self.config.food_score
            self.interval = max(self.config.min_delay, self.interval * self.config.speedup)
            self.food = spawn_food(self.snake, self.grid, self.rng)
            if self.food is None:
                logger.info("Board full at score %d; no more food", self.score)

        return self.status

    def reset(self) -> None:
        if self.status is not Status.GAME_OVER:
            return
        logger.debug("Restarting after score %d", self.score)
        self._new_run()

    def _game_over(self, reason: str) -> None:
        self.status = Status.GAME_OVER
        self.death_reason = reason
        logger.info("Game over (%s) with score %d", reason, self.score)
        if self.score > self.highscore:
            self.highscore = self.score
            self.store.save(self.score)
            logger.info("New high score: %d", self.score)
