"""Classic single-screen Snake on a pygame window."""

from .grid import Grid, Position
from .game import GameSession, Snake, Status, spawn_food
from .highscore import FileHighscoreStore, MemoryHighscoreStore

__all__ = [
    "Grid", "Position",
    "GameSession", "Snake", "Status", "spawn_food",
    "FileHighscoreStore", "MemoryHighscoreStore",
]
