# highscore.py
"""
High score persistence.

The score lives in a plain text file holding one decimal integer. Reading
never fails the caller (anything unusable reads as 0) and a failed write
is logged and dropped.
"""
import logging
from pathlib import Path
from typing import Protocol, Union

from .config import CFG

logger = logging.getLogger(__name__)


class HighscoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class FileHighscoreStore:
    """Single integer in a text file (default: ./highscore.txt)."""

    def __init__(self, path: Union[str, Path] = CFG.highscore_path):
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="ascii")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("No high score read from %s (%s); using 0", self.path, exc)
            return 0

        tokens = text.split()
        if not tokens:
            return 0
        # plain decimal digits only; no sign, no underscores
        if not tokens[0].isdigit():
            logger.debug("Unparsable high score in %s: %r", self.path, tokens[0])
            return 0
        return int(tokens[0])

    def save(self, value: int) -> None:
        try:
            self.path.write_text(str(int(value)), encoding="ascii")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)


class MemoryHighscoreStore:
    """Keeps the score in memory; used by tests and when no file is wanted."""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves += 1
