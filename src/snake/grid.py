# grid.py
from dataclasses import dataclass
from typing import Tuple

Position = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Fixed columns x rows board. Cells are addressed as (x, y)."""
    columns: int
    rows: int

    def __post_init__(self):
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(f"Grid size must be positive, got {self.columns}x{self.rows}")

    def contains(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.columns and 0 <= y < self.rows

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    @property
    def center(self) -> Position:
        return (self.columns // 2, self.rows // 2)
