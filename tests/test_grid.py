"""Tests for the grid model."""

import pytest

from snake.grid import Grid


class TestGrid:
    """Bounds and derived sizes."""

    def test_contains_corners(self):
        """All four corners are inside."""
        grid = Grid(40, 30)
        for cell in [(0, 0), (39, 0), (0, 29), (39, 29)]:
            assert grid.contains(cell)

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (40, 0), (0, 30), (40, 30)])
    def test_outside_cells(self, cell):
        """Anything past an edge is outside."""
        assert not Grid(40, 30).contains(cell)

    def test_cell_count_and_center(self):
        """Center is integer-halved; count is columns times rows."""
        grid = Grid(40, 30)
        assert grid.cell_count == 1200
        assert grid.center == (20, 15)

    @pytest.mark.parametrize("columns, rows", [(0, 5), (5, 0), (-3, 4)])
    def test_rejects_non_positive_size(self, columns, rows):
        """A grid needs at least one cell."""
        with pytest.raises(ValueError):
            Grid(columns, rows)

    def test_is_immutable(self):
        """Grid is frozen for the session."""
        grid = Grid(4, 4)
        with pytest.raises(AttributeError):
            grid.columns = 5
