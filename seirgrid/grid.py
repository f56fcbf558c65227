"""A rectangular grid of cells that can move around by swapping places."""

from __future__ import annotations

import random
from collections.abc import Iterator

from .cell import Cell, CellState


class Grid:
    """A ``width`` by ``height`` grid of cells, all susceptible at start."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.susceptible_count = 0
        self._rows = [[Cell(x, y) for x in range(width)] for y in range(height)]

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the grid")

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at column ``x``, row ``y``."""
        self._check_bounds(x, y)
        return self._rows[y][x]

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row."""
        for row in self._rows:
            yield from row

    def update_cell(self, x: int, y: int, state: CellState) -> None:
        self.cell(x, y).state = CellState(state)

    def render_text(self) -> str:
        """Return the grid as rows of state numbers, one line per row."""
        return "".join(
            "".join(f"{int(c.state)} " for c in row) + "\n" for row in self._rows
        )

    def move_cell(self, cell: Cell, new_x: int, new_y: int) -> None:
        """Move ``cell`` to a new position, swapping it with the cell there."""
        self._check_bounds(new_x, new_y)
        old_x, old_y = cell.x, cell.y
        if self.cell(old_x, old_y) is not cell:
            raise ValueError("cell does not belong to this grid")
        if (old_x, old_y) == (new_x, new_y):
            return
        target = self._rows[new_y][new_x]
        self._rows[old_y][old_x] = target
        self._rows[new_y][new_x] = cell
        target.x, target.y = old_x, old_y
        cell.x, cell.y = new_x, new_y
        cell.move_count += 1

    def move_cell_random(self, cell: Cell, rng: random.Random) -> None:
        """Move ``cell`` to a position drawn uniformly from the grid."""
        new_x = rng.randrange(self.width)
        new_y = rng.randrange(self.height)
        self.move_cell(cell, new_x, new_y)

    def count_cells(self, state: CellState) -> int:
        return sum(1 for c in self.cells() if c.state == state)