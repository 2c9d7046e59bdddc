from __future__ import annotations

from typing import AbstractSet, Iterable, Tuple

import numpy as np


Coordinate = Tuple[int, int]


class Board:
    """Fixed-size grid of cell occupancy values.

    The grid uses 0 for empty cells and ``kind + 1`` (1..7) for filled cells.
    Row 0 is the top of the playing field. Accessors do not clip: reading or
    writing outside the grid is a caller bug and raises ``IndexError``.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)
        self.grid = np.zeros((self.height, self.width), dtype=np.int8)

    def reset(self) -> None:
        self.grid.fill(0)

    def is_inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} board")

    def get(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.grid[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        self._check(x, y)
        self.grid[y, x] = value

    def is_filled(self, row: int) -> bool:
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} outside board of height {self.height}")
        return bool(np.all(self.grid[row] != 0))

    def clear_and_collapse(self, row: int) -> None:
        """Remove ``row`` and shift every row above it down by one."""
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} outside board of height {self.height}")
        self.grid[1 : row + 1] = self.grid[0:row].copy()
        self.grid[0] = 0

    def footprint_is_free(self, cells: Iterable[Coordinate], exclude: AbstractSet[Coordinate] = frozenset()) -> bool:
        """True when every cell is inside the board and empty, treating cells
        in ``exclude`` (the moving piece's own footprint) as empty."""
        for x, y in cells:
            if not self.is_inside(x, y):
                return False
            if (x, y) not in exclude and self.grid[y, x] != 0:
                return False
        return True

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()
