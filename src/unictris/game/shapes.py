from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple

import numpy as np


Cell = Tuple[int, int]
Cells = Tuple[Cell, Cell, Cell, Cell]

BLOCK_SIZE = 4
ROTATIONS = 4


class TetrominoKind(IntEnum):
    S = 0
    Z = 1
    O = 2
    J = 3
    T = 4
    I = 5
    L = 6


# Raw cells inside the 4x4 block at rotation 0
BASE_CELLS: Dict[TetrominoKind, Cells] = {
    TetrominoKind.S: ((1, 0), (1, 1), (0, 1), (0, 2)),
    TetrominoKind.Z: ((0, 0), (0, 1), (1, 1), (1, 2)),
    TetrominoKind.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    TetrominoKind.J: ((0, 0), (1, 0), (2, 0), (2, 1)),
    TetrominoKind.T: ((1, 0), (1, 1), (1, 2), (0, 1)),
    TetrominoKind.I: ((0, 0), (0, 1), (0, 2), (0, 3)),
    TetrominoKind.L: ((0, 1), (1, 1), (2, 1), (2, 0)),
}


def _rotate(cells: np.ndarray, rotation: int) -> np.ndarray:
    """Rotate raw block cells clockwise by ``rotation`` quarter turns and
    shift them back so the bounding box touches the origin."""
    last = BLOCK_SIZE - 1
    x, y = cells[:, 0], cells[:, 1]
    if rotation == 0:
        rotated = (x, y)
    elif rotation == 1:
        rotated = (last - y, x)
    elif rotation == 2:
        rotated = (last - x, last - y)
    else:
        rotated = (y, last - x)
    out = np.stack(rotated, axis=1)
    return out - out.min(axis=0)


def _build_table() -> Dict[TetrominoKind, Tuple[Cells, ...]]:
    table: Dict[TetrominoKind, Tuple[Cells, ...]] = {}
    for kind, base in BASE_CELLS.items():
        raw = np.array(base, dtype=np.int8)
        table[kind] = tuple(
            tuple((int(x), int(y)) for x, y in _rotate(raw, r)) for r in range(ROTATIONS)
        )
    return table


SHAPE_TABLE = _build_table()


def coor(kind: int, rotation: int) -> Cells:
    """Return the four normalized (x, y) cells of ``kind`` at ``rotation``."""
    if not 0 <= rotation < ROTATIONS:
        raise IndexError(f"rotation {rotation} out of range [0, {ROTATIONS})")
    return SHAPE_TABLE[TetrominoKind(kind)][rotation]


def dim(kind: int, rotation: int) -> Tuple[int, int]:
    """Return (width, height) of the shape's bounding box."""
    cells = coor(kind, rotation)
    width = max(x for x, _ in cells) + 1
    height = max(y for _, y in cells) + 1
    return width, height


def format_shape(kind: int) -> str:
    lines = []
    for r in range(ROTATIONS):
        w, h = dim(kind, r)
        lines.append(f"Shape {r} dim: {w}x{h}")
        marks = [["O"] * BLOCK_SIZE for _ in range(BLOCK_SIZE)]
        for x, y in coor(kind, r):
            marks[y][x] = "X"
        lines.extend(" ".join(row) for row in marks)
    return "\n".join(lines)


@dataclass(frozen=True)
class Shape:
    kind: TetrominoKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", TetrominoKind(self.kind))

    def coor(self, rotation: int) -> Cells:
        return coor(self.kind, rotation)

    def dim(self, rotation: int) -> Tuple[int, int]:
        return dim(self.kind, rotation)

    @property
    def paint_value(self) -> int:
        return int(self.kind) + 1

    def __str__(self) -> str:
        return format_shape(self.kind)


if __name__ == "__main__":  # pragma: no cover
    for kind in TetrominoKind:
        print(f"\n{kind.name} ({int(kind)}):")
        print(Shape(kind))
