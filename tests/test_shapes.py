from __future__ import annotations

import numpy as np
import pytest

from unictris.game import Shape, TetrominoKind, coor, dim, format_shape
from unictris.game.shapes import ROTATIONS, _rotate


ALL = [(kind, r) for kind in range(len(TetrominoKind)) for r in range(ROTATIONS)]


def _connected(cells) -> bool:
    cells = set(cells)
    start = next(iter(cells))
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if n in cells and n not in seen:
                seen.add(n)
                stack.append(n)
    return seen == cells


@pytest.mark.parametrize("kind,rotation", ALL)
def test_cells_are_normalized_tetromino(kind, rotation):
    cells = coor(kind, rotation)
    assert len(cells) == 4
    assert len(set(cells)) == 4
    assert all(0 <= x < 4 and 0 <= y < 4 for x, y in cells)
    assert min(x for x, _ in cells) == 0
    assert min(y for _, y in cells) == 0
    assert _connected(cells)


@pytest.mark.parametrize("kind,rotation", ALL)
def test_dim_matches_bounding_box(kind, rotation):
    cells = coor(kind, rotation)
    assert dim(kind, rotation) == (
        max(x for x, _ in cells) + 1,
        max(y for _, y in cells) + 1,
    )


@pytest.mark.parametrize("kind", range(len(TetrominoKind)))
def test_quarter_turn_steps_through_table_and_cycles(kind):
    cells = np.array(coor(kind, 0))
    for r in range(1, ROTATIONS + 1):
        cells = _rotate(cells, 1)
        assert set(map(tuple, cells.tolist())) == set(coor(kind, r % ROTATIONS))
    assert set(map(tuple, cells.tolist())) == set(coor(kind, 0))


def test_kinds_are_seven_distinct_polyominoes():
    orbits = {frozenset(frozenset(coor(kind, r)) for r in range(ROTATIONS)) for kind in range(7)}
    assert len(orbits) == 7


def test_known_shapes():
    square = {(0, 0), (1, 0), (0, 1), (1, 1)}
    for r in range(ROTATIONS):
        assert set(coor(TetrominoKind.O, r)) == square
    assert set(coor(TetrominoKind.I, 0)) == {(0, 0), (0, 1), (0, 2), (0, 3)}
    assert set(coor(TetrominoKind.I, 1)) == {(0, 0), (1, 0), (2, 0), (3, 0)}
    assert dim(TetrominoKind.J, 0) == (3, 2)
    assert dim(TetrominoKind.J, 1) == (2, 3)


def test_out_of_range_fails_fast():
    with pytest.raises(ValueError):
        coor(7, 0)
    with pytest.raises(IndexError):
        coor(0, 4)
    with pytest.raises(IndexError):
        coor(0, -1)


def test_shape_value_object():
    shape = Shape(4)
    assert shape.kind is TetrominoKind.T
    assert shape.paint_value == 5
    assert shape.coor(2) == coor(4, 2)
    assert shape.dim(3) == dim(4, 3)


def test_format_shape_lists_every_rotation():
    text = format_shape(TetrominoKind.J)
    lines = text.splitlines()
    assert len(lines) == ROTATIONS * 5
    assert lines[0] == "Shape 0 dim: 3x2"
    assert lines[1] == "X X X O"
    assert lines[2] == "O O X O"
    assert str(Shape(TetrominoKind.J)) == text
