from __future__ import annotations

import numpy as np
import pytest

from unictris.game import Board


@pytest.fixture
def board() -> Board:
    return Board(10, 20)


def test_new_board_is_empty(board):
    assert board.grid.shape == (20, 10)
    assert not board.grid.any()


def test_get_set(board):
    board.set(3, 7, 5)
    assert board.get(3, 7) == 5
    assert board.grid[7, 3] == 5


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
def test_out_of_range_raises(board, x, y):
    with pytest.raises(IndexError):
        board.get(x, y)
    with pytest.raises(IndexError):
        board.set(x, y, 1)


def test_is_filled(board):
    for x in range(9):
        board.set(x, 19, 1)
    assert not board.is_filled(19)
    board.set(9, 19, 7)
    assert board.is_filled(19)
    assert not board.is_filled(18)


def test_clear_and_collapse_shifts_rows_above(board):
    for y in range(20):
        board.set(0, y, y % 7 + 1)
    before = board.clone_state()

    board.clear_and_collapse(10)

    assert not board.grid[0].any()
    np.testing.assert_array_equal(board.grid[1:11], before[0:10])
    np.testing.assert_array_equal(board.grid[11:], before[11:])


def test_clear_and_collapse_top_row(board):
    board.grid[0] = 3
    board.grid[1] = 4
    board.clear_and_collapse(0)
    assert not board.grid[0].any()
    assert (board.grid[1] == 4).all()


def test_footprint_is_free_respects_exclusion(board):
    board.set(4, 4, 2)
    assert board.footprint_is_free([(3, 3), (3, 4)])
    assert not board.footprint_is_free([(4, 4)])
    assert board.footprint_is_free([(4, 4)], exclude={(4, 4)})
    assert not board.footprint_is_free([(10, 4)])
    assert not board.footprint_is_free([(0, 20)])


def test_clone_and_reset(board):
    board.set(1, 1, 1)
    copy = board.clone_state()
    board.reset()
    assert copy[1, 1] == 1
    assert board.get(1, 1) == 0
