# tests/test_sudoku_grid.py
import pytest

from models.sudoku_grid import BLANK, SudokuGrid


def make_clue():
    clue = [[0] * 9 for _ in range(9)]
    clue[0][0] = 5
    clue[4][7] = 3
    return clue


def test_solution_starts_as_copy_of_clue():
    clue = make_clue()
    grid = SudokuGrid(clue)
    assert grid.snapshot() == clue
    assert grid.clue[0][0] == 5
    # The caller's list is not shared with the grid
    clue[1][1] = 9
    assert grid.get(1, 1) == BLANK


def test_clue_is_immutable():
    grid = SudokuGrid(make_clue())
    with pytest.raises(TypeError):
        grid.clue[0][0] = 1


def test_set_and_clear_blank_cell():
    grid = SudokuGrid(make_clue())
    grid.set(2, 3, 7)
    assert grid.get(2, 3) == 7
    assert not grid.is_blank(2, 3)
    grid.clear(2, 3)
    assert grid.is_blank(2, 3)


def test_writing_over_clue_is_rejected():
    grid = SudokuGrid(make_clue())
    assert grid.is_clue(4, 7)
    with pytest.raises(ValueError):
        grid.set(4, 7, 1)
    assert grid.get(4, 7) == 3


def test_is_full():
    grid = SudokuGrid([[1] * 9 for _ in range(9)])
    assert grid.is_full()
    assert not SudokuGrid(make_clue()).is_full()


def test_snapshot_is_independent():
    grid = SudokuGrid(make_clue())
    snap = grid.snapshot()
    snap[3][3] = 4
    assert grid.get(3, 3) == BLANK


@pytest.mark.parametrize("rows", [
    [[0] * 9 for _ in range(8)],
    [[0] * 9 for _ in range(8)] + [[0] * 8],
])
def test_wrong_shape_is_rejected(rows):
    with pytest.raises(ValueError):
        SudokuGrid(rows)
