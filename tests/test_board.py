import numpy as np
import pytest

from tictactoe import ALL_CELLS, LINES, Board, Cell, Mark, build_lines


def test_all_cells_row_major():
    assert len(ALL_CELLS) == 9
    assert ALL_CELLS[0] == Cell(0, 0)
    assert ALL_CELLS[1] == Cell(0, 1)
    assert ALL_CELLS[3] == Cell(1, 0)
    assert ALL_CELLS[-1] == Cell(2, 2)
    assert [c.index for c in ALL_CELLS] == list(range(9))


def test_lines_are_rows_columns_diagonals():
    assert len(LINES) == 8
    assert all(len(line) == 3 for line in LINES)
    assert LINES[0] == (Cell(0, 0), Cell(0, 1), Cell(0, 2))
    assert LINES[3] == (Cell(0, 0), Cell(1, 0), Cell(2, 0))
    assert LINES[6] == (Cell(0, 0), Cell(1, 1), Cell(2, 2))
    assert LINES[7] == (Cell(0, 2), Cell(1, 1), Cell(2, 0))
    assert build_lines() == LINES


def test_lines_are_immutable():
    assert isinstance(LINES, tuple)
    with pytest.raises(TypeError):
        LINES[0] = LINES[1]


def test_cell_equality_by_coordinates():
    assert Cell(1, 2) == Cell(1, 2)
    assert Cell(1, 2) != Cell(2, 1)
    assert Cell.from_index(5) == Cell(1, 2)
    assert len({Cell(0, 0), Cell(0, 0)}) == 1


def test_get_set_and_full():
    board = Board()
    assert board.get(Cell(1, 1)) == Mark.EMPTY
    assert not board.is_full()

    board.set(Cell(1, 1), Mark.X)
    assert board.get(Cell(1, 1)) == Mark.X
    assert board.count(Mark.X) == 1
    assert board.count(Mark.EMPTY) == 8

    for cell in board.all_cells():
        if board.get(cell) == Mark.EMPTY:
            board.set(cell, Mark.O)
    assert board.is_full()


def test_key_is_row_major_symbols():
    board = Board.from_rows(["XOX", "OXO", "OX."])
    assert board.key() == "XOXOXOOX."
    assert board.get(Cell(0, 1)) == Mark.O
    assert board.get(Cell(2, 2)) == Mark.EMPTY


def test_key_round_trip():
    board = Board()
    board.set(Cell(0, 2), Mark.X)
    board.set(Cell(2, 0), Mark.O)
    restored = Board.from_key(board.key())
    assert restored == board
    assert restored.marks() == board.marks()
    assert np.array_equal(restored.grid, board.grid)


def test_from_key_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_key("XO")
    with pytest.raises(ValueError):
        Board.from_key("XOX?XOOX.")


def test_copy_is_independent():
    board = Board.from_rows(["X..", "...", "..."])
    other = board.copy()
    other.set(Cell(1, 1), Mark.O)
    assert board.get(Cell(1, 1)) == Mark.EMPTY
    assert board != other


def test_mark_symbols():
    assert Mark.X.symbol == "X"
    assert Mark.O.symbol == "O"
    assert Mark.EMPTY.symbol == "."
    assert Mark.from_symbol("O") is Mark.O
    assert str(Mark.X) == "X"
