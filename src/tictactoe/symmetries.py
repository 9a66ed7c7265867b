"""
D4 symmetries of the TicTacToe board (8 transforms).

Rotations: 0°, 90°, 180°, 270°
Reflections: horizontal, vertical, main diagonal, anti-diagonal
"""

from typing import List

import numpy as np

from .board import BOARD_SIZE, Board, Cell

N_SYMMETRIES = 8


def _transform(r: int, c: int, k: int):
    """(row, col) image of a cell under transform k."""
    n = BOARD_SIZE - 1
    if k == 0:   return r, c                # identity
    elif k == 1: return c, n - r            # rotate 90
    elif k == 2: return n - r, n - c        # rotate 180
    elif k == 3: return n - c, r            # rotate 270
    elif k == 4: return r, n - c            # reflect horizontal
    elif k == 5: return n - r, c            # reflect vertical
    elif k == 6: return c, r                # reflect main diag
    else:        return n - c, n - r        # reflect anti-diag


def _build_symmetry_maps() -> np.ndarray:
    """
    Build 8 permutation maps, shape (8, 9).

    maps[k][dst] is the source index that lands on dst under transform k.
    """
    maps = np.zeros((N_SYMMETRIES, BOARD_SIZE * BOARD_SIZE), dtype=np.intp)
    for k in range(N_SYMMETRIES):
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                rt, ct = _transform(r, c, k)
                maps[k, rt * BOARD_SIZE + ct] = r * BOARD_SIZE + c
    maps.setflags(write=False)
    return maps


# Pre-computed symmetry maps
SYM_MAPS = _build_symmetry_maps()


def apply_symmetry_board(board: Board, sym_id: int) -> Board:
    """Return a new board transformed by symmetry sym_id (0-7)."""
    out = Board()
    out.flat()[:] = board.flat()[SYM_MAPS[sym_id]]
    return out


def apply_symmetry_cell(cell: Cell, sym_id: int) -> Cell:
    """Where `cell` lands under symmetry sym_id."""
    return Cell(*_transform(cell.row, cell.column, sym_id))


def get_all_symmetries(board: Board) -> List[Board]:
    """Return all 8 symmetric versions of a board."""
    return [apply_symmetry_board(board, k) for k in range(N_SYMMETRIES)]
