"""
TicTacToe game rules: outcome detection and move enumeration.

All functions are pure reads of the board.
"""

from typing import List, Optional, Set

from .board import LINE_INDEX, Board, Cell, Mark

WIN_SUM = 3


def winners_set(board: Board) -> Set[Mark]:
    """Return set of marks owning a complete line (both only on illegal boards)."""
    sums = board.flat()[LINE_INDEX].sum(axis=1)
    wins = set()
    if (sums == WIN_SUM).any():
        wins.add(Mark.X)
    if (sums == -WIN_SUM).any():
        wins.add(Mark.O)
    return wins


def winner(board: Board) -> Optional[Mark]:
    """X if X owns a line, else O if O owns one, else None."""
    sums = board.flat()[LINE_INDEX].sum(axis=1)
    if (sums == WIN_SUM).any():
        return Mark.X
    if (sums == -WIN_SUM).any():
        return Mark.O
    return None


def is_complete(board: Board) -> bool:
    return winner(board) is not None or board.is_full()


def terminal_outcome(board: Board) -> Optional[Mark]:
    """
    Returns:
        the winning mark, Mark.EMPTY for a draw, or None while in progress
    """
    who = winner(board)
    if who is not None:
        return who
    if board.is_full():
        return Mark.EMPTY
    return None


def available_moves(board: Board) -> List[Cell]:
    """Empty cells in row-major order (the search tie-break order)."""
    return [cell for cell in board.all_cells() if board.get(cell) == Mark.EMPTY]


def other_player(player: Mark) -> Mark:
    return Mark.O if player == Mark.X else Mark.X


def side_to_move(board: Board) -> Mark:
    """Infer side to move from mark counts (X plays first)."""
    return Mark.X if board.count(Mark.X) == board.count(Mark.O) else Mark.O
