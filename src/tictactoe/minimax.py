"""
Exact minimax solver for TicTacToe with caching.

Scores are from X's point of view:
  - X wins:  10 - depth
  - O wins:  depth - 10
  - draw:    0

depth counts plies from the root of the current top-level search, so faster
wins and slower losses score better.

The cache is keyed on board content only. A cached score keeps the depth
offset of the search that first computed it, so scores (not move choices)
can differ between a long-lived engine and a fresh one.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from .board import Board, Cell, Mark
from .errors import GameAlreadyComplete
from .game import available_moves, other_player, winner

WIN_SCORE = 10


@contextmanager
def speculative_move(board: Board, cell: Cell, mark: Mark) -> Iterator[Board]:
    """Place a mark for the duration of the block, restoring the prior mark on exit."""
    prior = board.get(cell)
    board.set(cell, mark)
    try:
        yield board
    finally:
        board.set(cell, prior)


class MinimaxEngine:
    """
    Exhaustive minimax over a shared board.

    The engine searches the board it was given in place; every speculative
    move is undone before control returns to the caller.
    """

    def __init__(self, board: Board):
        self.board = board
        # Cache: board key -> score
        self.cache: Dict[str, int] = {}

    def terminal_score(self, depth: int) -> Optional[int]:
        """Score of a finished position at the given depth, None if still in progress."""
        who = winner(self.board)
        if who == Mark.X:
            return WIN_SCORE - depth
        if who == Mark.O:
            return depth - WIN_SCORE
        if self.board.is_full():
            return 0
        return None

    def evaluate(self, depth: int, player: Mark) -> int:
        """
        Best achievable score for the current board with `player` to move.

        Args:
            depth: plies applied since the top-level search began
            player: side to move (X maximizes, O minimizes)
        """
        terminal = self.terminal_score(depth)
        if terminal is not None:
            return terminal

        key = self.board.key()
        if key in self.cache:
            return self.cache[key]

        opponent = other_player(player)
        child_values = []
        for move in available_moves(self.board):
            with speculative_move(self.board, move, player):
                child_values.append(self.evaluate(depth + 1, opponent))

        value = max(child_values) if player == Mark.X else min(child_values)
        self.cache[key] = value
        return value

    def scored_moves(self, player: Mark) -> List[Tuple[Cell, int]]:
        """Every available move with its score, in row-major order."""
        opponent = other_player(player)
        scored = []
        for move in available_moves(self.board):
            with speculative_move(self.board, move, player):
                scored.append((move, self.evaluate(0, opponent)))
        return scored

    def best_move(self, player: Mark) -> Cell:
        """First maximal move for X, first minimal move for O."""
        scored = self.scored_moves(player)
        if not scored:
            raise GameAlreadyComplete()

        best_cell, best_value = scored[0]
        for cell, value in scored[1:]:
            if (player == Mark.X and value > best_value) or (player == Mark.O and value < best_value):
                best_cell, best_value = cell, value
        return best_cell

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_size(self) -> int:
        return len(self.cache)


def iter_reachable_positions() -> Iterator[Tuple[Board, Mark]]:
    """
    Iterate over every position reachable from the empty board by legal play.

    Terminal positions are included; play stops at a win or a full board.

    Yields:
        (board, player_to_move) with a fresh Board copy per position
    """
    board = Board()
    seen = set()

    def walk(player: Mark) -> Iterator[Tuple[Board, Mark]]:
        key = board.key()
        if key in seen:
            return
        seen.add(key)
        yield board.copy(), player

        if winner(board) is not None:
            return
        for move in available_moves(board):
            with speculative_move(board, move, player):
                yield from walk(other_player(player))

    yield from walk(Mark.X)
