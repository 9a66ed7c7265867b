"""
Game session: turn order, validated moves, and the best-move query.

This is the surface the console layer talks to.
"""

from typing import List, Optional, Tuple

from .board import BOARD_SIZE, Board, Cell, Mark
from .errors import GameAlreadyComplete, InvalidMove
from .game import available_moves, is_complete, other_player, side_to_move, winner
from .minimax import MinimaxEngine


class GameSession:
    """One game: a board, the side to move, and a search cache that lives as long as the game."""

    def __init__(self):
        self.board = Board()
        self.current_player = Mark.X
        self.moves: List[Cell] = []
        self.engine = MinimaxEngine(self.board)

    def is_completed(self) -> bool:
        return is_complete(self.board)

    def winner(self) -> Optional[Mark]:
        return winner(self.board)

    def is_valid_move(self, cell: Cell) -> bool:
        return (
            0 <= cell.row < BOARD_SIZE
            and 0 <= cell.column < BOARD_SIZE
            and self.board.get(cell) == Mark.EMPTY
        )

    def perform_move(self, cell: Cell) -> None:
        """Write the current player's mark and pass the turn. Raises InvalidMove."""
        if not self.is_valid_move(cell):
            raise InvalidMove(cell)

        self.board.set(cell, self.current_player)
        self.moves.append(cell)
        self.current_player = other_player(self.current_player)

    def available_moves(self) -> List[Cell]:
        return available_moves(self.board)

    def best_move(self) -> Cell:
        """Optimal move for the current player. The board is left unchanged."""
        if not self.available_moves():
            raise GameAlreadyComplete()
        return self.engine.best_move(self.current_player)

    def scored_moves(self) -> List[Tuple[Cell, int]]:
        if not self.available_moves():
            raise GameAlreadyComplete()
        return self.engine.scored_moves(self.current_player)

    def clear_cache(self) -> None:
        self.engine.clear_cache()

    @classmethod
    def from_board(cls, board: Board, player: Optional[Mark] = None) -> "GameSession":
        """
        Start a session at an arbitrary position.

        The side to move is inferred from mark counts unless given. The move
        history of such a session starts empty.
        """
        session = cls()
        session.board.grid[:] = board.grid
        session.current_player = player if player is not None else side_to_move(board)
        return session

    @classmethod
    def from_moves(cls, moves) -> "GameSession":
        """Replay (row, column) pairs or Cells from a fresh session."""
        session = cls()
        for move in moves:
            session.perform_move(move if isinstance(move, Cell) else Cell(*move))
        return session
