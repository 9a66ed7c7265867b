"""Errors raised when a caller breaks the game contract."""

from .board import Cell


class GameError(Exception):
    """Base class for game contract violations."""


class InvalidMove(GameError, ValueError):
    """Target cell is out of bounds or already occupied."""

    def __init__(self, cell: Cell):
        super().__init__(f"Move is not valid: ({cell.row}, {cell.column})")
        self.cell = cell


class GameAlreadyComplete(GameError, RuntimeError):
    """No moves remain on the board."""

    def __init__(self, message: str = "Game is completed"):
        super().__init__(message)
