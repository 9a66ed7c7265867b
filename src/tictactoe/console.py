"""
Console play: mode selection, move parsing, board rendering, and the game loop.

Rendering uses ' ' for empty cells:

    X | O |
      | X |
      |   | O
"""

import re
from enum import Enum
from typing import Callable, Optional

from .board import Board, Cell, Mark
from .session import GameSession

_MOVE_SEPARATORS = re.compile(r"[\s,;]+")


class UserPlayer(Enum):
    """Which side(s) the human plays."""

    O = "O"
    X = "X"
    NONE = "None"
    BOTH = "Both"


def parse_user_player(text: Optional[str]) -> Optional[UserPlayer]:
    if text is None:
        return None
    text = text.strip().lower()
    for mode in UserPlayer:
        if mode.value.lower() == text:
            return mode
    return None


def parse_move(text: Optional[str]) -> Optional[Cell]:
    """Parse "row column" (separated by spaces, tabs, ',' or ';'). None if malformed."""
    if text is None:
        return None
    parts = [p for p in _MOVE_SEPARATORS.split(text.strip()) if p]
    if len(parts) != 2:
        return None
    try:
        return Cell(int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def render_board(board: Board) -> str:
    symbols = {Mark.EMPTY: " ", Mark.X: "X", Mark.O: "O"}
    lines = []
    for row in range(board.grid.shape[0]):
        lines.append(" | ".join(symbols[board.get(Cell(row, col))] for col in range(board.grid.shape[1])))
    return "\n".join(lines)


def result_message(winner: Optional[Mark]) -> str:
    if winner is None:
        return "Draw!"
    return f"{winner.name} won!"


def prompt_user_player(read: Callable[[str], str] = input) -> UserPlayer:
    """Ask until a valid mode is entered. EOFError propagates."""
    options = ", or ".join(mode.value for mode in (UserPlayer.X, UserPlayer.O, UserPlayer.NONE, UserPlayer.BOTH))
    while True:
        mode = parse_user_player(read(f"Print {options}: "))
        if mode is not None:
            return mode


def prompt_move(session: GameSession, read: Callable[[str], str] = input) -> Cell:
    """Ask until a well-formed, valid move is entered. EOFError propagates."""
    while True:
        move = parse_move(read("Enter row and column (for example, 0 2): "))
        if move is not None and session.is_valid_move(move):
            return move


def play_game(
    session: GameSession,
    mode: UserPlayer,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> Optional[Mark]:
    """
    Run a game to completion, alternating human and engine turns per `mode`.

    Returns:
        the winner, or None on a draw
    """
    is_user_move = mode in (UserPlayer.X, UserPlayer.BOTH)

    while not session.is_completed():
        write(render_board(session.board) + "\n")

        move = prompt_move(session, read) if is_user_move else session.best_move()
        session.perform_move(move)

        is_user_move = (mode != UserPlayer.NONE and not is_user_move) or mode == UserPlayer.BOTH

    write(render_board(session.board) + "\n")
    winner = session.winner()
    write(result_message(winner))
    return winner
