"""
Perfect TicTacToe - exhaustive minimax with a position cache.

The engine searches the full game tree of 3x3 TicTacToe and picks the
optimal move for the side to move, preferring faster wins and slower losses.
"""

from .board import Mark, Cell, Board, LINES, ALL_CELLS, build_lines
from .game import winner, winners_set, is_complete, terminal_outcome, available_moves, other_player
from .errors import GameError, InvalidMove, GameAlreadyComplete
from .minimax import MinimaxEngine, speculative_move, iter_reachable_positions
from .session import GameSession
from .symmetries import apply_symmetry_board, apply_symmetry_cell, get_all_symmetries, SYM_MAPS
from .eval import (
    EvalConfig,
    play_game as play_policies,
    eval_vs_random,
    eval_self_play,
    eval_cache_consistency,
    eval_symmetry_consistency,
)
from .console import (
    UserPlayer,
    parse_user_player,
    parse_move,
    render_board,
    result_message,
    prompt_user_player,
    play_game,
)

__version__ = "0.1.0"
__all__ = [
    "Mark",
    "Cell",
    "Board",
    "LINES",
    "ALL_CELLS",
    "build_lines",
    "winner",
    "winners_set",
    "is_complete",
    "terminal_outcome",
    "available_moves",
    "other_player",
    "GameError",
    "InvalidMove",
    "GameAlreadyComplete",
    "MinimaxEngine",
    "speculative_move",
    "iter_reachable_positions",
    "GameSession",
    "apply_symmetry_board",
    "apply_symmetry_cell",
    "get_all_symmetries",
    "SYM_MAPS",
    "EvalConfig",
    "play_policies",
    "eval_vs_random",
    "eval_self_play",
    "eval_cache_consistency",
    "eval_symmetry_consistency",
    "UserPlayer",
    "parse_user_player",
    "parse_move",
    "render_board",
    "result_message",
    "prompt_user_player",
    "play_game",
]
