"""
Evaluation functions.

Plays the engine against random and perfect opponents, and checks that the
search is consistent under cache reuse and board symmetries.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from tqdm.auto import trange

from .board import Cell, Mark
from .game import terminal_outcome
from .minimax import iter_reachable_positions
from .session import GameSession
from .symmetries import N_SYMMETRIES, apply_symmetry_board, apply_symmetry_cell

Policy = Callable[[GameSession], Cell]


@dataclass
class EvalConfig:
    """Evaluation configuration."""

    # Random seed
    seed: int = 0

    # Games vs random mover
    games: int = 100

    # Games replayed with and without cache clearing
    cache_games: int = 20
    max_opening_plies: int = 4

    # Reachable positions sampled for the symmetry check
    symmetry_positions: int = 50

    # Progress bars
    progress: bool = True


def engine_policy(session: GameSession) -> Cell:
    return session.best_move()


def random_policy(rng: random.Random) -> Policy:
    def choose(session: GameSession) -> Cell:
        return rng.choice(session.available_moves())
    return choose


def play_game(
    x_policy: Policy,
    o_policy: Policy,
    session: Optional[GameSession] = None,
) -> Tuple[Mark, List[Cell]]:
    """
    Play a game to completion.

    Returns:
        (outcome, moves) where outcome is the winning mark or Mark.EMPTY on a draw
    """
    if session is None:
        session = GameSession()

    while not session.is_completed():
        policy = x_policy if session.current_player == Mark.X else o_policy
        session.perform_move(policy(session))

    return terminal_outcome(session.board), list(session.moves)


def eval_vs_random(games: int = 100, seed: int = 0, progress: bool = False) -> Tuple[float, float, float]:
    """
    Evaluate the engine vs a uniform random mover. The engine alternates sides.

    Returns:
        (win_rate, draw_rate, loss_rate) from the engine's side
    """
    rng = random.Random(seed)
    opponent = random_policy(rng)
    wins = draws = losses = 0

    for g in trange(games, desc="vs Random", disable=not progress):
        engine_side = Mark.X if (g % 2 == 0) else Mark.O
        if engine_side == Mark.X:
            outcome, _ = play_game(engine_policy, opponent)
        else:
            outcome, _ = play_game(opponent, engine_policy)

        if outcome == Mark.EMPTY:
            draws += 1
        elif outcome == engine_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return wins / total, draws / total, losses / total


def eval_self_play() -> Dict[str, object]:
    """
    Engine vs engine from the empty board. Perfect play must end in a draw.

    Returns:
        Dict with 'outcome', 'moves', 'length'
    """
    outcome, moves = play_game(engine_policy, engine_policy)
    return {
        "outcome": outcome,
        "moves": [(m.row, m.column) for m in moves],
        "length": len(moves),
    }


def eval_cache_consistency(
    games: int = 20,
    seed: int = 0,
    max_opening_plies: int = 4,
    progress: bool = False,
) -> Dict[str, float]:
    """
    Compare a session that keeps its cache across turns with one that clears
    it before every search.

    Each game opens with a random number of random moves, then the engine
    plays both sides. Cached scores keep the depth offset of the search that
    stored them, so score agreement may drop below 1 while move agreement
    should not.

    Returns:
        Dict with 'turns', 'move_agreement', 'score_agreement'
    """
    rng = random.Random(seed)
    turns = same_move = same_scores = 0

    for _ in trange(games, desc="Cache consistency", disable=not progress):
        kept = GameSession()
        fresh = GameSession()

        for _ in range(rng.randint(0, max_opening_plies)):
            if kept.is_completed():
                break
            move = rng.choice(kept.available_moves())
            kept.perform_move(move)
            fresh.perform_move(move)

        while not kept.is_completed():
            fresh.clear_cache()
            kept_scores = kept.scored_moves()
            fresh_scores = fresh.scored_moves()
            kept_move = kept.best_move()
            fresh.clear_cache()
            fresh_move = fresh.best_move()

            turns += 1
            same_move += int(kept_move == fresh_move)
            same_scores += int(kept_scores == fresh_scores)

            kept.perform_move(kept_move)
            fresh.perform_move(kept_move)

    return {
        "turns": turns,
        "move_agreement": same_move / turns if turns else float("nan"),
        "score_agreement": same_scores / turns if turns else float("nan"),
    }


def scores_match_under_symmetry(session: GameSession, sym_id: int) -> bool:
    """Check that the scored moves of a position match those of its symmetric image."""
    base = session.scored_moves()
    image = GameSession.from_board(apply_symmetry_board(session.board, sym_id), session.current_player)
    image_scores = dict(image.scored_moves())
    return all(image_scores.get(apply_symmetry_cell(cell, sym_id)) == value for cell, value in base)


def eval_symmetry_consistency(positions: int = 50, seed: int = 0, progress: bool = False) -> Dict[str, float]:
    """
    Check score invariance under the 8 board symmetries on sampled
    non-terminal reachable positions. Each search starts from an empty cache.

    Returns:
        Dict with 'positions', 'checks', 'agreement'
    """
    rng = random.Random(seed)
    candidates = [(b, p) for b, p in iter_reachable_positions() if terminal_outcome(b) is None]
    sample = rng.sample(candidates, min(positions, len(candidates)))

    checks = agree = 0
    for i in trange(len(sample), desc="Symmetry", disable=not progress):
        board, player = sample[i]
        for sym_id in range(1, N_SYMMETRIES):
            session = GameSession.from_board(board, player)
            checks += 1
            agree += int(scores_match_under_symmetry(session, sym_id))

    return {
        "positions": len(sample),
        "checks": checks,
        "agreement": agree / checks if checks else float("nan"),
    }


def run_all(config: EvalConfig) -> Dict[str, object]:
    """Run every evaluation with one config."""
    w, d, l = eval_vs_random(config.games, seed=config.seed, progress=config.progress)
    return {
        "random_w": w,
        "random_d": d,
        "random_l": l,
        "self_play": eval_self_play(),
        "cache": eval_cache_consistency(
            config.cache_games,
            seed=config.seed,
            max_opening_plies=config.max_opening_plies,
            progress=config.progress,
        ),
        "symmetry": eval_symmetry_consistency(
            config.symmetry_positions, seed=config.seed, progress=config.progress
        ),
    }
