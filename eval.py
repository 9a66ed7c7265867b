#!/usr/bin/env python3
"""
Evaluate the TicTacToe minimax engine.

Usage:
    python eval.py
    python eval.py --games 500 --seed 1
    python eval.py --skip-symmetry --no-progress
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import (
    EvalConfig,
    eval_vs_random,
    eval_self_play,
    eval_cache_consistency,
    eval_symmetry_consistency,
    Mark,
)


def main():
    parser = argparse.ArgumentParser(description="Evaluate TicTacToe minimax engine")
    parser.add_argument("--games", type=int, default=100, help="Games vs random mover")
    parser.add_argument("--cache-games", type=int, default=20, help="Games for the cache consistency check")
    parser.add_argument("--symmetry-positions", type=int, default=50, help="Positions for the symmetry check")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--skip-symmetry", action="store_true", help="Skip the symmetry check")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")

    args = parser.parse_args()

    config = EvalConfig(
        seed=args.seed,
        games=args.games,
        cache_games=args.cache_games,
        symmetry_positions=args.symmetry_positions,
        progress=not args.no_progress,
    )

    print("\n=== Evaluation ===")

    # vs Random
    print(f"\nvs Random ({config.games} games)...")
    w, d, l = eval_vs_random(config.games, seed=config.seed, progress=config.progress)
    print(f"  Wins:   {w:.2%}")
    print(f"  Draws:  {d:.2%}")
    print(f"  Losses: {l:.2%}")

    # Self-play
    print("\nSelf-play...")
    sp = eval_self_play()
    result = "Draw" if sp["outcome"] == Mark.EMPTY else f"{sp['outcome'].name} won"
    print(f"  Result: {result} in {sp['length']} moves")
    print(f"  Moves:  {sp['moves']}")

    # Cache reuse
    print(f"\nCache consistency ({config.cache_games} games)...")
    cc = eval_cache_consistency(
        config.cache_games,
        seed=config.seed,
        max_opening_plies=config.max_opening_plies,
        progress=config.progress,
    )
    print(f"  Turns:           {cc['turns']}")
    print(f"  Move agreement:  {cc['move_agreement']:.2%}")
    print(f"  Score agreement: {cc['score_agreement']:.2%}")

    # Symmetry
    if not args.skip_symmetry:
        print(f"\nSymmetry consistency ({config.symmetry_positions} positions)...")
        sc = eval_symmetry_consistency(config.symmetry_positions, seed=config.seed, progress=config.progress)
        print(f"  Checks:    {sc['checks']}")
        print(f"  Agreement: {sc['agreement']:.2%}")

    if l > 0 or cc["move_agreement"] < 1.0:
        print("\n✗ Engine check failed")
        sys.exit(1)
    print("\n✓ Engine checks passed")


if __name__ == "__main__":
    main()
