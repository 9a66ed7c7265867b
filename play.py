#!/usr/bin/env python3
"""
Play TicTacToe in the console against the minimax engine.

Usage:
    python play.py                 # asks which side you play
    python play.py --mode X        # you play X, the engine plays O
    python play.py --mode None     # engine vs engine
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictactoe import GameSession, UserPlayer, parse_user_player, play_game, prompt_user_player


def main():
    parser = argparse.ArgumentParser(description="Play TicTacToe against the minimax engine")
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=[mode.value for mode in UserPlayer],
        help="Side played by the human (X, O, None, Both)",
    )

    args = parser.parse_args()

    try:
        mode = parse_user_player(args.mode) if args.mode else prompt_user_player()
        play_game(GameSession(), mode)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")


if __name__ == "__main__":
    main()
