#!/usr/bin/env python3
"""Generate a Minesweeper board and print it."""
import argparse
import logging

from minesweeper import Difficulty, Game, Grid, CellKind, render_board


def demo(width: int = 10, height: int = 20, difficulty: str = "easy",
         seed: int = None) -> None:
    """Play a game and dump the populated board."""
    game = Game(Grid(width, height), seed=seed)
    game.set_difficulty(difficulty)
    game.play()

    bombs = game.board.count(CellKind.BOMB)
    print(f"Board: {width}x{height} with {bombs} bombs ({game.difficulty.value})\n")
    print(render_board(game.board))


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--width", type=int, default=10, help="Grid width")
    parser.add_argument("--height", type=int, default=20, help="Grid height")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        default="easy",
        help="Bomb density",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    demo(width=args.width, height=args.height,
         difficulty=args.difficulty, seed=args.seed)
