"""Command-line entry point that runs the game."""

from __future__ import annotations

import argparse

from .game import Game
from .graphics import Graphics


def main(argv=None):
    """Run the game until the window is closed."""
    parser = argparse.ArgumentParser(prog="superchim", description="Super Chim game.")
    parser.add_argument(
        "--assets", default=".", help="directory holding image/ and audio/"
    )
    parser.add_argument(
        "--score", default="score.txt", help="file that keeps the best score"
    )
    args = parser.parse_args(argv)

    game = Game(Graphics(args.assets), args.score)
    game.init()
    try:
        while not game.should_quit:
            game.prepare()
            if game.playing:
                game.play()
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())