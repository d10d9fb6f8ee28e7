"""
Main script for Tic Tac Toe.

This script ties together:
- Logic (board, participants, AI, match engine)
- Console UI (board drawing, prompts)

Run this script to play a set of Tic Tac Toe against the computer!
"""

import argparse
import logging

from logic.config import GameConfig
from logic.match_engine import MatchEngine
from ui import ConsoleUI


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tic Tac Toe - first to win the set")
    parser.add_argument(
        "--first",
        choices=["human", "computer", "choose"],
        default=GameConfig.FIRST_MOVER,
        help="Who moves first in every round (default: ask)"
    )
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        default=GameConfig.DIFFICULTY,
        help="Computer strength"
    )
    parser.add_argument(
        "--games",
        type=positive_int,
        default=GameConfig.GAMES_IN_SET,
        help="Round wins needed to take the set"
    )
    parser.add_argument(
        "--name",
        default=GameConfig.HUMAN_NAME,
        help="Your name on the score table"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the terminal between moves"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Python logging level"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        FIRST_MOVER=args.first,
        DIFFICULTY=args.difficulty,
        GAMES_IN_SET=args.games,
        HUMAN_NAME=args.name,
        RANDOM_SEED=args.seed,
        CLEAR_SCREEN=not args.no_clear,
    )


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("tictactoe")

    config = config_from_args(args)
    log.debug("Starting match with %r", config)

    ui = ConsoleUI(clear=config.CLEAR_SCREEN)
    engine = MatchEngine(ui, config)

    try:
        engine.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        print("Goodbye!")


if __name__ == "__main__":
    main()
