"""Command-line interface for the Rock-Paper-Scissors game."""
from __future__ import annotations
import argparse
import functools
import logging
import random
from typing import Optional

from . import settings
from .console import get_player_move
from .game import ScoreState, get_random_computer_move
from .session import play_game
from .settings import LOG_LEVELS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="rps",
        description="Play Rock-Paper-Scissors against the computer. Press Ctrl-D to stop.",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's moves (default: $RPS_SEED)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level, written to stderr (default: $RPS_LOG_LEVEL or WARNING)",
    )
    args = p.parse_args(argv)

    if args.seed is None:
        try:
            args.seed = settings.parse_seed(settings.SEED)
        except ValueError:
            p.error(f"RPS_SEED must be an integer, got {settings.SEED!r}")
    if args.log_level is None:
        if settings.LOG_LEVEL not in LOG_LEVELS:
            p.error(f"RPS_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {settings.LOG_LEVEL!r}")
        args.log_level = settings.LOG_LEVEL
    return args


def run_session(seed: Optional[int] = None) -> ScoreState:
    rng = random.Random(seed)
    computer_move = functools.partial(get_random_computer_move, rng.random)
    return play_game(get_player_move, computer_move)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger(__name__).debug("starting session, seed=%r", args.seed)

    score = run_session(args.seed)
    print(f"\nFinal score: you {score.player_score} - computer {score.computer_score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
