"""Core game logic for Rock-Paper-Scissors."""
from __future__ import annotations
import functools
import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Iterable, Optional, Union

logger = logging.getLogger(__name__)


class Choice(Enum):
    ROCK = "ROCK"
    PAPER = "PAPER"
    SCISSORS = "SCISSORS"


class Outcome(Enum):
    """Result of a round, always from the player's point of view."""
    WIN = "WIN"
    DRAW = "DRAW"
    LOSS = "LOSS"


class Cancelled:
    """Returned in place of a move or a round when the player cancels."""

    _instance: Optional["Cancelled"] = None

    def __new__(cls) -> "Cancelled":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCELLED"


CANCELLED = Cancelled()


class UnsupportedChoiceError(RuntimeError):
    """Raised when the random source maps outside the three move buckets."""

    def __init__(self, index: int):
        super().__init__(f"Unsupported choice: {index}")
        self.index = index


@dataclass(frozen=True)
class RoundResult:
    player_move: Choice
    computer_move: Choice
    outcome: Outcome


@dataclass(frozen=True)
class ScoreState:
    """Running score of a session. Replaced, never mutated, after each round."""
    player_score: int = 0
    computer_score: int = 0


PlayerMove = Union[Choice, Cancelled]
RoundOutcome = Union[RoundResult, Cancelled]

# index -> move for the three equal buckets of [0, 1)
MOVE_BUCKETS = (Choice.ROCK, Choice.PAPER, Choice.SCISSORS)

MOVE_TOKENS = {
    "r": Choice.ROCK,
    "rock": Choice.ROCK,
    "p": Choice.PAPER,
    "paper": Choice.PAPER,
    "s": Choice.SCISSORS,
    "scissors": Choice.SCISSORS,
}

# winner -> the move it beats
BEATS = {
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
    Choice.ROCK: Choice.SCISSORS,
}


def get_random_computer_move(rng: Callable[[], float] = random.random) -> Choice:
    """Return a uniformly random move for the computer.

    Args:
      rng: source of floats in [0, 1); ``random.random`` unless a caller
        injects a seeded or fake one.

    Raises:
      UnsupportedChoiceError: if ``rng() * 3`` truncated toward zero gives an
        index outside {0, 1, 2}. A value in (-1/3, 0) still truncates to 0
        and yields ROCK.
    """
    index = int(rng() * len(MOVE_BUCKETS))
    if not 0 <= index < len(MOVE_BUCKETS):
        raise UnsupportedChoiceError(index)
    return MOVE_BUCKETS[index]


def parse_move(raw: str) -> Optional[Choice]:
    """Map a typed token to a move, or None if it is not recognised."""
    return MOVE_TOKENS.get(raw.strip().lower())


def get_outcome_for_round(player: Choice, computer: Choice) -> Outcome:
    """Decide a single round.

    Returns:
      Outcome.DRAW if both moves are the same,
      Outcome.WIN if the player's move beats the computer's,
      Outcome.LOSS otherwise.
    """
    if player == computer:
        return Outcome.DRAW
    if BEATS[player] == computer:
        return Outcome.WIN
    return Outcome.LOSS


def update_model(state: ScoreState, outcome: Outcome) -> ScoreState:
    """Return the score after folding in one round's outcome."""
    if outcome == Outcome.WIN:
        return replace(state, player_score=state.player_score + 1)
    if outcome == Outcome.LOSS:
        return replace(state, computer_score=state.computer_score + 1)
    return replace(state)


def fold_outcomes(outcomes: Iterable[Outcome], state: ScoreState = ScoreState()) -> ScoreState:
    return functools.reduce(update_model, outcomes, state)


if __name__ == "__main__":
    print("Run the game with `python -m rps_game` or import rps_game.game")
