"""Round orchestration and the game loop."""
from __future__ import annotations
import logging
from typing import Callable

from .console import get_player_move, show_progress_in_console
from .game import (
    Cancelled,
    Choice,
    PlayerMove,
    RoundOutcome,
    RoundResult,
    ScoreState,
    get_outcome_for_round,
    get_random_computer_move,
    update_model,
)

logger = logging.getLogger(__name__)

Reporter = Callable[[RoundResult, ScoreState], None]


def play_one_round(
    read_move: Callable[[], PlayerMove] = get_player_move,
    computer_move: Callable[[], Choice] = get_random_computer_move,
) -> RoundOutcome:
    """Play a single round.

    Args:
      read_move: returns the player's move or CANCELLED.
      computer_move: returns the computer's move. Not called when the
        player cancels.

    Returns a RoundResult, or CANCELLED if the player cancelled.
    """
    player = read_move()
    if isinstance(player, Cancelled):
        return player

    computer = computer_move()
    outcome = get_outcome_for_round(player, computer)
    logger.debug("round: player=%s computer=%s -> %s", player.value, computer.value, outcome.value)
    return RoundResult(player_move=player, computer_move=computer, outcome=outcome)


def play_game(
    read_move: Callable[[], PlayerMove] = get_player_move,
    computer_move: Callable[[], Choice] = get_random_computer_move,
    report: Reporter = show_progress_in_console,
) -> ScoreState:
    """Play rounds until the player cancels and return the final score."""
    state = ScoreState()
    while True:
        result = play_one_round(read_move, computer_move)
        if isinstance(result, Cancelled):
            break

        state = update_model(state, result.outcome)
        report(result, state)

    logger.info("game over: player %d, computer %d", state.player_score, state.computer_score)
    return state
