"""Console input and output for the Rock-Paper-Scissors game."""
from __future__ import annotations
import logging
import sys
from typing import Callable, Optional, Sequence, TextIO

from .game import CANCELLED, PlayerMove, RoundResult, ScoreState, parse_move

logger = logging.getLogger(__name__)

PROMPT = "Enter a move: rock/paper/scissors"

COLUMNS = ("Your choice", "Computer choice", "Outcome", "Your score", "Computer score")

# Takes the prompt, returns the typed line or None when the player cancels.
LineReader = Callable[[str], Optional[str]]


def console_reader(prompt: str) -> Optional[str]:
    """Read one line from the terminal; Ctrl-D and Ctrl-C count as cancelling."""
    try:
        return input(f"{prompt} ")
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def get_player_move(read_line: LineReader = console_reader) -> PlayerMove:
    """Prompt until a recognised move is entered or the player cancels.

    Unrecognised input is dropped without telling the player and the prompt
    repeats, with no limit on retries. An empty line is ordinary invalid
    input; only ``None`` from ``read_line`` cancels.
    """
    while True:
        raw = read_line(PROMPT)
        if raw is None:
            logger.debug("player cancelled the prompt")
            return CANCELLED

        move = parse_move(raw)
        if move is not None:
            return move
        logger.debug("rejected move token %r", raw)


def format_table(headers: Sequence[str], rows: Sequence[Sequence[object]]) -> str:
    """Render headers and rows as a pipe table with columns sized to fit."""
    cells = [[str(c) for c in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        if len(row) != len(headers):
            raise ValueError(f"row has {len(row)} cells, expected {len(headers)}")
        widths = [max(w, len(c)) for w, c in zip(widths, row)]

    def line(values: Sequence[str]) -> str:
        return "| " + " | ".join(v.ljust(w) for v, w in zip(values, widths)) + " |"

    out = [line(headers), "|" + "|".join("-" * (w + 2) for w in widths) + "|"]
    out.extend(line(row) for row in cells)
    return "\n".join(out)


def show_progress_in_console(result: RoundResult, state: ScoreState, out: Optional[TextIO] = None) -> None:
    row = (
        result.player_move.value,
        result.computer_move.value,
        result.outcome.value,
        state.player_score,
        state.computer_score,
    )
    print(format_table(COLUMNS, [row]), file=sys.stdout if out is None else out)
