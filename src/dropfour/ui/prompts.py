from __future__ import annotations
from typing import Optional

from dropfour.types import Move

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """
    Turn what the player typed (1-based column) into a Move.
    Returns None when they asked to quit; raises ValueError for anything else
    that is not a column on a ``cols``-wide grid.
    """
    text = raw.strip().lower()
    if text in QUIT_WORDS:
        return None
    try:
        number = int(text, 10)
    except ValueError:
        raise ValueError("Invalid input. Enter a number or q.") from None
    if not 1 <= number <= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(number - 1)
