from __future__ import annotations
import random
from typing import Optional

from dropfour.core.board import Board
from dropfour.types import Move


class RandomAgent:
    """
    Uniform pick over [0, width). Full columns are not filtered out;
    the controller re-asks until it gets a playable one.
    """

    name = "Random AI"

    def __init__(self, rng: Optional[random.Random] = None, name: Optional[str] = None) -> None:
        self.rng = rng or random.Random()
        if name:
            self.name = name

    def choose_move(self, board: Board) -> Move:
        return Move(self.rng.randrange(board.width))
