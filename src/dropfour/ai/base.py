from __future__ import annotations
from typing import Protocol

from dropfour.core.board import Board
from dropfour.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, board: Board) -> Move:
        ...
