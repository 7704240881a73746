from __future__ import annotations
from typing import Callable

from dropfour.core.board import Board
from dropfour.types import Move
from dropfour.ui.prompts import parse_move


class QuitGame(Exception):
    pass


class HumanAgent:
    """Reads a column from the terminal, asking again on bad input."""

    name = "Human"

    def __init__(self, prompt: str = "Your move: ", read: Callable[[str], str] = input) -> None:
        self.prompt = prompt
        self.read = read

    def choose_move(self, board: Board) -> Move:
        while True:
            try:
                move = parse_move(self.read(self.prompt), board.width)
            except ValueError as e:
                print(e)
                continue
            if move is None:
                raise QuitGame()
            if move not in board.valid_moves():
                print(f"Column {move + 1} is full.")
                continue
            return move
