# src/dropfour/core/rules.py

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

from dropfour.config import CONNECT_N
from dropfour.core.board import Board
from dropfour.types import Coord, Token

# (d_row, d_col) for horizontal, vertical, down-right, down-left
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def candidate_lines(y: int, x: int, length: int = CONNECT_N) -> Iterator[List[Coord]]:
    """
    The four lines of ``length`` cells starting at (y, x). Coordinates are
    not clamped, so a line may leave the board.
    """
    for dy, dx in DIRECTIONS:
        yield [(y + dy * i, x + dx * i) for i in range(length)]


def line_wins(board: Board, line: List[Coord], token: Token) -> bool:
    for r, c in line:
        if not board.in_bounds(r, c):
            return False
        if board.grid[r][c] != token:
            return False
    return True


def winning_line(board: Board, token: Token) -> Optional[List[Coord]]:
    """
    Try every cell as the origin of a line; the whole board is rescanned on
    every call. Returns the first complete line for ``token``.
    """
    if token is None:
        return None

    for y in range(board.height):
        for x in range(board.width):
            for line in candidate_lines(y, x):
                if line_wins(board, line, token):
                    return line
    return None


def check_win(board: Board, token: Token) -> bool:
    return winning_line(board, token) is not None
