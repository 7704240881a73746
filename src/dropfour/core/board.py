# src/dropfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from dropfour.config import ROWS, COLS
from dropfour.errors import ColumnFull, InvalidColumn
from dropfour.types import Cell, Move, Token


@dataclass(slots=True)
class Board:
    """
    Grid of ``height`` rows by ``width`` columns, ``grid[row][col]``.
    Row 0 is the top; pieces fall toward ``height - 1``.
    Occupied cells are never cleared or overwritten.
    """

    width: int = COLS
    height: int = ROWS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Board {label} must be a positive integer, got {value!r}.")
        if not self.grid:
            self.grid = [[None for _ in range(self.width)] for _ in range(self.height)]
        elif len(self.grid) != self.height or any(len(row) != self.width for row in self.grid):
            raise ValueError("Grid shape does not match width/height.")

    def copy(self) -> "Board":
        return Board(self.width, self.height, [row[:] for row in self.grid])

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def _check_column(self, col: int) -> int:
        if isinstance(col, bool) or not isinstance(col, int):
            raise InvalidColumn(f"Column must be an integer, got {col!r}.")
        if col < 0 or col >= self.width:
            raise InvalidColumn(f"Column {col} out of range.")
        return int(col)

    def find_landing_row(self, col: Move) -> Optional[int]:
        """Lowest empty row in ``col``, or None when the column is full."""
        c = self._check_column(col)
        for r in range(self.height - 1, -1, -1):
            if self.grid[r][c] is None:
                return r
        return None

    def place(self, row: int, col: int, token: Token) -> None:
        if token is None:
            raise ValueError("Cannot place an empty token.")
        if not self.in_bounds(row, col):
            raise ValueError(f"Cell ({row}, {col}) is off the board.")
        if self.grid[row][col] is not None:
            raise ValueError(f"Cell ({row}, {col}) is already occupied.")
        self.grid[row][col] = token

    def drop(self, col: Move, token: Token) -> int:
        row = self.find_landing_row(col)
        if row is None:
            raise ColumnFull(f"Column {int(col)} is full.")
        self.place(row, int(col), token)
        return row

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.width) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def move_count(self) -> int:
        return sum(cell is not None for row in self.grid for cell in row)
