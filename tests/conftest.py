import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from dropfour.core.board import Board


def board_from_rows(rows):
    """Build a Board from strings, '.' for empty, any other char is the token."""
    grid = [[None if ch == "." else ch for ch in row] for row in rows]
    return Board(width=len(rows[0]), height=len(rows), grid=grid)


@pytest.fixture
def make_board():
    return board_from_rows
