import pytest

from dropfour.core.board import Board
from dropfour.errors import ColumnFull, InvalidColumn


def test_default_dimensions_are_seven_by_six():
    b = Board()
    assert b.width == 7
    assert b.height == 6
    assert all(cell is None for row in b.grid for cell in row)


@pytest.mark.parametrize("width,height", [(7, 6), (4, 4), (1, 3), (9, 2)])
def test_landing_row_starts_at_bottom_and_fills_up(width, height):
    b = Board(width, height)
    col = width - 1

    for expected in range(height - 1, -1, -1):
        assert b.find_landing_row(col) == expected
        b.place(expected, col, "red")

    assert b.find_landing_row(col) is None


def test_find_landing_row_does_not_mutate():
    b = Board()
    b.find_landing_row(3)
    b.find_landing_row(3)
    assert b.move_count() == 0


@pytest.mark.parametrize("col", [-1, 7, 100, "3", 2.0, None, True])
def test_invalid_column_rejected(col):
    b = Board()
    with pytest.raises(InvalidColumn):
        b.find_landing_row(col)
    assert b.move_count() == 0


def test_place_refuses_occupied_cell():
    b = Board()
    b.place(5, 0, "red")
    with pytest.raises(ValueError):
        b.place(5, 0, "blue")
    assert b.cell(5, 0) == "red"


def test_place_refuses_empty_token_and_off_board():
    b = Board()
    with pytest.raises(ValueError):
        b.place(5, 0, None)
    with pytest.raises(ValueError):
        b.place(6, 0, "red")


def test_drop_stacks_and_raises_when_full():
    b = Board(3, 2)
    assert b.drop(1, "red") == 1
    assert b.drop(1, "blue") == 0
    with pytest.raises(ColumnFull):
        b.drop(1, "red")
    assert b.valid_moves() == [0, 2]


def test_is_full():
    b = Board(2, 2)
    for col, token in [(0, "a"), (0, "b"), (1, "a")]:
        b.drop(col, token)
        assert not b.is_full()
    b.drop(1, "b")
    assert b.is_full()


def test_copy_is_independent():
    b = Board()
    b.drop(0, "red")
    c = b.copy()
    c.drop(0, "blue")
    assert b.move_count() == 1
    assert c.move_count() == 2


@pytest.mark.parametrize("width,height", [(0, 6), (7, 0), (-1, 6), (7, 2.5)])
def test_bad_dimensions(width, height):
    with pytest.raises(ValueError):
        Board(width, height)


def test_grid_shape_must_match():
    with pytest.raises(ValueError):
        Board(3, 2, grid=[[None, None], [None, None]])
