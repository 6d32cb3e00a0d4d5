import pytest

from navalboard.board import (
    DEFAULT_SHIP_LENGTH,
    DEFAULT_SIZE,
    SHIP,
    WATER,
    Board,
    Orientation,
    PlacementError,
)


def test_new_board_is_all_water():
    board = Board()
    rows = board.rows()
    assert len(rows) == DEFAULT_SIZE
    assert all(len(row) == DEFAULT_SIZE for row in rows)
    assert all(value == WATER for row in rows for value in row)


@pytest.mark.parametrize(
    "row, col, orientation, expected",
    [
        (0, 7, "H", True),
        (0, 8, "H", False),
        (7, 0, "V", True),
        (8, 0, "V", False),
        (7, 7, "P", True),
        (7, 8, "P", False),
        (0, 2, "S", True),
        (0, 1, "S", False),
        (8, 9, "S", False),
    ],
)
def test_fits_boundaries(row, col, orientation, expected):
    assert Board().fits(row, col, orientation) is expected


def test_ship_cells_follow_orientation():
    board = Board()
    assert board.ship_cells(1, 2, Orientation.HORIZONTAL) == [(1, 2), (1, 3), (1, 4)]
    assert board.ship_cells(0, 9, "S") == [(0, 9), (1, 8), (2, 7)]


def test_ship_cells_length_matches_ship_length():
    for orientation in Orientation:
        assert len(Board().ship_cells(3, 3, orientation)) == DEFAULT_SHIP_LENGTH


def test_place_ship_marks_cells():
    board = Board()
    cells = board.place_ship(4, 5, "V")
    rows = board.rows()
    assert all(rows[r][c] == SHIP for r, c in cells)
    assert sum(value == SHIP for row in rows for value in row) == DEFAULT_SHIP_LENGTH


def test_overlaps_after_placement():
    board = Board()
    assert board.overlaps(1, 2, "H") is False
    board.place_ship(1, 2, "H")
    assert board.overlaps(1, 2, "H") is True
    assert board.overlaps(0, 3, "V") is True


def test_place_overlapping_ship_raises():
    board = Board()
    board.place_ship(1, 2, "H")
    with pytest.raises(PlacementError):
        board.place_ship(0, 4, "V")


def test_place_ship_outside_raises():
    with pytest.raises(PlacementError):
        Board().place_ship(0, 8, "H")


def test_failed_placement_leaves_board_unchanged():
    board = Board()
    board.place_ship(1, 2, "H")
    before = board.rows()
    with pytest.raises(PlacementError):
        board.place_ship(1, 1, "H")
    assert board.rows() == before


def test_unknown_orientation_raises():
    with pytest.raises(ValueError):
        Board().fits(0, 0, "X")


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Board(0)


def test_item_access_and_bounds():
    board = Board()
    board[(2, 3)] = SHIP
    assert board[(2, 3)] == SHIP
    with pytest.raises(IndexError):
        board[(DEFAULT_SIZE, 0)]


def test_render_layout():
    board = Board()
    board.place_ship(0, 0, "H")
    lines = board.render().splitlines()
    assert len(lines) == DEFAULT_SIZE
    assert lines[0] == "3 3 3 0 0 0 0 0 0 0 "
    assert all(line.split() == ["0"] * DEFAULT_SIZE for line in lines[1:])