"""A square naval-battle board on which fixed-length ships are placed."""

from __future__ import annotations

from enum import Enum

WATER = 0
SHIP = 3
ABILITY = 5

DEFAULT_SIZE = 10
DEFAULT_SHIP_LENGTH = 3


class Orientation(str, Enum):
    """Direction in which a ship extends from its starting cell."""

    HORIZONTAL = "H"
    VERTICAL = "V"
    MAIN_DIAGONAL = "P"
    ANTI_DIAGONAL = "S"


_STEPS = {
    Orientation.HORIZONTAL: (0, 1),
    Orientation.VERTICAL: (1, 0),
    Orientation.MAIN_DIAGONAL: (1, 1),
    Orientation.ANTI_DIAGONAL: (1, -1),
}


class PlacementError(ValueError):
    """Raised when a ship cannot be placed where it was asked to go."""


class Board:
    """A square grid of cells holding water, ships or ability marks."""

    def __init__(self, size: int = DEFAULT_SIZE, ship_length: int = DEFAULT_SHIP_LENGTH) -> None:
        if size <= 0:
            raise ValueError("board size must be positive")
        if ship_length <= 0:
            raise ValueError("ship length must be positive")
        self.size = size
        self.ship_length = ship_length
        self._grid = [[WATER] * size for _ in range(size)]

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        row, col = key
        if not self._inside(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        return row, col

    def __getitem__(self, key: tuple[int, int]) -> int:
        row, col = self._check(key)
        return self._grid[row][col]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        row, col = self._check(key)
        self._grid[row][col] = value

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Return a snapshot of the grid, row by row."""
        return tuple(tuple(row) for row in self._grid)

    def ship_cells(self, row: int, col: int, orientation: Orientation | str) -> list[tuple[int, int]]:
        """Return the cells a ship starting at (row, col) would cover."""
        d_row, d_col = _STEPS[Orientation(orientation)]
        return [(row + d_row * i, col + d_col * i) for i in range(self.ship_length)]

    def fits(self, row: int, col: int, orientation: Orientation | str) -> bool:
        """Tell whether the whole ship lies within the board."""
        return all(self._inside(r, c) for r, c in self.ship_cells(row, col, orientation))

    def overlaps(self, row: int, col: int, orientation: Orientation | str) -> bool:
        """Tell whether any cell of the ship is already occupied."""
        if not self.fits(row, col, orientation):
            raise PlacementError(f"ship at ({row}, {col}) does not fit on the board")
        return any(self._grid[r][c] != WATER for r, c in self.ship_cells(row, col, orientation))

    def place_ship(self, row: int, col: int, orientation: Orientation | str) -> list[tuple[int, int]]:
        """Place a ship and return the cells it now occupies."""
        if not self.fits(row, col, orientation):
            raise PlacementError(f"ship at ({row}, {col}) does not fit on the board")
        if self.overlaps(row, col, orientation):
            raise PlacementError(f"ship at ({row}, {col}) overlaps another ship")
        cells = self.ship_cells(row, col, orientation)
        for r, c in cells:
            self._grid[r][c] = SHIP
        return cells

    def render(self) -> str:
        """Return the grid as text, one line per row."""
        return "".join("".join(f"{value} " for value in row) + "\n" for row in self._grid)