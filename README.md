# navalboard

A small battleship board toolkit. It places fixed-length ships on a square grid.
A ship can lie horizontally, vertically or along either diagonal. Every ship must
stay on the board and must not overlap another ship. The toolkit can also stamp
area-of-effect abilities onto the grid: a cone, a cross and an octahedron
(diamond).

Cells hold `0` for water, `3` for a ship and `5` for a cell hit by an ability.
Abilities never overwrite ship cells.

## Installation

```
pip install .
```

## Command line

```
navalboard [novato|aventureiro|mestre]
```

The command prints the board for the chosen level. The default level is `mestre`.

- `novato`: a 10x10 board with one horizontal ship and one vertical ship.
- `aventureiro`: a board with four ships, two of them on diagonals.
- `mestre`: the four-ship board with a cone centred at (2, 2), a cross centred
  at (5, 5) and an octahedron centred at (7, 7).

Each board is printed as rows of space-separated numbers under a short
heading. If a ship cannot be placed, the command prints an error message and
exits with status 1.

## Library use

```python
from navalboard.board import Board, Orientation, PlacementError
from navalboard.abilities import cone, cross, octahedron, apply_ability

board = Board(10, 3)
board.place_ship(1, 2, Orientation.HORIZONTAL)
board.place_ship(0, 9, Orientation.ANTI_DIAGONAL)

try:
    board.place_ship(1, 3, Orientation.VERTICAL)
except PlacementError as exc:
    print(exc)

apply_ability(board, cross(5), 5, 5)
print(board.render())
```

### `navalboard.board`

- `Orientation` names the four directions. `HORIZONTAL` (`"H"`) steps right.
  `VERTICAL` (`"V"`) steps down. `MAIN_DIAGONAL` (`"P"`) steps down and right.
  `ANTI_DIAGONAL` (`"S"`) steps down and left. Every method that takes an
  orientation also accepts the matching letter.
- `Board(size=10, ship_length=3)` creates an all-water grid. A non-positive
  size or ship length raises `ValueError`.
- `board[row, col]` reads a cell and `board[row, col] = value` sets one.
  Coordinates off the board raise `IndexError`.
- `ship_cells(row, col, orientation)` returns the coordinates a ship would
  cover.
- `fits(row, col, orientation)` tells whether the whole ship lies on the board.
- `overlaps(row, col, orientation)` tells whether any of those cells is already
  occupied. It raises `PlacementError` if the ship does not fit.
- `place_ship(row, col, orientation)` marks the ship and returns its cells. It
  raises `PlacementError` if the ship does not fit or if it overlaps another
  ship.
- `rows()` returns a snapshot of the grid as a tuple of row tuples.
- `render()` returns the grid as text, one line per row.

### `navalboard.abilities`

- `cone(size=5)`, `cross(size=5)` and `octahedron(size=5)` each return a
  square 0/1 pattern as a tuple of tuples.
- `apply_ability(board, pattern, row, col)` centres the pattern on
  `(row, col)` and sets each hit cell to `5`. Cells that fall off the board
  and cells that hold a ship are left unchanged.

## Limits

This package only builds and displays boards. It has no opponents, no
shooting, no turns and no saved games.

## Running the tests

```
pip install .[test]
pytest
```