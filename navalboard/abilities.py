"""Area-of-effect patterns and their application to a board."""

from __future__ import annotations

from collections.abc import Sequence

from navalboard.board import ABILITY, SHIP, Board

ABILITY_SIZE = 5

Pattern = tuple[tuple[int, ...], ...]


def _build(size: int, hit) -> Pattern:
    if size <= 0:
        raise ValueError("pattern size must be positive")
    return tuple(tuple(1 if hit(i, j) else 0 for j in range(size)) for i in range(size))


def cone(size: int = ABILITY_SIZE) -> Pattern:
    """A cone whose tip is at the top centre, widening downwards."""
    centre = size // 2
    return _build(size, lambda i, j: centre - i <= j <= centre + i)


def cross(size: int = ABILITY_SIZE) -> Pattern:
    """A cross through the centre row and column."""
    centre = size // 2
    return _build(size, lambda i, j: i == centre or j == centre)


def octahedron(size: int = ABILITY_SIZE) -> Pattern:
    """A diamond centred on the middle cell."""
    centre = size // 2
    return _build(size, lambda i, j: abs(i - centre) + abs(j - centre) <= centre)


def apply_ability(board: Board, pattern: Sequence[Sequence[int]], row: int, col: int) -> None:
    """Mark the pattern's hit cells on the board, centred at (row, col).

    Cells outside the board are ignored and ships are never overwritten.
    """
    offset = len(pattern) // 2
    for i, pattern_row in enumerate(pattern):
        for j, hit in enumerate(pattern_row):
            target = (row - offset + i, col - offset + j)
            if hit != 1 or not (0 <= target[0] < board.size and 0 <= target[1] < board.size):
                continue
            if board[target] != SHIP:
                board[target] = ABILITY