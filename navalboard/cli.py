"""Command line that builds and prints the board for each challenge level."""

from __future__ import annotations

import argparse
import sys

from navalboard.abilities import apply_ability, cone, cross, octahedron
from navalboard.board import Board, Orientation, PlacementError

_NOVICE_SHIPS = (
    (2, 4, Orientation.HORIZONTAL, "Erro: Não é possível posicionar o navio horizontal."),
    (5, 6, Orientation.VERTICAL, "Erro: Não é possível posicionar o navio vertical."),
)

_ADVENTURER_SHIPS = (
    (1, 2, Orientation.HORIZONTAL, "Erro ao posicionar navio horizontal."),
    (4, 5, Orientation.VERTICAL, "Erro ao posicionar navio vertical."),
    (6, 1, Orientation.MAIN_DIAGONAL, "Erro ao posicionar navio diagonal principal."),
    (0, 9, Orientation.ANTI_DIAGONAL, "Erro ao posicionar navio diagonal secundária."),
)

_MASTER_ABILITIES = (
    (cone, 2, 2),
    (cross, 5, 5),
    (octahedron, 7, 7),
)

_HEADERS = {
    "novato": "Tabuleiro:\n\n",
    "aventureiro": "\nTabuleiro:\n\n",
    "mestre": "\nLegenda: 0=Água  3=Navio  5=Habilidade\n\nTabuleiro:\n\n",
}


def _place_all(board: Board, ships) -> Board:
    for row, col, orientation, message in ships:
        try:
            board.place_ship(row, col, orientation)
        except PlacementError as exc:
            raise PlacementError(message) from exc
    return board


def novice_board() -> Board:
    """Board with one horizontal and one vertical ship."""
    return _place_all(Board(), _NOVICE_SHIPS)


def adventurer_board() -> Board:
    """Board with four ships, two of them on diagonals."""
    return _place_all(Board(), _ADVENTURER_SHIPS)


def master_board() -> Board:
    """Board with four ships and three abilities applied over it."""
    board = Board()
    for row, col, orientation, _ in _ADVENTURER_SHIPS:
        if board.fits(row, col, orientation) and not board.overlaps(row, col, orientation):
            board.place_ship(row, col, orientation)
    for make_pattern, row, col in _MASTER_ABILITIES:
        apply_ability(board, make_pattern(), row, col)
    return board


_BUILDERS = {
    "novato": novice_board,
    "aventureiro": adventurer_board,
    "mestre": master_board,
}


def main(argv=None) -> int:
    """Print the board of the chosen level; return the exit status."""
    parser = argparse.ArgumentParser(prog="navalboard", description="Print a naval-battle board.")
    parser.add_argument("level", nargs="?", default="mestre", choices=list(_BUILDERS))
    args = parser.parse_args(argv)
    try:
        board = _BUILDERS[args.level]()
    except PlacementError as exc:
        print(exc)
        return 1
    sys.stdout.write(_HEADERS[args.level] + board.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())