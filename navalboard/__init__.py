"""Battleship board placement, area-of-effect abilities and a board-printing command."""

__version__ = "0.1.0"
__all__ = ["board", "abilities", "cli"]