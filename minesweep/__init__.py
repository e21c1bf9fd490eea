"""Minesweeper game logic (points, levels, tiles, board) and a terminal front end."""

__version__ = "0.1.0"