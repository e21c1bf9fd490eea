"""Terminal front end for playing a game of minesweeper."""

from __future__ import annotations

import argparse
import random
import time

from .board import Board, GameState
from .model import DisplayStatus, GameLevel, Point

_QUIT_WORDS = {"q", "quit", "exit"}


def render(board: Board) -> str:
    """Draw the board as text, one line per row."""
    lost = board.game_status() is GameState.LOST
    size = int(board.level)
    lines = []
    for r in range(size):
        cells = []
        for c in range(size):
            tile = board.tile(Point(r, c))
            if lost and tile.bomb:
                cells.append("*")
            elif tile.status is DisplayStatus.FLAGGED:
                cells.append("F")
            elif tile.status is DisplayStatus.REVEALED:
                cells.append(str(tile.number) if tile.number else ".")
            else:
                cells.append("#")
        lines.append(" ".join(cells))
    return "\n".join(lines)


def parse_command(line: str) -> tuple[Point, bool] | None:
    """Parse ``"ROW COL"`` (reveal), ``"f ROW COL"`` (flag) or a quit word.

    Returns ``(point, right_clicked)``, or None when the player quits.
    Raises ValueError for anything else.
    """
    words = line.split()
    if len(words) == 1 and words[0].lower() in _QUIT_WORDS:
        return None
    flag = False
    if words and words[0].lower() in {"f", "flag"}:
        flag = True
        words = words[1:]
    if len(words) != 2:
        raise ValueError(f"expected 'ROW COL' or 'f ROW COL', got {line!r}")
    try:
        row, col = (int(w) for w in words)
    except ValueError:
        raise ValueError(f"row and column must be integers, got {line!r}") from None
    return Point(row, col), flag


def main(argv: list[str] | None = None) -> int:
    """Play a game in the terminal."""
    parser = argparse.ArgumentParser(prog="minesweep", description="Play minesweeper.")
    parser.add_argument(
        "--level",
        choices=[level.name.lower() for level in GameLevel],
        default="easy",
    )
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed) if args.seed is not None else None
    board = Board(GameLevel[args.level.upper()], rng=rng)
    started: list[float] = []
    board.on_started.append(lambda: started or started.append(time.monotonic()))

    state = GameState.IN_PROGRESS
    while state is GameState.IN_PROGRESS:
        print(render(board))
        try:
            line = input("> ")
        except EOFError:
            return 0
        try:
            command = parse_command(line)
        except ValueError as exc:
            print(f"error: {exc}")
            continue
        if command is None:
            return 0
        point, right_clicked = command
        try:
            state = board.click_tile(point, right_clicked)
        except IndexError as exc:
            print(f"error: {exc}")

    print(render(board))
    elapsed = time.monotonic() - started[0] if started else 0.0
    print("You won!" if state is GameState.WON else "Game over.")
    print(f"Time: {elapsed:.0f}s")
    return 0