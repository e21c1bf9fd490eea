"""The minefield: bomb placement, clicks, flood fill and win/loss detection."""

from __future__ import annotations

import random
from enum import Enum, auto
from itertools import product
from typing import Callable, Iterator

from .model import DisplayStatus, GameLevel, Point
from .tile import Tile

Listener = Callable[[], None]


class GameState(Enum):
    """Progress of a game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class Board:
    """A square minefield whose bombs are laid after the first reveal."""

    def __init__(
        self,
        level: GameLevel = GameLevel.EASY,
        rng: random.Random | None = None,
    ) -> None:
        self.level = GameLevel(level)
        self.rng = rng if rng is not None else random.Random()
        self.tiles_revealed = 0  # -1 once a bomb has been clicked
        self.on_started: list[Listener] = []
        self.on_won: list[Listener] = []
        self.on_lost: list[Listener] = []
        size = int(self.level)
        self._grid = [
            [Tile(Point(r, c)) for c in range(size)] for r in range(size)
        ]

    def __iter__(self) -> Iterator[Tile]:
        for row in self._grid:
            yield from row

    def tile(self, point: Point) -> Tile:
        """Return the tile at ``point``; raise IndexError when it is off the board."""
        size = int(self.level)
        if not (0 <= point.row < size and 0 <= point.col < size):
            raise IndexError(f"{point} is outside a {size}x{size} board")
        return self._grid[point.row][point.col]

    def neighbours(self, point: Point) -> list[Point]:
        """Points surrounding ``point`` that lie on the board, in row order."""
        size = int(self.level)
        return [
            Point(r, c)
            for r, c in product(
                range(point.row - 1, point.row + 2),
                range(point.col - 1, point.col + 2),
            )
            if (r, c) != (point.row, point.col) and 0 <= r < size and 0 <= c < size
        ]

    def game_status(self) -> GameState:
        """Whether the game is still going, won or lost."""
        if self.tiles_revealed == -1:
            return GameState.LOST
        if self.tiles_revealed == self.level.tile_count() - self.level.bomb_count():
            return GameState.WON
        return GameState.IN_PROGRESS

    def click_tile(self, point: Point, right_clicked: bool = False) -> GameState:
        """Handle a click on ``point`` and return the resulting game state.

        Clicks on disabled tiles are ignored, as they are on the screen.
        """
        target = self.tile(point)
        if target.disabled:
            return self.game_status()
        if self.tiles_revealed == 0:
            self._notify(self.on_started)
        if right_clicked:
            target.toggle_flag()
        else:
            self._open(point)

        state = self.game_status()
        if state is GameState.LOST:
            for tile in self:
                tile.on_game_lost()
            self._notify(self.on_lost)
        elif state is GameState.WON:
            for tile in self:
                tile.on_game_won()
            self._notify(self.on_won)
        return state

    def _open(self, start: Point) -> None:
        pending = [start]
        while pending:
            point = pending.pop()
            tile = self.tile(point)
            if tile.status is not DisplayStatus.HIDDEN:
                continue
            if tile.bomb:
                self.tiles_revealed = -1
                return
            tile.reveal()
            if self.tiles_revealed == 0:
                self._place_bombs(point)
            self.tiles_revealed += 1
            if tile.number == 0:
                pending.extend(
                    n
                    for n in self.neighbours(point)
                    if self.tile(n).status is not DisplayStatus.REVEALED
                )

    def _place_bombs(self, first: Point) -> None:
        excluded = {first, *self.neighbours(first)}
        size = int(self.level)
        placed = 0
        while placed < self.level.bomb_count():
            spot = Point(self.rng.randrange(size), self.rng.randrange(size))
            tile = self.tile(spot)
            if tile.bomb or spot in excluded:
                continue
            tile.make_bomb()
            for n in self.neighbours(spot):
                self.tile(n).increment_number()
            placed += 1

    @staticmethod
    def _notify(listeners: list[Listener]) -> None:
        for listener in listeners:
            listener()