"""Basic value types shared by the board and its tiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


@dataclass(frozen=True, order=True)
class Point:
    """A position on the board, given by row and column."""

    row: int
    col: int


class GameLevel(IntEnum):
    """Difficulty levels; the value is the width and height of the board."""

    EASY = 8
    MEDIUM = 16
    HARD = 24

    def tile_count(self) -> int:
        """Total number of tiles on a board of this level."""
        return self.value * self.value

    def bomb_count(self) -> int:
        """Number of bombs: ten for every 8x8 section of the board."""
        return 10 * self.tile_count() // 64


class DisplayStatus(Enum):
    """How a tile currently shows itself to the player."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()