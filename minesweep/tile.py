"""A single square of the minefield and its visual state."""

from __future__ import annotations

from dataclasses import dataclass

from .model import DisplayStatus, Point

_NUMBER_COLOURS = {
    1: "blue",
    2: "green",
    3: "red",
    4: "purple",
    5: "orange",
    6: "cyan",
    7: "black",
}
_DEFAULT_BACKGROUND = "rgb(25, 178, 255)"


@dataclass
class Tile:
    """One tile: whether it hides a bomb, its neighbour count and its look."""

    position: Point
    number: int = 0
    status: DisplayStatus = DisplayStatus.HIDDEN
    bomb: bool = False
    text: str = ""
    colour: str | None = None
    background: str | None = None
    disabled: bool = False

    def increment_number(self) -> None:
        """Count one more neighbouring bomb and recolour the number."""
        self.number += 1
        self.colour = _NUMBER_COLOURS.get(self.number, "yellow")

    def make_bomb(self) -> None:
        """Turn this tile into a bomb."""
        self.bomb = True
        self._refresh()

    def reveal(self) -> None:
        """Show the tile's contents and stop it from taking further clicks."""
        self.status = DisplayStatus.REVEALED
        self._refresh()

    def toggle_flag(self) -> None:
        """Place a flag on the tile, or remove the flag already there."""
        if self.status is DisplayStatus.FLAGGED:
            self.status = DisplayStatus.HIDDEN
        else:
            self.status = DisplayStatus.FLAGGED
        self._refresh()

    def on_game_lost(self) -> None:
        """Clear and disable the tile; bombs are shown in red."""
        self.text = ""
        self.disabled = True
        if self.bomb:
            self.background = "red"

    def on_game_won(self) -> None:
        """Clear the tile; bombs are shown in green."""
        self.text = ""
        self.background = "green" if self.bomb else _DEFAULT_BACKGROUND

    def _refresh(self) -> None:
        if self.status is DisplayStatus.REVEALED:
            self.disabled = True
            if self.number != 0:
                self.text = str(self.number)
        elif self.status is DisplayStatus.FLAGGED:
            self.text = "F"
        else:
            self.text = ""