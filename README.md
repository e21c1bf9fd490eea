# minesweep

Minesweeper, played in the terminal, with the game logic usable as a library.

Three board sizes are available:

| Level  | Size    | Bombs |
|--------|---------|-------|
| easy   | 8 × 8   | 10    |
| medium | 16 × 16 | 40    |
| hard   | 24 × 24 | 90    |

Bombs are placed only after the first tile is revealed. That tile and its
neighbours never hold a bomb, so the first reveal always opens an area. When a
tile with no neighbouring bombs is revealed, its hidden neighbours open
automatically.

## Installing

```
pip install .
```

## Playing

```
minesweep
minesweep --level medium
minesweep --level hard --seed 42
```

Options:

- `--level {easy,medium,hard}`: board size, `easy` by default.
- `--seed N`: seed for bomb placement, so that a game can be replayed.

The board is drawn after every move, one line per row. Hidden tiles are shown as
`#`, flagged tiles as `F`, revealed tiles as the number of bombs around them,
and a revealed tile with no bombs around it as `.`. When a game is lost, the
bombs are shown as `*`.

Enter a row and a column, counted from 0, to reveal a tile (for example
`3 4`). Put `f` or `flag` in front of them to place a flag or take one away
(`f 3 4`). A flagged tile cannot be revealed until its flag is removed, and
clicks on tiles that are already revealed are ignored. Type `q`, `quit` or
`exit`, or end the input, to stop. Input that cannot be read, or a position off
the board, prints an error and asks again.

You win once every tile that is not a bomb has been revealed. Revealing a bomb
ends the game. Either way the final board is drawn, followed by the time taken
since the first move.

## Using the library

```python
from minesweep.board import Board, GameState
from minesweep.model import GameLevel, Point

board = Board(GameLevel.EASY)
state = board.click_tile(Point(3, 3), False)
print(state is GameState.IN_PROGRESS)
print(board.tile(Point(3, 3)).number)
```

- `minesweep.model` holds `Point`, `GameLevel` (with `tile_count()` and
  `bomb_count()`) and `DisplayStatus` (`HIDDEN`, `FLAGGED`, `REVEALED`).
- `minesweep.tile.Tile` holds one square: whether it is a bomb, the number of
  neighbouring bombs, its status, and how it is drawn (text, colour,
  background, disabled).
- `minesweep.board.Board` takes a level and an optional `random.Random`. Its
  `click_tile(point, right_clicked)` returns a `GameState` (`IN_PROGRESS`,
  `WON` or `LOST`); `game_status()`, `tile(point)` and `neighbours(point)` are
  also available, and iterating over a board yields its tiles row by row. The
  lists `on_started`, `on_won` and `on_lost` take callables with no arguments,
  called when the first click is made and when the game is won or lost.
- `minesweep.cli` provides `render(board)`, `parse_command(line)` and
  `main(argv=None)`.

## What it does not do

There is no graphical window: the game is played only through text in the
terminal. Scores and times are not stored between games.

## Running the tests

```
pip install .[test]
pytest
```