import io
import random
from itertools import product

import pytest

from minesweep.board import Board
from minesweep.cli import main, parse_command, render
from minesweep.model import GameLevel, Point


def test_render_new_board():
    board = Board(GameLevel.EASY, rng=random.Random(1))
    lines = render(board).splitlines()
    assert len(lines) == 8
    assert all(line == " ".join("#" * 8) for line in lines)


def test_render_shows_flag_and_revealed():
    board = Board(GameLevel.EASY, rng=random.Random(1))
    board.click_tile(Point(7, 7), True)
    board.click_tile(Point(0, 0), False)
    lines = [line.split() for line in render(board).splitlines()]
    assert lines[7][7] == "F"
    assert lines[0][0] == "."


def test_render_shows_bombs_after_loss():
    board = Board(GameLevel.EASY, rng=random.Random(1))
    board.click_tile(Point(0, 0), False)
    bombs = [t.position for t in board if t.bomb]
    board.click_tile(bombs[0], False)
    cells = [line.split() for line in render(board).splitlines()]
    assert sum(row.count("*") for row in cells) == GameLevel.EASY.bomb_count()


@pytest.mark.parametrize(
    "line, expected",
    [
        ("3 4", (Point(3, 4), False)),
        ("f 3 4", (Point(3, 4), True)),
        ("flag 0 7", (Point(0, 7), True)),
        ("q", None),
        ("quit", None),
    ],
)
def test_parse_command(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["", "3", "a b", "f 1", "1 2 3"])
def test_parse_command_rejects(line):
    with pytest.raises(ValueError):
        parse_command(line)


def run(monkeypatch, capsys, text, argv):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_main_quits(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "q\n", ["--seed", "1"])
    assert code == 0
    assert " ".join("#" * 8) in out


def test_main_reports_bad_input(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "nonsense\n9 9\n", ["--seed", "1"])
    assert code == 0
    assert out.count("error:") == 2


def _layout(seed, first):
    board = Board(GameLevel.EASY, rng=random.Random(seed))
    board.click_tile(first, False)
    return board


def test_main_loses_on_bomb(monkeypatch, capsys):
    board = _layout(3, Point(0, 0))
    bomb = next(t.position for t in board if t.bomb)
    script = f"0 0\n{bomb.row} {bomb.col}\n"
    code, out = run(monkeypatch, capsys, script, ["--seed", "3"])
    assert code == 0
    assert "Game over." in out
    assert "You won!" not in out


def test_main_wins(monkeypatch, capsys):
    board = _layout(4, Point(0, 0))
    safe = [
        f"{r} {c}"
        for r, c in product(range(8), repeat=2)
        if not board.tile(Point(r, c)).bomb and (r, c) != (0, 0)
    ]
    script = "\n".join(["0 0", *safe]) + "\n"
    code, out = run(monkeypatch, capsys, script, ["--seed", "4"])
    assert code == 0
    assert "You won!" in out