import io

import numpy as np
import pytest

from islandboard import Color
from play import main, play
from table import Table


def test_table_aligns_columns():
    out = io.StringIO()
    table = Table(["Move", "Player"], ["d", ""], file=out)
    table.print(1, "WHITE")
    table.print(12, "BLACK")
    lines = out.getvalue().splitlines()
    assert lines[0] == "Move | Player"
    assert lines[1] == "   1 |  WHITE"
    assert lines[2] == "  12 |  BLACK"


@pytest.mark.parametrize("seed", range(5))
def test_random_game_has_a_winner(seed):
    game = play(5, np.random.default_rng(seed))
    assert game.winner in (Color.WHITE, Color.BLACK)
    assert game.white_score() >= 1 or game.black_score() >= 1


def test_play_fills_table():
    out = io.StringIO()
    table = Table(["Move", "Player", "Row", "Col", "White", "Black"], ["d", "", "d", "d", "d", "d"], file=out)
    game = play(3, np.random.default_rng(1), first=Color.BLACK, table=table)
    moves = game.moves_made(Color.WHITE) + game.moves_made(Color.BLACK)
    lines = out.getvalue().splitlines()
    assert len(lines) == moves + 1
    assert "BLACK" in lines[1]


def test_main(capsys):
    assert main(["4", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Move" in out
    assert "wins after" in out


def test_main_quiet(capsys):
    assert main(["4", "--seed", "3", "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "Move" not in out
    assert "wins after" in out


def test_main_bad_size():
    with pytest.raises(SystemExit) as excinfo:
        main(["0"])
    assert excinfo.value.code == 2
