import io
import sys

import pytest

from battleship.cli import main, parse_point
from battleship.geometry import Point


def test_parse_point_comma():
    assert parse_point("3,5") == Point(3, 5)


def test_parse_point_spaces():
    assert parse_point("  7   2 ") == Point(7, 2)


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b"])
def test_parse_point_rejects(text):
    with pytest.raises(ValueError):
        parse_point(text)


def test_width_out_of_range():
    with pytest.raises(SystemExit) as info:
        main(["--width", "5"])
    assert info.value.code == 2


def test_bot_vs_bot(capsys):
    code = main(["--mode", "bot-vs-bot", "--seed", "4", "--delay", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert out.rstrip().endswith("The game is finished")


def test_human_bad_input_then_eof(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\n"))
    code = main(["--seed", "2", "--delay", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "expected a column and a row" in out


def test_human_repeated_shot(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0,0\n0,0\n"))
    code = main(["--seed", "2", "--delay", "0"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Player 2 shoots at 0,0" in out
    assert "Do not shoot at cell which has already shot down." in out