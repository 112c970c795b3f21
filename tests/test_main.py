import sys

import pytest

from ecma48.__main__ import main


def _run(monkeypatch, *args: str) -> None:
    monkeypatch.setattr(sys, "argv", ["ecma48", *args])
    main()


def test_main_sgr(monkeypatch, capsys):
    _run(monkeypatch, "sgr", "red", "bold", "--text", "Hi")

    output = capsys.readouterr().out.splitlines()

    assert output == [repr("\x1b[31;1m"), "\x1b[31;1mHi\x1b[0m"]


def test_main_sgr_unknown_name(monkeypatch):
    with pytest.raises(SystemExit):
        _run(monkeypatch, "sgr", "sparkly")


def test_main_demo(monkeypatch, capsys):
    _run(monkeypatch, "demo")

    output = capsys.readouterr().out

    assert output.startswith("Hello \x1b[31;1;4mWorld\x1b[0m !\n")
    assert "\x1b[2J\x1b[1;1H" in output
    assert output.endswith("\x1b[5;1HThis line is printed on the fifth line.\n")
