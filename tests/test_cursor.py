import re

import pytest

from ecma48 import ParameterError, cursor
from ecma48.cursor import Direction, TabulationClear, TabulationControl

RE_CSI = re.compile(r"^\x1b\[([0-9;]*)([A-Za-z@`])$")


def test_cursor_set_position():
    assert cursor.set_position(5, 1) == "\x1b[5;1H"
    assert cursor.set_position(5, 1).encode() == b"\x1b[5;1H"

    assert cursor.set_position(12) == "\x1b[12H"
    assert cursor.set_position(None, 7) == "\x1b[;7H"


def test_cursor_set_position_no_clamping():
    assert cursor.set_position(10000, 99999) == "\x1b[10000;99999H"

    with pytest.raises(ParameterError):
        cursor.set_position(-1, 1)


def test_cursor_movement():
    functions = {
        cursor.up: "A",
        cursor.down: "B",
        cursor.forward: "C",
        cursor.backward: "D",
        cursor.next_line: "E",
        cursor.previous_line: "F",
    }

    for function, final in functions.items():
        for count in [1, 7, 42, 105]:
            mtch = RE_CSI.match(str(function(count)))

            assert mtch is not None
            assert mtch[1] == str(count)
            assert mtch[2] == final

        assert function() == f"\x1b[{final}"


def test_cursor_move():
    assert cursor.move(Direction.UP, 3) == cursor.up(3) == "\x1b[3A"
    assert cursor.move(Direction.PREVIOUS_LINE) == "\x1b[F"


def test_cursor_save_restore():
    assert cursor.save() == "\x1b[s"
    assert cursor.restore() == "\x1b[u"


def test_cursor_position_report():
    assert cursor.position_report(3, 14) == "\x1b[3;14R"


def test_cursor_tabulation():
    assert cursor.tabulation_forward(2) == "\x1b[2I"
    assert cursor.tabulation_backward() == "\x1b[Z"
    assert cursor.line_tabulation(4) == "\x1b[4Y"

    assert cursor.tabulation_control(TabulationControl.SET_CHARACTER) == "\x1b[0W"
    assert cursor.tabulation_control(TabulationControl.CLEAR_ALL_LINES) == "\x1b[6W"
    assert cursor.clear_tabulation(TabulationClear.ALL) == "\x1b[5g"


def test_cursor_data_position():
    assert cursor.character_absolute(8) == "\x1b[8`"
    assert cursor.character_forward(2) == "\x1b[2a"
    assert cursor.character_backward(2) == "\x1b[2j"
    assert cursor.line_position(3) == "\x1b[3d"
    assert cursor.line_forward() == "\x1b[e"
    assert cursor.line_backward(1) == "\x1b[1k"
    assert cursor.character_and_line_position(2, 9) == "\x1b[2;9f"


def test_cursor_idempotence():
    sequence = cursor.set_position(3, 4)

    assert str(sequence) == str(sequence)
    assert sequence.encode() == sequence.encode()
    assert cursor.set_position(3, 4) == sequence


def test_cursor_remove_tabulation_stop():
    assert cursor.remove_tabulation_stop(8) == "\x1b[8 d"
    assert cursor.remove_tabulation_stop(8) != cursor.line_position(8)


def test_cursor_plain_integers():
    assert cursor.tabulation_control(1) == "\x1b[1W"
    assert cursor.clear_tabulation(0) == "\x1b[0g"

    with pytest.raises(ParameterError):
        cursor.clear_tabulation(6)

    with pytest.raises(ParameterError):
        cursor.move("Q")
