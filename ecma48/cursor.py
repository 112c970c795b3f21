"""Control functions that move the active position."""

from __future__ import annotations

from enum import Enum

from .control import ControlSequence, Parameter, build, member

__all__ = [
    "Direction",
    "TabulationClear",
    "TabulationControl",
    "backward",
    "character_absolute",
    "character_and_line_position",
    "character_backward",
    "character_forward",
    "clear_tabulation",
    "down",
    "forward",
    "line_backward",
    "line_forward",
    "line_position",
    "line_tabulation",
    "move",
    "next_line",
    "position_report",
    "previous_line",
    "remove_tabulation_stop",
    "restore",
    "save",
    "set_position",
    "tabulation_backward",
    "tabulation_control",
    "tabulation_forward",
    "up",
]


class Direction(Enum):
    """The directions of relative cursor movement, valued by their final byte."""

    UP = "A"
    """CUU, moves up by n lines."""

    DOWN = "B"
    """CUD, moves down by n lines."""

    FORWARD = "C"
    """CUF, moves right by n characters."""

    BACKWARD = "D"
    """CUB, moves left by n characters."""

    NEXT_LINE = "E"
    """CNL, moves to the first character of the n-th following line."""

    PREVIOUS_LINE = "F"
    """CPL, moves to the first character of the n-th preceding line."""


class TabulationControl(Enum):
    """The parameter values of CTC."""

    SET_CHARACTER = 0
    SET_LINE = 1
    CLEAR_CHARACTER = 2
    CLEAR_LINE = 3
    CLEAR_CHARACTERS_IN_LINE = 4
    CLEAR_ALL_CHARACTERS = 5
    CLEAR_ALL_LINES = 6


class TabulationClear(Enum):
    """The parameter values of TBC."""

    CHARACTER = 0
    LINE = 1
    CHARACTERS_IN_LINE = 2
    ALL_CHARACTERS = 3
    ALL_LINES = 4
    ALL = 5


def move(direction: Direction, count: Parameter = None) -> ControlSequence:
    """Moves the cursor relative to its current position.

    Args:
        direction: Which way to move.
        count: The number of positions to move by. When omitted the terminal moves by
            one.
    """

    return build(member(Direction, direction).value, parameters=[count])


def up(count: Parameter = None) -> ControlSequence:
    """CUU - Cursor up."""

    return move(Direction.UP, count)


def down(count: Parameter = None) -> ControlSequence:
    """CUD - Cursor down."""

    return move(Direction.DOWN, count)


def forward(count: Parameter = None) -> ControlSequence:
    """CUF - Cursor forward."""

    return move(Direction.FORWARD, count)


def backward(count: Parameter = None) -> ControlSequence:
    """CUB - Cursor backward."""

    return move(Direction.BACKWARD, count)


def next_line(count: Parameter = None) -> ControlSequence:
    """CNL - Cursor next line."""

    return move(Direction.NEXT_LINE, count)


def previous_line(count: Parameter = None) -> ControlSequence:
    """CPL - Cursor preceding line."""

    return move(Direction.PREVIOUS_LINE, count)


def set_position(row: Parameter, column: Parameter = None) -> ControlSequence:
    """CUP - Cursor position.

    Both values are 1-based and are not clamped to the terminal's size. Interpreting
    out of range positions is left to the terminal.

    Args:
        row: The line to move to.
        column: The character position within the line. Defaults to the first one.
    """

    return build("H", parameters=[row, column])


def position_report(row: Parameter, column: Parameter = None) -> ControlSequence:
    """CPR - Active position report, as sent in reply to a DSR request."""

    return build("R", parameters=[row, column])


def save() -> ControlSequence:
    """Saves the cursor position, to be restored with `restore`."""

    return build("s")


def restore() -> ControlSequence:
    """Restores the cursor position stored by `save`."""

    return build("u")


def tabulation_forward(count: Parameter = None) -> ControlSequence:
    """CHT - Moves to the n-th following character tabulation stop."""

    return build("I", parameters=[count])


def tabulation_backward(count: Parameter = None) -> ControlSequence:
    """CBT - Moves to the n-th preceding character tabulation stop."""

    return build("Z", parameters=[count])


def line_tabulation(count: Parameter = None) -> ControlSequence:
    """CVT - Moves to the n-th following line tabulation stop."""

    return build("Y", parameters=[count])


def tabulation_control(control: TabulationControl) -> ControlSequence:
    """CTC - Sets or clears tabulation stops."""

    return build("W", parameters=[member(TabulationControl, control).value])


def clear_tabulation(clear: TabulationClear) -> ControlSequence:
    """TBC - Clears tabulation stops."""

    return build("g", parameters=[member(TabulationClear, clear).value])


def remove_tabulation_stop(column: Parameter = None) -> ControlSequence:
    """TSR - Clears the character tabulation stop at the given character position.

    Other tabulation stops are not affected.
    """

    return build("d", " ", [column])


def character_absolute(column: Parameter = None) -> ControlSequence:
    """HPA - Moves to the given character position of the active line."""

    return build("`", parameters=[column])


def character_forward(count: Parameter = None) -> ControlSequence:
    """HPR - Moves forward by n character positions."""

    return build("a", parameters=[count])


def character_backward(count: Parameter = None) -> ControlSequence:
    """HPB - Moves backward by n character positions."""

    return build("j", parameters=[count])


def line_position(row: Parameter = None) -> ControlSequence:
    """VPA - Moves to the given line, keeping the character position."""

    return build("d", parameters=[row])


def line_forward(count: Parameter = None) -> ControlSequence:
    """VPR - Moves down by n lines, keeping the character position."""

    return build("e", parameters=[count])


def line_backward(count: Parameter = None) -> ControlSequence:
    """VPB - Moves up by n lines, keeping the character position."""

    return build("k", parameters=[count])


def character_and_line_position(
    row: Parameter, column: Parameter = None
) -> ControlSequence:
    """HVP - Character and line position.

    This is the format effector counterpart of `set_position`.
    """

    return build("f", parameters=[row, column])
