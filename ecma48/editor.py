"""Erasure and editing control functions."""

from __future__ import annotations

from enum import IntEnum

from .control import ControlSequence, Parameter, ParameterError, build, member

__all__ = [
    "EditingExtent",
    "EraseMode",
    "Qualification",
    "area_qualification",
    "delete_character",
    "delete_line",
    "erase_character",
    "erase_in_area",
    "erase_in_display",
    "erase_in_field",
    "erase_in_line",
    "insert_character",
    "insert_line",
    "repeat",
    "select_extent",
]


class EraseMode(IntEnum):
    """Which part of the page, line, field or area an erasure applies to."""

    TO_END = 0
    """From the active position to the end, inclusive."""

    TO_START = 1
    """From the beginning up to the active position, inclusive."""

    WHOLE = 2

    WHOLE_AND_SCROLLBACK = 3
    """The whole display and its scroll-back buffer. Only valid for ED."""


class EditingExtent(IntEnum):
    """The parameter values of SEE."""

    PAGE = 0
    LINE = 1
    FIELD = 2
    QUALIFIED_AREA = 3
    RELEVANT = 4


def _erase(final: str, mode: EraseMode) -> ControlSequence:
    mode = member(EraseMode, mode)

    if mode is EraseMode.WHOLE_AND_SCROLLBACK:
        raise ParameterError(
            f"{mode.name} is only valid for erase in display, not for {final!r}."
        )

    return build(final, parameters=[mode.value])


def erase_in_display(mode: EraseMode = EraseMode.TO_END) -> ControlSequence:
    """ED - Erase in page.

    All four modes share the final byte `J` and differ only in their parameter.
    """

    return build("J", parameters=[member(EraseMode, mode).value])


def erase_in_line(mode: EraseMode = EraseMode.TO_END) -> ControlSequence:
    """EL - Erase in line."""

    return _erase("K", mode)


def erase_in_field(mode: EraseMode = EraseMode.TO_END) -> ControlSequence:
    """EF - Erase in field."""

    return _erase("N", mode)


def erase_in_area(mode: EraseMode = EraseMode.TO_END) -> ControlSequence:
    """EA - Erase in area."""

    return _erase("O", mode)


def erase_character(count: Parameter = None) -> ControlSequence:
    """ECH - Erases n characters, starting at the active position."""

    return build("X", parameters=[count])


def insert_character(count: Parameter = None) -> ControlSequence:
    """ICH - Makes room for n characters at the active position."""

    return build("@", parameters=[count])


def insert_line(count: Parameter = None) -> ControlSequence:
    """IL - Makes room for n lines at the active line."""

    return build("L", parameters=[count])


def delete_character(count: Parameter = None) -> ControlSequence:
    """DCH - Deletes n characters, starting at the active position."""

    return build("P", parameters=[count])


def delete_line(count: Parameter = None) -> ControlSequence:
    """DL - Deletes n lines, starting at the active line."""

    return build("M", parameters=[count])


def repeat(count: Parameter = None) -> ControlSequence:
    """REP - Repeats the preceding graphic character n times."""

    return build("b", parameters=[count])


def select_extent(extent: EditingExtent) -> ControlSequence:
    """SEE - Selects the part of the page that insertion and deletion affect."""

    return build("Q", parameters=[member(EditingExtent, extent).value])


class Qualification(IntEnum):
    """The parameter values of DAQ."""

    UNPROTECTED = 0
    """Unprotected and unguarded."""

    PROTECTED_GUARDED = 1
    GRAPHIC_CHARACTER_INPUT = 2
    NUMERIC_INPUT = 3
    ALPHABETIC_INPUT = 4
    ALIGN_LAST = 5
    """Input aligned on the last character position of the area."""

    FILL_ZEROS = 6
    CHARACTER_TABULATION_STOP = 7
    """Sets a character tabulation stop at the active presentation position."""

    PROTECTED_UNGUARDED = 8
    FILL_SPACES = 9
    ALIGN_FIRST = 10
    """Input aligned on the first character position of the area."""

    REVERSE = 11
    """The order of the character positions in the input field is reversed."""


def area_qualification(qualification: Qualification) -> ControlSequence:
    """DAQ - Marks the active position as the first of a qualified area."""

    return build("o", parameters=[member(Qualification, qualification).value])
