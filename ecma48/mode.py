"""Set Mode (SM) and Reset Mode (RM)."""

from __future__ import annotations

from enum import IntEnum

from .control import ControlSequence, ParameterError, build, member

__all__ = ["Mode", "reset_mode", "set_mode"]


class Mode(IntEnum):
    """The modes defined by ECMA-48, valued by their SM/RM parameter."""

    GUARDED_AREA_TRANSFER = 1
    KEYBOARD_ACTION = 2
    CONTROL_REPRESENTATION = 3
    INSERTION_REPLACEMENT = 4
    STATUS_REPORT_TRANSFER = 5
    ERASURE = 6
    LINE_EDITING = 7
    BI_DIRECTIONAL_SUPPORT = 8
    DEVICE_COMPONENT_SELECT = 9
    CHARACTER_EDITING = 10
    POSITIONING_UNIT = 11
    SEND_RECEIVE = 12
    FORMAT_EFFECTOR_ACTION = 13
    FORMAT_EFFECTOR_TRANSFER = 14
    MULTIPLE_AREA_TRANSFER = 15
    TRANSFER_TERMINATION = 16
    SELECTED_AREA_TRANSFER = 17
    TABULATION_STOP = 18
    GRAPHIC_RENDITION_COMBINATION = 21
    ZERO_DEFAULT = 22


def _modes(final: str, modes: tuple[Mode, ...]) -> ControlSequence:
    if not modes:
        raise ParameterError("At least one mode must be given.")

    return build(final, parameters=[member(Mode, mode).value for mode in modes])


def set_mode(*modes: Mode) -> ControlSequence:
    """SM - Sets every given mode, in order."""

    return _modes("h", modes)


def reset_mode(*modes: Mode) -> ControlSequence:
    """RM - Resets every given mode, in order."""

    return _modes("l", modes)
