"""Device related control sequences."""

from __future__ import annotations

from enum import IntEnum

from .control import ControlSequence, Parameter, build, member

__all__ = [
    "ControlString",
    "CopyStatus",
    "StatusReport",
    "device_attributes",
    "eject_and_feed",
    "function_key",
    "identify_control_string",
    "identify_graphic_repertoire",
    "media_copy",
    "report_status",
]


class StatusReport(IntEnum):
    """The parameter values of DSR."""

    READY = 0
    BUSY_RETRY = 1
    BUSY_WAITING = 2
    ERROR_RETRY = 3
    ERROR_WAITING = 4
    REQUEST_STATUS = 5
    """Requests a DSR from the receiving device."""

    REQUEST_POSITION = 6
    """Requests a CPR from the receiving device."""


class CopyStatus(IntEnum):
    """The parameter values of MC."""

    TO_PRIMARY = 0
    FROM_PRIMARY = 1
    TO_SECONDARY = 2
    FROM_SECONDARY = 3
    STOP_PRIMARY_RELAY = 4
    START_PRIMARY_RELAY = 5
    STOP_SECONDARY_RELAY = 6
    START_SECONDARY_RELAY = 7


def device_attributes(code: Parameter = None) -> ControlSequence:
    """DA - Device attributes.

    With an omitted (or 0) parameter this requests the receiving device to identify
    itself.
    """

    return build("c", parameters=[code])


def report_status(status: StatusReport) -> ControlSequence:
    """DSR - Device status report."""

    return build("n", parameters=[member(StatusReport, status).value])


def media_copy(status: CopyStatus) -> ControlSequence:
    """MC - Media copy."""

    return build("i", parameters=[member(CopyStatus, status).value])


def function_key(key: Parameter) -> ControlSequence:
    """FNK - Identifies the function key that has been operated."""

    return build("W", " ", [key])


class ControlString(IntEnum):
    """The parameter values of IDCS."""

    DIAGNOSTIC = 1
    """Reserved for the diagnostic state of the status report transfer mode."""

    DYNAMICALLY_REDEFINABLE = 2
    """Reserved for Dynamically Redefinable Character Sets, as in ECMA-35."""


def identify_control_string(purpose: ControlString) -> ControlSequence:
    """IDCS - Identifies the purpose of subsequent device control strings."""

    return build("O", " ", [member(ControlString, purpose).value])


def identify_graphic_repertoire(repertoire: Parameter) -> ControlSequence:
    """IGS - Identifies the ISO/IEC 7350 graphic repertoire used in subsequent text."""

    return build("M", " ", [repertoire])


def eject_and_feed(
    paper_bin: Parameter = None, stacker: Parameter = None
) -> ControlSequence:
    """SEF - Sheet eject and feed.

    Args:
        paper_bin: The paper bin to load the next sheet from. 0 means no sheet is
            loaded.
        stacker: The output stacker to eject the current sheet into. 0 means the
            sheet is not ejected.
    """

    return build("Y", " ", [paper_bin, stacker])
