"""The C0, C1 and independent control functions of ECMA-48.

Every member of `ControlCode` is defined by the standard itself, so this table is
closed: there is no way to construct a code at runtime.
"""

from __future__ import annotations

from enum import Enum
from typing import TextIO

__all__ = ["ControlCode", "ESC"]

ESC = "\x1b"


class ControlCode(Enum):
    """A single control function, with its 7-bit representation as the value.

    C0 codes are single characters. C1 codes and the independent control functions
    are represented by `ESC` followed by one character, which is the form that is safe
    to use in 7-bit environments.
    """

    # C0 set
    NUL = "\x00"
    SOH = "\x01"
    STX = "\x02"
    ETX = "\x03"
    EOT = "\x04"
    ENQ = "\x05"
    ACK = "\x06"
    BEL = "\x07"
    """Calls for attention, usually by ringing the terminal's bell."""

    BS = "\x08"
    HT = "\x09"
    LF = "\x0a"
    VT = "\x0b"
    FF = "\x0c"
    CR = "\x0d"
    SO = "\x0e"
    """Shift out. Called LOCKING-SHIFT ONE in 8-bit environments."""

    SI = "\x0f"
    """Shift in. Called LOCKING-SHIFT ZERO in 8-bit environments."""

    DLE = "\x10"
    DC1 = "\x11"
    DC2 = "\x12"
    DC3 = "\x13"
    DC4 = "\x14"
    NAK = "\x15"
    SYN = "\x16"
    ETB = "\x17"
    CAN = "\x18"
    EM = "\x19"
    SUB = "\x1a"
    ESC = ESC
    FS = "\x1c"
    GS = "\x1d"
    RS = "\x1e"
    US = "\x1f"
    SP = "\x20"
    DEL = "\x7f"

    LS0 = "\x0f"
    LS1 = "\x0e"
    IS1 = "\x1f"
    IS2 = "\x1e"
    IS3 = "\x1d"
    IS4 = "\x1c"

    # C1 set, 7-bit form
    BPH = ESC + "B"
    NBH = ESC + "C"
    NEL = ESC + "E"
    SSA = ESC + "F"
    ESA = ESC + "G"
    HTS = ESC + "H"
    HTJ = ESC + "I"
    VTS = ESC + "J"
    PLD = ESC + "K"
    PLU = ESC + "L"
    RI = ESC + "M"
    SS2 = ESC + "N"
    SS3 = ESC + "O"
    DCS = ESC + "P"
    PU1 = ESC + "Q"
    PU2 = ESC + "R"
    STS = ESC + "S"
    CCH = ESC + "T"
    MW = ESC + "U"
    SPA = ESC + "V"
    EPA = ESC + "W"
    SOS = ESC + "X"
    SCI = ESC + "Z"
    CSI = ESC + "["
    """Control sequence introducer, the prefix of every parameterized sequence."""

    ST = ESC + "\\"
    OSC = ESC + "]"
    PM = ESC + "^"
    APC = ESC + "_"

    # Independent control functions
    DMI = ESC + "`"
    INT = ESC + "a"
    EMI = ESC + "b"
    RIS = ESC + "c"
    """Reset to initial state."""

    CMD = ESC + "d"
    LS2 = ESC + "n"
    LS3 = ESC + "o"
    LS3R = ESC + "|"
    LS2R = ESC + "}"
    LS1R = ESC + "~"

    def __str__(self) -> str:
        return self.value

    def __add__(self, other: object) -> str:
        if not isinstance(other, (str, ControlCode)):
            return NotImplemented

        return self.value + str(other)

    def __radd__(self, other: object) -> str:
        if not isinstance(other, str):
            return NotImplemented

        return other + self.value

    @property
    def category(self) -> str:
        """Returns one of "C0", "C1", "independent" or "special".

        SP and DEL are not part of the C0 set and are reported as "special".
        """

        if len(self.value) == 1:
            return "C0" if ord(self.value) < 0x20 else "special"

        if 0x40 <= ord(self.value[1]) <= 0x5F:
            return "C1"

        return "independent"

    @property
    def eight_bit(self) -> str:
        """Returns the single character form of a C1 code, for 8-bit environments.

        Raises:
            ValueError: The code is not part of the C1 set.
        """

        if self.category != "C1":
            raise ValueError(f"Only C1 codes have an 8-bit form, got {self.name!r}.")

        return chr(0x80 + ord(self.value[1]) - 0x40)

    def encode(self, encoding: str = "ascii") -> bytes:
        """Returns the 7-bit representation as bytes."""

        return self.value.encode(encoding)

    def execute(self, stream: TextIO | None = None) -> None:
        """Writes this code to the given stream (standard output by default)."""

        from .formatting import execute  # pylint: disable=import-outside-toplevel

        execute(self, stream=stream)
