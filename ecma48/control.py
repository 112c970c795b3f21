"""The parameter encoder and the `ControlSequence` value.

A control sequence is laid out as:

    CSI P...P I...I F

...where `P...P` are the parameter bytes, `I...I` the intermediate bytes and `F` the
single final byte that identifies the control function.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, TextIO, TypeVar

from .characters import ControlCode

__all__ = [
    "ControlSequence",
    "ParameterError",
    "build",
    "encode_parameters",
]

Parameter = Optional[int]

EnumT = TypeVar("EnumT", bound=Enum)


class ParameterError(ValueError):
    """Raised when a value falls outside of the domain the standard defines for it."""


def _validate_parameter(value: object) -> None:
    """Raises `ParameterError` if the value is not an omitted or non-negative int."""

    if value is None:
        return

    if isinstance(value, bool) or not isinstance(value, int):
        raise ParameterError(
            f"Parameters must be non-negative integers or None, got {value!r}."
        )

    if value < 0:
        raise ParameterError(f"Parameters must not be negative, got {value!r}.")


def member(kind: type[EnumT], value: object) -> EnumT:
    """Returns the `kind` member for the given value.

    Plain values are looked up by value, so `member(EraseMode, 2)` gives
    `EraseMode.WHOLE`.

    Raises:
        ParameterError: The value does not name a member of `kind`.
    """

    if isinstance(value, bool):
        raise ParameterError(f"Expected a {kind.__name__} member, got {value!r}.")

    try:
        return kind(value)

    except ValueError:
        raise ParameterError(
            f"Expected a {kind.__name__} member, got {value!r}."
        ) from None


def encode_parameters(values: Iterable[Parameter]) -> str:
    """Encodes an ordered list of parameters into a parameter string.

    Args:
        values: The parameters. `None` marks an omitted parameter, which the receiving
            device replaces with the function's default value.

    Returns:
        The decimal values joined by `;`. Omitted parameters are left empty, and
        trailing omitted parameters are dropped entirely, as the standard allows. An
        empty list (or one containing only omitted values) encodes to "".
    """

    fields = []

    for value in values:
        _validate_parameter(value)
        fields.append("" if value is None else str(value))

    while fields and fields[-1] == "":
        fields.pop()

    return ";".join(fields)


@dataclass(frozen=True)
class ControlSequence:
    """A complete CSI sequence.

    Instances are immutable and validated on construction, so rendering one always
    gives a sequence that follows the standard's grammar. Use the typed functions in
    `cursor`, `editor`, `display` and friends instead of building these by hand.
    """

    final: str
    intermediates: str = ""
    parameters: tuple[Parameter, ...] = ()

    _computed: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.final) != 1 or not 0x40 <= ord(self.final) <= 0x7E:
            raise ParameterError(
                "The final byte must be a single character in 04/00-07/14,"
                + f" got {self.final!r}."
            )

        if any(not 0x20 <= ord(char) <= 0x2F for char in self.intermediates):
            raise ParameterError(
                "Intermediate bytes must be in 02/00-02/15,"
                + f" got {self.intermediates!r}."
            )

        object.__setattr__(self, "parameters", tuple(self.parameters))

        object.__setattr__(
            self,
            "_computed",
            str(ControlCode.CSI)
            + encode_parameters(self.parameters)
            + self.intermediates
            + self.final,
        )

    def __str__(self) -> str:
        return self._computed

    def __len__(self) -> int:
        return len(self._computed)

    def __add__(self, other: object) -> str:
        if not isinstance(other, (str, ControlSequence, ControlCode)):
            return NotImplemented

        return self._computed + str(other)

    def __radd__(self, other: object) -> str:
        if not isinstance(other, (str, ControlCode)):
            return NotImplemented

        return str(other) + self._computed

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self._computed == other

        if not isinstance(other, ControlSequence):
            return NotImplemented

        return self._computed == other._computed

    def __hash__(self) -> int:
        return hash(self._computed)

    def encode(self, encoding: str = "ascii") -> bytes:
        """Returns the sequence as bytes."""

        return self._computed.encode(encoding)

    def execute(self, stream: TextIO | None = None) -> None:
        """Writes this sequence to the given stream (standard output by default)."""

        from .formatting import execute  # pylint: disable=import-outside-toplevel

        execute(self, stream=stream)


def build(
    final: str, intermediates: str = "", parameters: Iterable[Parameter] = ()
) -> ControlSequence:
    """Creates a `ControlSequence`.

    Args:
        final: The final byte identifying the control function.
        intermediates: Any intermediate bytes, e.g. " " for the scroll left function.
        parameters: The ordered parameters of the function.
    """

    return ControlSequence(final, intermediates, tuple(parameters))
