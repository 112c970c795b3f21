"""The GraphicRendition builder, which produces SGR sequences."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO

from .characters import ControlCode
from .control import ControlSequence, ParameterError, build

__all__ = [
    "GraphicRendition",
    "StandardColor",
    "reset",
    "select_graphic",
]

SETTERS = {
    "default": 0,
    "bold": 1,
    "faint": 2,
    "italic": 3,
    "underline": 4,
    "blink": 5,
    "fast_blink": 6,
    "reverse": 7,
    "conceal": 8,
    "strikethrough": 9,
    "gothic": 20,
    "double_underline": 21,
    "framed": 51,
    "encircled": 52,
    "overline": 53,
    "ideogram_underline": 60,
    "ideogram_double_underline": 61,
    "ideogram_overline": 62,
    "ideogram_double_overline": 63,
    "ideogram_stress": 64,
}

UNSETTERS = {
    "normal_intensity": 22,
    "not_italic": 23,
    "not_underline": 24,
    "steady": 25,
    "positive": 27,
    "reveal": 28,
    "not_strikethrough": 29,
    "foreground_default": 39,
    "background_default": 49,
    "not_framed": 54,
    "not_overline": 55,
    "ideogram_cancel": 65,
}

FOREGROUND_BASE = 30
BACKGROUND_BASE = 40
BRIGHT_OFFSET = 60

EXTENDED_FOREGROUND = 38
EXTENDED_BACKGROUND = 48
EXTENDED_INDEXED = 5
EXTENDED_RGB = 2


class StandardColor(IntEnum):
    """The eight colors every SGR-capable device knows about."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


def _to_standard_color(value: StandardColor | str) -> StandardColor:
    """Looks up a color by its name, e.g. "red"."""

    if isinstance(value, StandardColor):
        return value

    try:
        return StandardColor[str(value).upper()]

    except KeyError:
        raise ValueError(f"Unknown color name, got {value!r}.") from None


def _validate_component(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 256:
        raise ParameterError(f"{what} must be an integer in 0-255, got {value!r}.")

    return value


@dataclass(frozen=True)
class GraphicRendition:  # pylint: disable=too-many-public-methods
    """An ordered set of SGR parameters.

    Renditions are immutable: every method returns a new rendition with the given
    parameters appended, so calls can be chained:

        select_graphic().foreground("red").bold().underline()

    The parameters are emitted exactly in call order. Terminals apply them left to
    right, so a later parameter of the same category overrides an earlier one.
    """

    codes: tuple[int, ...] = ()

    _sequence: ControlSequence = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        codes = tuple(self.codes)

        for code in codes:
            if isinstance(code, bool) or not isinstance(code, int) or code < 0:
                raise ParameterError(
                    f"SGR codes must be non-negative integers, got {code!r}."
                )

        object.__setattr__(self, "codes", codes)
        object.__setattr__(self, "_sequence", build("m", parameters=codes))

    def __str__(self) -> str:
        return str(self._sequence)

    def __add__(self, other: object) -> str:
        if not isinstance(other, (str, ControlSequence, ControlCode)):
            return NotImplemented

        return str(self) + str(other)

    def __radd__(self, other: object) -> str:
        if not isinstance(other, (str, ControlSequence, ControlCode)):
            return NotImplemented

        return str(other) + str(self)

    def __bool__(self) -> bool:
        """Returns whether any parameters have been added."""

        return len(self.codes) > 0

    @classmethod
    def from_names(cls, *names: str) -> GraphicRendition:
        """Creates a rendition from attribute names, in order.

        Names may be any of the setter or unsetter method names (e.g. "bold",
        "not_italic"), a color name for the foreground ("red"), or a color name
        prefixed by "on_" for the background ("on_blue").
        """

        rendition = cls()

        for name in names:
            key = name.lower().replace("-", "_")

            if key in SETTERS:
                rendition = rendition.add(SETTERS[key])

            elif key in UNSETTERS:
                rendition = rendition.add(UNSETTERS[key])

            elif key.startswith("on_"):
                rendition = rendition.background(key[3:])

            else:
                rendition = rendition.foreground(key)

        return rendition

    def add(self, *codes: int) -> GraphicRendition:
        """Returns a new rendition with the given raw parameters appended."""

        return GraphicRendition(self.codes + codes)

    def render(self) -> ControlSequence:
        """Returns the SGR control sequence for this rendition.

        A rendition without parameters renders as `CSI m`, which the standard defines
        as the default rendition since an omitted SGR parameter means 0.
        """

        return self._sequence

    def encode(self, encoding: str = "ascii") -> bytes:
        """Returns the rendered SGR sequence as bytes."""

        return self._sequence.encode(encoding)

    def execute(self, stream: TextIO | None = None) -> None:
        """Writes the rendered SGR sequence to the stream (standard output by default)."""

        self._sequence.execute(stream)

    def default(self) -> GraphicRendition:
        """Cancels every preceding rendition aspect."""

        return self.add(SETTERS["default"])

    def bold(self) -> GraphicRendition:
        """Bold, or increased intensity."""

        return self.add(SETTERS["bold"])

    def faint(self) -> GraphicRendition:
        """Faint, or decreased intensity."""

        return self.add(SETTERS["faint"])

    def italic(self) -> GraphicRendition:
        return self.add(SETTERS["italic"])

    def underline(self) -> GraphicRendition:
        return self.add(SETTERS["underline"])

    def blink(self) -> GraphicRendition:
        """Slow blink, less than 150 per minute."""

        return self.add(SETTERS["blink"])

    def fast_blink(self) -> GraphicRendition:
        """Rapid blink, 150 per minute or more."""

        return self.add(SETTERS["fast_blink"])

    def reverse(self) -> GraphicRendition:
        """Negative image, swapping foreground and background."""

        return self.add(SETTERS["reverse"])

    def conceal(self) -> GraphicRendition:
        return self.add(SETTERS["conceal"])

    def strikethrough(self) -> GraphicRendition:
        """Crossed-out, characters still legible but marked for deletion."""

        return self.add(SETTERS["strikethrough"])

    def font(self, index: int) -> GraphicRendition:
        """Selects the primary font (0) or one of the nine alternative fonts."""

        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index <= 9:
            raise ParameterError(f"Font index must be in 0-9, got {index!r}.")

        return self.add(10 + index)

    def gothic(self) -> GraphicRendition:
        """Fraktur (Gothic) font."""

        return self.add(SETTERS["gothic"])

    def double_underline(self) -> GraphicRendition:
        return self.add(SETTERS["double_underline"])

    def normal_intensity(self) -> GraphicRendition:
        """Neither bold nor faint."""

        return self.add(UNSETTERS["normal_intensity"])

    def not_italic(self) -> GraphicRendition:
        """Not italicized, not Gothic."""

        return self.add(UNSETTERS["not_italic"])

    def not_underline(self) -> GraphicRendition:
        """Neither singly nor doubly underlined."""

        return self.add(UNSETTERS["not_underline"])

    def steady(self) -> GraphicRendition:
        """Not blinking."""

        return self.add(UNSETTERS["steady"])

    def positive(self) -> GraphicRendition:
        """Positive image, undoing `reverse`."""

        return self.add(UNSETTERS["positive"])

    def reveal(self) -> GraphicRendition:
        """Revealed characters, undoing `conceal`."""

        return self.add(UNSETTERS["reveal"])

    def not_strikethrough(self) -> GraphicRendition:
        return self.add(UNSETTERS["not_strikethrough"])

    def framed(self) -> GraphicRendition:
        return self.add(SETTERS["framed"])

    def encircled(self) -> GraphicRendition:
        return self.add(SETTERS["encircled"])

    def overline(self) -> GraphicRendition:
        return self.add(SETTERS["overline"])

    def not_framed(self) -> GraphicRendition:
        """Neither framed nor encircled."""

        return self.add(UNSETTERS["not_framed"])

    def not_overline(self) -> GraphicRendition:
        return self.add(UNSETTERS["not_overline"])

    def ideogram_underline(self) -> GraphicRendition:
        """Ideogram underline, or right side line."""

        return self.add(SETTERS["ideogram_underline"])

    def ideogram_double_underline(self) -> GraphicRendition:
        """Ideogram double underline, or double line on the right side."""

        return self.add(SETTERS["ideogram_double_underline"])

    def ideogram_overline(self) -> GraphicRendition:
        """Ideogram overline, or left side line."""

        return self.add(SETTERS["ideogram_overline"])

    def ideogram_double_overline(self) -> GraphicRendition:
        """Ideogram double overline, or double line on the left side."""

        return self.add(SETTERS["ideogram_double_overline"])

    def ideogram_stress(self) -> GraphicRendition:
        return self.add(SETTERS["ideogram_stress"])

    def ideogram_cancel(self) -> GraphicRendition:
        """Cancels the effect of the other ideogram renditions."""

        return self.add(UNSETTERS["ideogram_cancel"])

    def foreground(
        self, color: StandardColor | str, bright: bool = False
    ) -> GraphicRendition:
        """Sets the foreground to one of the standard colors.

        Args:
            color: A `StandardColor`, or its lowercase name.
            bright: If set, the bright (aixterm) variant in 90-97 is used.
        """

        code = FOREGROUND_BASE + _to_standard_color(color)

        return self.add(code + BRIGHT_OFFSET * bright)

    def background(
        self, color: StandardColor | str, bright: bool = False
    ) -> GraphicRendition:
        """Sets the background to one of the standard colors.

        Args:
            color: A `StandardColor`, or its lowercase name.
            bright: If set, the bright (aixterm) variant in 100-107 is used.
        """

        code = BACKGROUND_BASE + _to_standard_color(color)

        return self.add(code + BRIGHT_OFFSET * bright)

    def foreground_default(self) -> GraphicRendition:
        return self.add(UNSETTERS["foreground_default"])

    def background_default(self) -> GraphicRendition:
        return self.add(UNSETTERS["background_default"])

    def foreground_indexed(self, index: int) -> GraphicRendition:
        """Sets the foreground to an entry of the 256 color palette (`38;5;n`)."""

        _validate_component(index, "Color index")

        return self.add(EXTENDED_FOREGROUND, EXTENDED_INDEXED, index)

    def background_indexed(self, index: int) -> GraphicRendition:
        """Sets the background to an entry of the 256 color palette (`48;5;n`)."""

        _validate_component(index, "Color index")

        return self.add(EXTENDED_BACKGROUND, EXTENDED_INDEXED, index)

    def foreground_rgb(self, red: int, green: int, blue: int) -> GraphicRendition:
        """Sets the foreground to a direct RGB color (`38;2;r;g;b`)."""

        for value in (red, green, blue):
            _validate_component(value, "RGB components")

        return self.add(EXTENDED_FOREGROUND, EXTENDED_RGB, red, green, blue)

    def background_rgb(self, red: int, green: int, blue: int) -> GraphicRendition:
        """Sets the background to a direct RGB color (`48;2;r;g;b`)."""

        for value in (red, green, blue):
            _validate_component(value, "RGB components")

        return self.add(EXTENDED_BACKGROUND, EXTENDED_RGB, red, green, blue)


def select_graphic() -> GraphicRendition:
    """Returns an empty rendition to build upon."""

    return GraphicRendition()


def reset() -> GraphicRendition:
    """Returns the explicit default rendition, `CSI 0 m`."""

    return GraphicRendition().default()
