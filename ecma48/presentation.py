"""Presentation control functions: text layout, spacing, directions and fonts.

Most of these are aimed at printers and page-oriented devices. Video terminals
commonly ignore them, but they follow the same CSI grammar as every other control
sequence in this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO

from .control import ControlSequence, Parameter, ParameterError, build, member

__all__ = [
    "AlternativePresentation",
    "CharacterOrientation",
    "CharacterPath",
    "CharacterSpacing",
    "Combination",
    "Expansion",
    "ImplicitMovement",
    "Justification",
    "Layout",
    "LineSpacing",
    "PageFormat",
    "ParallelText",
    "PathEffect",
    "PresentationDirection",
    "PrintQuality",
    "SizeUnit",
    "StringDirection",
    "StringReversion",
    "add_separation",
    "character_combination",
    "character_orientation",
    "character_path",
    "character_spacing",
    "dimension_text",
    "directed",
    "expand_or_condense",
    "graphic_size",
    "graphic_size_selection",
    "implicit_movement",
    "justify",
    "line_home",
    "line_limit",
    "line_spacing",
    "page_format",
    "page_home",
    "page_limit",
    "parallel_texts",
    "print_quality",
    "quad",
    "reduce_separation",
    "reversed_string",
    "select_alternative",
    "select_directions",
    "select_font",
    "select_tabulation",
    "set_character_spacing",
    "set_line_spacing",
    "size_unit",
    "space_width",
    "spacing_increment",
    "tabulation_centered",
    "tabulation_centered_on",
    "tabulation_leading",
    "tabulation_trailing",
    "thin_space_width",
]


class CharacterOrientation(IntEnum):
    """The rotation of graphic characters selected by SCO, counterclockwise."""

    DEGREES_0 = 0
    DEGREES_45 = 1
    DEGREES_90 = 2
    DEGREES_135 = 3
    DEGREES_180 = 4
    DEGREES_225 = 5
    DEGREES_270 = 6
    DEGREES_315 = 7


class CharacterPath(IntEnum):
    """The character path selected by SCP."""

    LEFT_TO_RIGHT = 1
    """Left to right for horizontal lines, top to bottom for vertical ones."""

    RIGHT_TO_LEFT = 2
    """Right to left for horizontal lines, bottom to top for vertical ones."""


class PathEffect(IntEnum):
    """How SCP and SPD affect the content of the presentation and data components."""

    UNDEFINED = 0
    UPDATE_PRESENTATION = 1
    """The presentation component is updated to match the data component."""

    UPDATE_DATA = 2
    """The data component is updated to match the presentation component."""


class PresentationDirection(IntEnum):
    """The line orientation, line progression and character path selected by SPD.

    Names read as orientation, then line progression, then character path.
    """

    HORIZONTAL_TOP_TO_BOTTOM_LEFT_TO_RIGHT = 0
    VERTICAL_RIGHT_TO_LEFT_TOP_TO_BOTTOM = 1
    VERTICAL_LEFT_TO_RIGHT_TOP_TO_BOTTOM = 2
    HORIZONTAL_TOP_TO_BOTTOM_RIGHT_TO_LEFT = 3
    VERTICAL_LEFT_TO_RIGHT_BOTTOM_TO_TOP = 4
    HORIZONTAL_BOTTOM_TO_TOP_RIGHT_TO_LEFT = 5
    HORIZONTAL_BOTTOM_TO_TOP_LEFT_TO_RIGHT = 6
    VERTICAL_RIGHT_TO_LEFT_BOTTOM_TO_TOP = 7


class StringDirection(IntEnum):
    """The parameter values of SDS."""

    END = 0
    """Ends a directed string and restores the previous direction."""

    LEFT_TO_RIGHT = 1
    RIGHT_TO_LEFT = 2


class StringReversion(IntEnum):
    """The parameter values of SRS."""

    END = 0
    BEGIN = 1


class ImplicitMovement(IntEnum):
    """The direction of implicit movement selected by SIMD."""

    SAME = 0
    """The same direction as the character progression."""

    OPPOSITE = 1


class Justification(IntEnum):
    """The parameter values of JFY."""

    NONE = 0
    WORD_FILL = 1
    WORD_SPACE = 2
    LETTER_SPACE = 3
    HYPHENATION = 4
    FLUSH_HOME = 5
    CENTER = 6
    FLUSH_LIMIT = 7
    ITALIAN_HYPHENATION = 8


class Layout(IntEnum):
    """The parameter values of QUAD."""

    FLUSH_HOME = 0
    FLUSH_HOME_AND_FILL = 1
    CENTER = 2
    CENTER_AND_FILL = 3
    FLUSH_LIMIT = 4
    FLUSH_LIMIT_AND_FILL = 5
    FLUSH_BOTH = 6


class ParallelText(IntEnum):
    """The parameter values of PTX."""

    END = 0
    BEGIN_PRINCIPAL = 1
    BEGIN_SUPPLEMENTARY = 2
    BEGIN_JAPANESE_PHONETIC = 3
    """Supplementary phonetic annotation of Japanese Kanji."""

    BEGIN_CHINESE_PHONETIC = 4
    """Supplementary phonetic annotation of Chinese Hanzi."""

    END_PHONETIC = 5


class Combination(IntEnum):
    """The parameter values of GCC."""

    PAIR = 0
    """The next two graphic characters are imaged as a single symbol."""

    START = 1
    END = 2


class Expansion(IntEnum):
    """The parameter values of PEC."""

    NORMAL = 0
    EXPANDED = 1
    CONDENSED = 2


class SizeUnit(IntEnum):
    """The unit selected by SSU, used by the other spacing and size functions."""

    CHARACTER = 0
    MILLIMETER = 1
    COMPUTER_DECIPOINT = 2
    DECIDIDOT = 3
    MIL = 4
    BASIC_MEASURING_UNIT = 5
    MICROMETER = 6
    PIXEL = 7
    DECIPOINT = 8


class CharacterSpacing(IntEnum):
    """The parameter values of SHS."""

    PER_25MM_10_CHARACTERS = 0
    PER_25MM_12_CHARACTERS = 1
    PER_25MM_15_CHARACTERS = 2
    PER_25MM_6_CHARACTERS = 3
    PER_25MM_3_CHARACTERS = 4
    PER_50MM_9_CHARACTERS = 5
    PER_25MM_4_CHARACTERS = 6


class LineSpacing(IntEnum):
    """The parameter values of SVS."""

    PER_25MM_6_LINES = 0
    PER_25MM_4_LINES = 1
    PER_25MM_3_LINES = 2
    PER_25MM_12_LINES = 3
    PER_25MM_8_LINES = 4
    PER_30MM_6_LINES = 5
    PER_30MM_4_LINES = 6
    PER_30MM_3_LINES = 7
    PER_30MM_12_LINES = 8
    PER_25MM_2_LINES = 9


class PageFormat(IntEnum):
    """The parameter values of PFS."""

    TALL_TEXT = 0
    WIDE_TEXT = 1
    TALL_A4 = 2
    WIDE_A4 = 3
    TALL_LETTER = 4
    WIDE_LETTER = 5
    TALL_EXTENDED_A4 = 6
    WIDE_EXTENDED_A4 = 7
    TALL_LEGAL = 8
    WIDE_LEGAL = 9
    A4_SHORT_LINES = 10
    A4_LONG_LINES = 11
    B5_SHORT_LINES = 12
    B5_LONG_LINES = 13
    B4_SHORT_LINES = 14
    B4_LONG_LINES = 15


class PrintQuality(IntEnum):
    """The parameter values of SPQR."""

    HIGHEST = 0
    MEDIUM = 1
    DRAFT = 2


VARIANTS = {
    "default": 0,
    "latin_decimal": 1,
    "arabic_decimal": 2,
    "mirror_horizontal": 3,
    "mirror_vertical": 4,
    "isolated": 5,
    "initial": 6,
    "medial": 7,
    "final": 8,
    "decimal_stop": 9,
    "decimal_comma": 10,
    "vowel_above_or_below": 11,
    "vowel_after": 12,
    "ligature_aleph": 13,
    "no_ligature": 14,
    "no_mirror": 15,
    "no_vowel": 16,
    "italic_direction": 17,
    "no_context_with_digit": 18,
    "no_context": 19,
    "device_digits": 20,
    "establish_form": 21,
    "cancel_form": 22,
}


def _single(final: str, kind: type[IntEnum], value: object) -> ControlSequence:
    return build(final, " ", [member(kind, value).value])


@dataclass(frozen=True)
class AlternativePresentation:
    """An ordered set of SAPV parameters.

    Works like `GraphicRendition`: every method returns a new value with the
    parameter appended, in call order.
    """

    codes: tuple[int, ...] = ()

    _sequence: ControlSequence = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        codes = tuple(self.codes)

        for code in codes:
            if isinstance(code, bool) or code not in VARIANTS.values():
                raise ParameterError(
                    f"SAPV codes must be integers in 0-22, got {code!r}."
                )

        object.__setattr__(self, "codes", codes)
        object.__setattr__(self, "_sequence", build("]", " ", codes))

    def __str__(self) -> str:
        return str(self._sequence)

    def add(self, *codes: int) -> AlternativePresentation:
        """Returns a new value with the given raw parameters appended."""

        return AlternativePresentation(self.codes + codes)

    def render(self) -> ControlSequence:
        return self._sequence

    def encode(self, encoding: str = "ascii") -> bytes:
        return self._sequence.encode(encoding)

    def execute(self, stream: TextIO | None = None) -> None:
        self._sequence.execute(stream)

    def default(self) -> AlternativePresentation:
        """Cancels every preceding variant."""

        return self.add(VARIANTS["default"])

    def latin_decimal(self) -> AlternativePresentation:
        """Decimal digits are presented with Latin glyphs."""

        return self.add(VARIANTS["latin_decimal"])

    def arabic_decimal(self) -> AlternativePresentation:
        """Decimal digits are presented with Arabic glyphs."""

        return self.add(VARIANTS["arabic_decimal"])

    def mirror_horizontal(self) -> AlternativePresentation:
        """Paired characters (parentheses, brackets) are mirrored horizontally."""

        return self.add(VARIANTS["mirror_horizontal"])

    def mirror_vertical(self) -> AlternativePresentation:
        return self.add(VARIANTS["mirror_vertical"])

    def isolated(self) -> AlternativePresentation:
        """The next character is presented in its isolated form."""

        return self.add(VARIANTS["isolated"])

    def initial(self) -> AlternativePresentation:
        return self.add(VARIANTS["initial"])

    def medial(self) -> AlternativePresentation:
        return self.add(VARIANTS["medial"])

    def final(self) -> AlternativePresentation:
        return self.add(VARIANTS["final"])

    def decimal_stop(self) -> AlternativePresentation:
        """FULL STOP is used as the decimal mark."""

        return self.add(VARIANTS["decimal_stop"])

    def decimal_comma(self) -> AlternativePresentation:
        """COMMA is used as the decimal mark."""

        return self.add(VARIANTS["decimal_comma"])

    def vowel_above_or_below(self) -> AlternativePresentation:
        return self.add(VARIANTS["vowel_above_or_below"])

    def vowel_after(self) -> AlternativePresentation:
        return self.add(VARIANTS["vowel_after"])

    def ligature_aleph(self) -> AlternativePresentation:
        """Contextual shape of the Arabic LAM-ALEPH ligature."""

        return self.add(VARIANTS["ligature_aleph"])

    def no_ligature(self) -> AlternativePresentation:
        return self.add(VARIANTS["no_ligature"])

    def no_mirror(self) -> AlternativePresentation:
        return self.add(VARIANTS["no_mirror"])

    def no_vowel(self) -> AlternativePresentation:
        return self.add(VARIANTS["no_vowel"])

    def italic_direction(self) -> AlternativePresentation:
        """Italic slant follows the character path."""

        return self.add(VARIANTS["italic_direction"])

    def no_context_with_digit(self) -> AlternativePresentation:
        return self.add(VARIANTS["no_context_with_digit"])

    def no_context(self) -> AlternativePresentation:
        return self.add(VARIANTS["no_context"])

    def device_digits(self) -> AlternativePresentation:
        """Digits are presented the way the device presents them by default."""

        return self.add(VARIANTS["device_digits"])

    def establish_form(self) -> AlternativePresentation:
        """Keeps the current isolated, initial, medial or final form in effect."""

        return self.add(VARIANTS["establish_form"])

    def cancel_form(self) -> AlternativePresentation:
        return self.add(VARIANTS["cancel_form"])


def select_alternative() -> AlternativePresentation:
    """Returns an empty SAPV builder."""

    return AlternativePresentation()


def dimension_text(lines: Parameter, characters: Parameter) -> ControlSequence:
    """DTA - Dimension text area, in the unit selected by `size_unit`.

    Args:
        lines: The dimension perpendicular to the line orientation.
        characters: The dimension parallel to the line orientation.
    """

    return build("T", " ", [lines, characters])


def select_font(font: int, identifier: Parameter = None) -> ControlSequence:
    """FNT - Identifies the font used as the primary (0) or an alternative one.

    The selected font is put to use by the SGR font parameters.
    """

    if isinstance(font, bool) or not isinstance(font, int) or not 0 <= font <= 9:
        raise ParameterError(f"Font index must be in 0-9, got {font!r}.")

    return build("D", " ", [font, identifier])


def character_combination(combination: Combination) -> ControlSequence:
    """GCC - Graphic character combination."""

    return _single("_", Combination, combination)


def graphic_size(height: Parameter, width: Parameter) -> ControlSequence:
    """GSM - Modifies the graphic size, as percentages of the size set by GSS."""

    return build("B", " ", [height, width])


def graphic_size_selection(size: Parameter) -> ControlSequence:
    """GSS - Graphic size selection, in the unit selected by `size_unit`."""

    return build("C", " ", [size])


def justify(*modes: Justification) -> ControlSequence:
    """JFY - Justify.

    Without any modes, justification is turned off.
    """

    return build("F", " ", [member(Justification, mode).value for mode in modes])


def expand_or_condense(expansion: Expansion) -> ControlSequence:
    """PEC - Presentation expand or contract."""

    return _single("Z", Expansion, expansion)


def page_format(page: PageFormat) -> ControlSequence:
    """PFS - Page format selection."""

    return _single("J", PageFormat, page)


def parallel_texts(delimiter: ParallelText) -> ControlSequence:
    """PTX - Delimits strings of text meant to be presented in parallel."""

    return build("\\", parameters=[member(ParallelText, delimiter).value])


def quad(*layouts: Layout) -> ControlSequence:
    """QUAD - Ends the string of graphic characters to be positioned on a line."""

    return build("H", " ", [member(Layout, layout).value for layout in layouts])


def add_separation(amount: Parameter) -> ControlSequence:
    """SACS - Adds space between graphic characters, in the unit of `size_unit`."""

    return build("\\", " ", [amount])


def reduce_separation(amount: Parameter) -> ControlSequence:
    """SRCS - Reduces the space between graphic characters."""

    return build("f", " ", [amount])


def character_orientation(orientation: CharacterOrientation) -> ControlSequence:
    """SCO - Select character orientation."""

    return _single("e", CharacterOrientation, orientation)


def character_path(
    path: CharacterPath, effect: PathEffect = PathEffect.UNDEFINED
) -> ControlSequence:
    """SCP - Select character path."""

    return build(
        "k",
        " ",
        [member(CharacterPath, path).value, member(PathEffect, effect).value],
    )


def select_directions(
    direction: PresentationDirection, effect: PathEffect = PathEffect.UNDEFINED
) -> ControlSequence:
    """SPD - Select presentation directions."""

    return build(
        "S",
        " ",
        [
            member(PresentationDirection, direction).value,
            member(PathEffect, effect).value,
        ],
    )


def directed(direction: StringDirection) -> ControlSequence:
    """SDS - Starts or ends a directed string."""

    return build("]", parameters=[member(StringDirection, direction).value])


def reversed_string(reversion: StringReversion) -> ControlSequence:
    """SRS - Starts or ends a reversed string."""

    return build("[", parameters=[member(StringReversion, reversion).value])


def implicit_movement(movement: ImplicitMovement) -> ControlSequence:
    """SIMD - Select implicit movement direction."""

    return build("^", parameters=[member(ImplicitMovement, movement).value])


def character_spacing(spacing: CharacterSpacing) -> ControlSequence:
    """SHS - Select character spacing."""

    return _single("K", CharacterSpacing, spacing)


def set_character_spacing(spacing: Parameter) -> ControlSequence:
    """SCS - Set character spacing, in the unit selected by `size_unit`."""

    return build("g", " ", [spacing])


def line_spacing(spacing: LineSpacing) -> ControlSequence:
    """SVS - Select line spacing."""

    return _single("L", LineSpacing, spacing)


def set_line_spacing(spacing: Parameter) -> ControlSequence:
    """SLS - Set line spacing, in the unit selected by `size_unit`."""

    return build("h", " ", [spacing])


def spacing_increment(line: Parameter, character: Parameter) -> ControlSequence:
    """SPI - Sets both line and character spacing at once."""

    return build("G", " ", [line, character])


def size_unit(unit: SizeUnit) -> ControlSequence:
    """SSU - Select size unit."""

    return _single("I", SizeUnit, unit)


def print_quality(quality: PrintQuality) -> ControlSequence:
    """SPQR - Select print quality and rapidity."""

    return _single("X", PrintQuality, quality)


def line_home(column: Parameter) -> ControlSequence:
    """SLH - Sets the position CR, NEL, IL and DL return to in the active line."""

    return build("U", " ", [column])


def line_limit(column: Parameter) -> ControlSequence:
    """SLL - Sets the last character position of the active line."""

    return build("V", " ", [column])


def page_home(line: Parameter) -> ControlSequence:
    """SPH - Sets the line FF moves to on the active page."""

    return build("i", " ", [line])


def page_limit(line: Parameter) -> ControlSequence:
    """SPL - Sets the last line of the active page."""

    return build("j", " ", [line])


def space_width(width: Parameter) -> ControlSequence:
    """SSW - Sets the escapement of SPACE."""

    return build("[", " ", [width])


def thin_space_width(width: Parameter) -> ControlSequence:
    """TSS - Thin space specification."""

    return build("E", " ", [width])


def select_tabulation(stops: Parameter) -> ControlSequence:
    """STAB - Selects one of the tabulation stop sets defined in ISO 8613-6."""

    return build("^", " ", [stops])


def tabulation_centered(column: Parameter) -> ControlSequence:
    """TAC - Sets a tabulation stop that centres text upon it."""

    return build("b", " ", [column])


def tabulation_leading(column: Parameter) -> ControlSequence:
    """TALE - Sets a tabulation stop that aligns the leading edge of text on it."""

    return build("a", " ", [column])


def tabulation_trailing(column: Parameter) -> ControlSequence:
    """TATE - Sets a tabulation stop that aligns the trailing edge of text on it."""

    return build("`", " ", [column])


def tabulation_centered_on(column: Parameter, character: int) -> ControlSequence:
    """TCC - Sets a tabulation stop that centres text on the given character.

    Args:
        column: The character position of the stop.
        character: The code of the graphic character to centre on, in 32-127.
    """

    if (
        isinstance(character, bool)
        or not isinstance(character, int)
        or not 32 <= character <= 127
    ):
        raise ParameterError(f"TCC characters must be in 32-127, got {character!r}.")

    return build("c", " ", [column, character])
