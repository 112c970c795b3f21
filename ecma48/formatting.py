"""Helpers for formatting text and emitting sequences to a stream."""

from __future__ import annotations

import logging
import re
import sys
from typing import TextIO, Union

from .characters import ControlCode
from .control import ControlSequence
from .cursor import set_position
from .editor import EraseMode, erase_in_display
from .rendition import GraphicRendition, reset

__all__ = [
    "clear_screen",
    "execute",
    "strip",
    "width",
    "wrap",
]

logger = logging.getLogger(__name__)

SequenceLike = Union[ControlSequence, ControlCode, GraphicRendition, str]

RE_SEQUENCE = re.compile(
    r"\x1b\[[\x30-\x3f]*[\x20-\x2f]*[\x40-\x7e]|\x1b[\x40-\x5a\x5c-\x7e]"
)


def wrap(text: str, rendition: GraphicRendition) -> str:
    """Wraps some text between a rendition and the default rendition.

    The reset at the end makes sure the styling never bleeds into whatever is written
    after the text.
    """

    return str(rendition) + text + str(reset())


def strip(text: str) -> str:
    """Removes every control sequence and escape sequence from the text."""

    return RE_SEQUENCE.sub("", text)


def width(text: str) -> int:
    """Returns the length of some text, not counting any sequences within it."""

    return len(strip(text))


def execute(sequence: SequenceLike, stream: TextIO | None = None) -> None:
    """Writes a sequence to the stream and flushes it.

    Args:
        sequence: The sequence to write. Anything in this library that renders to a
            sequence is accepted, as well as plain strings.
        stream: The stream to write to. Defaults to `sys.stdout`, looked up at call
            time.

    Any error raised by the stream is propagated as-is.
    """

    if stream is None:
        stream = sys.stdout

    data = str(sequence)
    logger.debug("executing %r", data)

    stream.write(data)
    stream.flush()


def clear_screen(stream: TextIO | None = None) -> None:
    """Erases the whole display and moves the cursor to the first line and column."""

    execute(erase_in_display(EraseMode.WHOLE) + set_position(1, 1), stream=stream)
