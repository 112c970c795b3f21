"""Scrolling and page navigation."""

from __future__ import annotations

from enum import Enum

from .control import ControlSequence, Parameter, build, member

__all__ = [
    "ScrollDirection",
    "next_page",
    "page_backward",
    "page_forward",
    "page_position",
    "previous_page",
    "scroll",
    "scroll_down",
    "scroll_left",
    "scroll_right",
    "scroll_up",
]


class ScrollDirection(Enum):
    """The direction the data appears to move in, valued by (intermediates, final)."""

    UP = ("", "S")
    DOWN = ("", "T")
    LEFT = (" ", "@")
    RIGHT = (" ", "A")


def scroll(direction: ScrollDirection, count: Parameter = None) -> ControlSequence:
    """Scrolls the data by n positions.

    The active position is not affected.
    """

    intermediates, final = member(ScrollDirection, direction).value

    return build(final, intermediates, [count])


def scroll_up(count: Parameter = None) -> ControlSequence:
    """SU - Scroll up."""

    return scroll(ScrollDirection.UP, count)


def scroll_down(count: Parameter = None) -> ControlSequence:
    """SD - Scroll down."""

    return scroll(ScrollDirection.DOWN, count)


def scroll_left(count: Parameter = None) -> ControlSequence:
    """SL - Scroll left."""

    return scroll(ScrollDirection.LEFT, count)


def scroll_right(count: Parameter = None) -> ControlSequence:
    """SR - Scroll right."""

    return scroll(ScrollDirection.RIGHT, count)


def next_page(count: Parameter = None) -> ControlSequence:
    """NP - Displays the n-th following page."""

    return build("U", parameters=[count])


def previous_page(count: Parameter = None) -> ControlSequence:
    """PP - Displays the n-th preceding page."""

    return build("V", parameters=[count])


def page_position(page: Parameter = None) -> ControlSequence:
    """PPA - Moves the active data position to the same place on the n-th page."""

    return build("P", " ", [page])


def page_forward(count: Parameter = None) -> ControlSequence:
    """PPR - Moves the active data position to the n-th following page."""

    return build("Q", " ", [count])


def page_backward(count: Parameter = None) -> ControlSequence:
    """PPB - Moves the active data position to the n-th preceding page."""

    return build("R", " ", [count])
