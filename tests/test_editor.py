import pytest

from ecma48 import ParameterError, editor
from ecma48.editor import EditingExtent, EraseMode, Qualification


def test_editor_erase_in_display():
    sequences = [editor.erase_in_display(mode) for mode in EraseMode]

    assert [str(seq) for seq in sequences] == [
        "\x1b[0J",
        "\x1b[1J",
        "\x1b[2J",
        "\x1b[3J",
    ]

    assert len(set(sequences)) == 4
    assert all(str(seq).endswith("J") for seq in sequences)


def test_editor_erase_in_line():
    assert editor.erase_in_line() == "\x1b[0K"
    assert editor.erase_in_line(EraseMode.TO_START) == "\x1b[1K"
    assert editor.erase_in_line(EraseMode.WHOLE) == "\x1b[2K"

    with pytest.raises(ParameterError):
        editor.erase_in_line(EraseMode.WHOLE_AND_SCROLLBACK)


def test_editor_erase_in_field_and_area():
    assert editor.erase_in_field(EraseMode.WHOLE) == "\x1b[2N"
    assert editor.erase_in_area(EraseMode.TO_END) == "\x1b[0O"

    with pytest.raises(ParameterError):
        editor.erase_in_area(EraseMode.WHOLE_AND_SCROLLBACK)


def test_editor_characters_and_lines():
    assert editor.erase_character(4) == "\x1b[4X"
    assert editor.insert_character(2) == "\x1b[2@"
    assert editor.insert_line(3) == "\x1b[3L"
    assert editor.delete_character() == "\x1b[P"
    assert editor.delete_line(1) == "\x1b[1M"
    assert editor.repeat(10) == "\x1b[10b"


def test_editor_select_extent():
    assert editor.select_extent(EditingExtent.LINE) == "\x1b[1Q"


def test_editor_erase_plain_integers():
    assert editor.erase_in_display(3) == "\x1b[3J"
    assert editor.erase_in_line(2) == "\x1b[2K"

    with pytest.raises(ParameterError):
        editor.erase_in_line(3)

    with pytest.raises(ParameterError):
        editor.erase_in_field(3)

    with pytest.raises(ParameterError):
        editor.erase_in_display(7)

    with pytest.raises(ParameterError):
        editor.select_extent(5)


def test_editor_area_qualification():
    assert editor.area_qualification(Qualification.UNPROTECTED) == "\x1b[0o"
    assert editor.area_qualification(Qualification.REVERSE) == "\x1b[11o"
    assert editor.area_qualification(3) == "\x1b[3o"

    with pytest.raises(ParameterError):
        editor.area_qualification(12)
