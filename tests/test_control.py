import pytest

from ecma48 import ControlSequence, EraseMode, ParameterError, build, encode_parameters
from ecma48.control import member


def test_control_encode_parameters():
    assert encode_parameters([]) == ""
    assert encode_parameters([5, None, 1]) == "5;;1"
    assert encode_parameters([5, 1]) == "5;1"
    assert encode_parameters([0]) == "0"


def test_control_encode_parameters_omitted():
    assert encode_parameters([None]) == ""
    assert encode_parameters([None, None]) == ""
    assert encode_parameters([None, 3]) == ";3"
    assert encode_parameters([5, None]) == "5"
    assert encode_parameters([None, None, 2, None]) == ";;2"


def test_control_encode_parameters_invalid():
    with pytest.raises(ParameterError):
        encode_parameters([-1])

    with pytest.raises(ParameterError):
        encode_parameters(["5"])

    with pytest.raises(ParameterError):
        encode_parameters([True])

    with pytest.raises(ValueError):
        encode_parameters([1.5])


def test_control_build():
    assert str(build("H", parameters=[5, 1])) == "\x1b[5;1H"
    assert str(build("m")) == "\x1b[m"
    assert str(build("@", " ", [3])) == "\x1b[3 @"

    assert build("H", parameters=[1, 1]).encode() == b"\x1b[1;1H"


def test_control_sequence_value():
    first = build("J", parameters=[2])
    second = ControlSequence("J", "", (2,))

    assert first == second
    assert first == "\x1b[2J"
    assert hash(first) == hash(second)
    assert len(first) == 4

    assert str(first) == str(first)
    assert first.parameters == (2,)


def test_control_sequence_invalid_bytes():
    with pytest.raises(ParameterError):
        build("HH")

    with pytest.raises(ParameterError):
        build("")

    with pytest.raises(ParameterError):
        build("\x1b")

    with pytest.raises(ParameterError):
        build("A", intermediates="x")


def test_control_sequence_concatenation():
    sequence = build("J", parameters=[2]) + build("H", parameters=[1, 1])

    assert sequence == "\x1b[2J\x1b[1;1H"
    assert "text" + build("K") == "text\x1b[K"
    assert build("K") + "text" == "\x1b[Ktext"


def test_control_member():
    assert member(EraseMode, 2) is EraseMode.WHOLE
    assert member(EraseMode, EraseMode.TO_START) is EraseMode.TO_START

    with pytest.raises(ParameterError, match="Expected a EraseMode member, got 4."):
        member(EraseMode, 4)

    with pytest.raises(ParameterError):
        member(EraseMode, True)
