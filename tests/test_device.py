import pytest

from ecma48 import (
    ControlString,
    CopyStatus,
    ParameterError,
    StatusReport,
    device_attributes,
    eject_and_feed,
    function_key,
    identify_control_string,
    identify_graphic_repertoire,
    media_copy,
    report_status,
)


def test_device_attributes():
    assert device_attributes() == "\x1b[c"
    assert device_attributes(0) == "\x1b[0c"


def test_device_report_status():
    assert report_status(StatusReport.REQUEST_POSITION) == "\x1b[6n"
    assert report_status(StatusReport.READY) == "\x1b[0n"
    assert report_status(5) == "\x1b[5n"

    with pytest.raises(ParameterError):
        report_status(9)


def test_device_media_copy():
    assert media_copy(CopyStatus.START_SECONDARY_RELAY) == "\x1b[7i"

    with pytest.raises(ParameterError):
        media_copy(8)


def test_device_function_key():
    assert function_key(12) == "\x1b[12 W"


def test_device_identification():
    assert identify_control_string(ControlString.DIAGNOSTIC) == "\x1b[1 O"
    assert identify_control_string(2) == "\x1b[2 O"
    assert identify_graphic_repertoire(3) == "\x1b[3 M"

    with pytest.raises(ParameterError):
        identify_control_string(0)


def test_device_eject_and_feed():
    assert eject_and_feed(1, 2) == "\x1b[1;2 Y"
    assert eject_and_feed(0, 1) == "\x1b[0;1 Y"
    assert eject_and_feed() == "\x1b[ Y"
