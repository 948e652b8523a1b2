import pytest

from zclframe.frame import (
    ClusterSpecificCommand,
    GeneralCommand,
    ReservedFrame,
    parse_frame,
)
from zclframe.header import (
    CommandIdentifier,
    FrameControl,
    ManufacturerCode,
    ZclHeader,
)
from zclframe.parse import ParseError

PAYLOAD = bytes([0x00, 0x00, 0x29, 0x3F, 0x0A])


def test_zcl_command():
    data = bytes([0x18, 0x01, 0x0A]) + PAYLOAD
    frame = parse_frame(data)
    assert isinstance(frame, GeneralCommand)
    assert not frame.header.frame_control.is_manufacturer_specific()
    assert frame.payload == PAYLOAD


def test_cluster_specific_command():
    data = bytes([0x19, 0x01, 0x0A]) + PAYLOAD
    frame = parse_frame(data)
    assert isinstance(frame, ClusterSpecificCommand)
    assert not frame.header.frame_control.is_manufacturer_specific()
    assert frame.payload == PAYLOAD


def test_header_fields_of_parsed_frame():
    frame = parse_frame(bytes([0x18, 0x07, 0x0B]) + PAYLOAD)
    assert frame.header.sequence_number == 7
    assert frame.header.command_identifier is CommandIdentifier.DEFAULT_RESPONSE
    assert frame.header.manufacturer_code is None


def test_manufacturer_specific_frame():
    data = bytes([0x1D, 0x11, 0x12, 0x01, 0x0A]) + PAYLOAD
    frame = parse_frame(data)
    assert isinstance(frame, ClusterSpecificCommand)
    assert frame.header.manufacturer_code == ManufacturerCode(4625)
    assert frame.payload == PAYLOAD


def test_empty_payload():
    frame = parse_frame(bytes([0x18, 0x01, 0x0A]))
    assert isinstance(frame, GeneralCommand)
    assert frame.payload == b""


def test_reserved_frame_keeps_only_header():
    frame = parse_frame(bytes([0x1A, 0x02, 0x00]) + PAYLOAD)
    assert isinstance(frame, ReservedFrame)
    assert frame.header.sequence_number == 2
    assert frame.to_bytes() == bytes([0x1A, 0x02, 0x00])


@pytest.mark.parametrize(
    "data",
    [
        bytes([0x18, 0x01, 0x0A]) + PAYLOAD,
        bytes([0x19, 0x01, 0x0A]) + PAYLOAD,
        bytes([0x1D, 0x11, 0x12, 0x01, 0x0A]) + PAYLOAD,
        bytes([0x18, 0x05, 0x00]),
    ],
)
def test_round_trip(data):
    assert parse_frame(data).to_bytes() == data


def test_build_general_command():
    header = ZclHeader(FrameControl(0x18), None, 1, CommandIdentifier.REPORT_ATTRIBUTES)
    frame = GeneralCommand(header, PAYLOAD)
    assert frame.to_bytes() == bytes([0x18, 0x01, 0x0A]) + PAYLOAD


@pytest.mark.parametrize("data", [b"", bytes([0x18]), bytes([0x18, 0x01]), bytes([0x1C, 0x11])])
def test_truncated_header_raises(data):
    with pytest.raises(ParseError):
        parse_frame(data)