from dataclasses import dataclass
from typing import Optional

import pytest

from zclframe.parse import ByteReader, ByteWriter, ParseError


@dataclass
class DataFrame:
    flag: int
    opt: Optional[int]
    length: int
    data: bytes

    @classmethod
    def read(cls, reader):
        flag = reader.read_u8()
        opt = reader.read_u16() if flag > 0 else None
        length = reader.read_u8()
        data = reader.read_bytes(length)
        return cls(flag, opt, length, data)

    def write(self, writer):
        writer.write_u8(self.flag)
        if self.flag > 0:
            writer.write_u16(self.opt)
        writer.write_u8(self.length)
        writer.write_bytes(self.data)


def test_parse_data_frame_round_trip():
    raw = bytes([0x01, 0x11, 0x22, 0x04, 0xAA, 0xAA, 0xAA, 0xAA])
    reader = ByteReader(raw)
    frame = DataFrame.read(reader)

    assert reader.offset == 8
    assert frame.flag == 0x01
    assert frame.opt == 0x2211
    assert frame.length == 0x04
    assert frame.data == bytes([0xAA, 0xAA, 0xAA, 0xAA])

    writer = ByteWriter()
    frame.write(writer)
    assert writer.to_bytes() == raw


def test_optional_field_skipped_when_flag_clear():
    raw = bytes([0x00, 0x02, 0xBB, 0xCC])
    reader = ByteReader(raw)
    frame = DataFrame.read(reader)
    assert frame.opt is None
    assert frame.data == b"\xbb\xcc"
    assert reader.remaining == 0


def test_read_i16_negative():
    assert ByteReader(b"\xff\xff").read_i16() == -1
    assert ByteReader(b"\x00\x80").read_i16() == -32768


def test_read_rest_consumes_everything():
    reader = ByteReader(b"\x01\x02\x03")
    assert reader.read_u8() == 1
    assert reader.read_rest() == b"\x02\x03"
    assert reader.remaining == 0
    assert reader.read_rest() == b""


def test_short_input_raises_parse_error():
    reader = ByteReader(b"\x01")
    with pytest.raises(ParseError):
        reader.read_u16()
    assert reader.offset == 0


def test_read_bytes_too_long_raises():
    with pytest.raises(ParseError):
        ByteReader(b"\x01\x02").read_bytes(3)


def test_writer_little_endian_values():
    writer = ByteWriter()
    writer.write_u16(0x1234)
    writer.write_i16(-2)
    writer.write_u8(7)
    assert writer.to_bytes() == b"\x34\x12\xfe\xff\x07"
    assert len(writer) == 5


@pytest.mark.parametrize(
    "method, value",
    [("write_u8", 256), ("write_u8", -1), ("write_u16", 0x10000), ("write_i16", 0x8000)],
)
def test_writer_rejects_out_of_range(method, value):
    writer = ByteWriter()
    writer.write_u8(0x42)
    with pytest.raises(ValueError):
        getattr(writer, method)(value)
    assert writer.to_bytes() == b"\x42"
    assert len(writer) == 1