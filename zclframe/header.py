"""ZCL frame header: frame control, manufacturer code, sequence number and command."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .parse import ByteReader, ByteWriter

_FRAME_TYPE_MASK = 0b0000_0011
_MANUFACTURER_SPECIFIC_MASK = 0b0000_0100
_DIRECTION_MASK = 0b0000_1000
_DEFAULT_RESPONSE_MASK = 0b0001_0000


class CommandIdentifier(enum.IntEnum):
    """General command identifiers (section 2.4.1.4, table 2-3)."""

    READ_ATTRIBUTES = 0x00
    READ_ATTRIBUTES_RESPONSE = 0x01
    WRITE_ATTRIBUTES = 0x02
    WRITE_ATTRIBUTES_UNDIVIDED = 0x03
    WRITE_ATTRIBUTES_RESPONSE = 0x04
    WRITE_ATTRIBUTES_NO_RESPONSE = 0x05
    CONFIGURE_REPORTING = 0x06
    CONFIGURE_REPORTING_RESPONSE = 0x07
    READ_REPORTING_CONFIGURATION = 0x08
    READ_REPORTING_CONFIGURATION_RESPONSE = 0x09
    REPORT_ATTRIBUTES = 0x0A
    DEFAULT_RESPONSE = 0x0B
    DISCOVER_ATTRIBUTES = 0x0C
    DISCOVER_ATTRIBUTES_RESPONSE = 0x0D
    READ_ATTRIBUTES_STRUCTURED = 0x0E
    WRITE_ATTRIBUTES_STRUCTURED = 0x0F
    WRITE_ATTRIBUTES_STRUCTURED_RESPONSE = 0x10
    DISCOVER_COMMANDS_RECEIVED = 0x11
    DISCOVER_COMMANDS_RECEIVED_RESPONSE = 0x12
    DISCOVER_COMMANDS_GENERATED = 0x13
    DISCOVER_COMMANDS_GENERATED_RESPONSE = 0x14
    DISCOVER_ATTRIBUTES_EXTENDED = 0x15
    DISCOVER_ATTRIBUTES_EXTENDED_RESPONSE = 0x16
    RESERVED = 0xFF

    @classmethod
    def from_byte(cls, value: int) -> CommandIdentifier:
        """Map a byte to its identifier; unknown values become RESERVED."""
        try:
            return cls(value)
        except ValueError:
            return cls.RESERVED


class FrameType(enum.IntEnum):
    """Frame type sub-field (section 2.4.1.1.1)."""

    GLOBAL_COMMAND = 0b00
    CLUSTER_COMMAND = 0b01
    RESERVED = 0b10


@dataclass(frozen=True)
class FrameControl:
    """Frame control byte (section 2.4.1.1)."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"frame control must fit in one byte, got {self.value}")

    def frame_type(self) -> FrameType:
        """Whether the command is global, cluster specific or reserved."""
        bits = self.value & _FRAME_TYPE_MASK
        return FrameType(bits) if bits in (0, 1) else FrameType.RESERVED

    def is_manufacturer_specific(self) -> bool:
        """True if a manufacturer code follows the frame control."""
        return bool(self.value & _MANUFACTURER_SPECIFIC_MASK)

    def direction(self) -> bool:
        """True if the command is sent from the server side to the client side."""
        return bool(self.value & _DIRECTION_MASK)

    def disable_default_response(self) -> bool:
        """True if the default response is disabled."""
        return bool(self.value & _DEFAULT_RESPONSE_MASK)

    def __repr__(self) -> str:
        return (
            f"FrameControl(frame_type={self.frame_type().name}, "
            f"manufacturer_specific={self.is_manufacturer_specific()}, "
            f"direction={self.direction()}, "
            f"disable_default_response={self.disable_default_response()})"
        )


@dataclass(frozen=True)
class ManufacturerCode:
    """Manufacturer code (section 2.4.1.2)."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFF:
            raise ValueError(f"manufacturer code must fit in 16 bits, got {self.value}")


@dataclass(frozen=True)
class ZclHeader:
    """ZCL header (section 2.4.1)."""

    frame_control: FrameControl
    manufacturer_code: Optional[ManufacturerCode]
    sequence_number: int
    command_identifier: CommandIdentifier

    @classmethod
    def read(cls, reader: ByteReader) -> ZclHeader:
        """Read a header from ``reader``, advancing it past the header."""
        frame_control = FrameControl(reader.read_u8())
        manufacturer_code = (
            ManufacturerCode(reader.read_u16())
            if frame_control.is_manufacturer_specific()
            else None
        )
        sequence_number = reader.read_u8()
        command_identifier = CommandIdentifier.from_byte(reader.read_u8())
        return cls(frame_control, manufacturer_code, sequence_number, command_identifier)

    @classmethod
    def from_bytes(cls, data: bytes) -> ZclHeader:
        """Parse a header from the start of ``data``; trailing bytes are ignored."""
        return cls.read(ByteReader(data))

    def write(self, writer: ByteWriter) -> None:
        """Append the encoded header to ``writer``."""
        writer.write_u8(self.frame_control.value)
        if self.frame_control.is_manufacturer_specific():
            if self.manufacturer_code is None:
                raise ValueError(
                    "frame control is manufacturer specific but no manufacturer code is set"
                )
            writer.write_u16(self.manufacturer_code.value)
        writer.write_u8(self.sequence_number)
        writer.write_u8(int(self.command_identifier))

    def to_bytes(self) -> bytes:
        """Return the encoded header."""
        writer = ByteWriter()
        self.write(writer)
        return writer.to_bytes()