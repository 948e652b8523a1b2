"""General ZCL frame (section 2.4.1): a header followed by a command payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .header import FrameType, ZclHeader
from .parse import ByteReader, ByteWriter


@dataclass(frozen=True)
class GeneralCommand:
    """A frame carrying a command that acts across the entire profile."""

    header: ZclHeader
    payload: bytes

    def to_bytes(self) -> bytes:
        """Return the encoded frame: header followed by payload."""
        writer = ByteWriter()
        self.header.write(writer)
        writer.write_bytes(self.payload)
        return writer.to_bytes()


@dataclass(frozen=True)
class ClusterSpecificCommand:
    """A frame carrying a command specific to a cluster."""

    header: ZclHeader
    payload: bytes

    def to_bytes(self) -> bytes:
        """Return the encoded frame: header followed by payload."""
        writer = ByteWriter()
        self.header.write(writer)
        writer.write_bytes(self.payload)
        return writer.to_bytes()


@dataclass(frozen=True)
class ReservedFrame:
    """A frame with a reserved frame type; only its header is kept."""

    header: ZclHeader

    def to_bytes(self) -> bytes:
        """Return the encoded header."""
        return self.header.to_bytes()


ZclFrame = Union[GeneralCommand, ClusterSpecificCommand, ReservedFrame]


def parse_frame(data: bytes | bytearray | memoryview) -> ZclFrame:
    """Parse a ZCL frame.

    Global and cluster specific frames take every byte after the header as
    their payload; for reserved frames anything after the header is ignored.
    Raises ``ParseError`` if the header is truncated.
    """
    reader = ByteReader(data)
    header = ZclHeader.read(reader)
    frame_type = header.frame_control.frame_type()
    if frame_type is FrameType.GLOBAL_COMMAND:
        return GeneralCommand(header, reader.read_rest())
    if frame_type is FrameType.CLUSTER_COMMAND:
        return ClusterSpecificCommand(header, reader.read_rest())
    return ReservedFrame(header)