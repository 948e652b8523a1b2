"""Little-endian byte reading and writing primitives used by the frame codecs."""

from __future__ import annotations

import struct

_U16 = struct.Struct("<H")
_I16 = struct.Struct("<h")


class ParseError(ValueError):
    """Raised when a byte sequence is too short or otherwise malformed."""


class ByteReader:
    """Sequential little-endian reader over an immutable byte sequence."""

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Number of bytes consumed so far."""
        return self._offset

    @property
    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self._offset

    def _take(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        if length > self.remaining:
            raise ParseError(
                f"unexpected end of data at offset {self._offset}: "
                f"need {length} bytes, {self.remaining} available"
            )
        chunk = self._data[self._offset : self._offset + length]
        self._offset += length
        return chunk

    def read_u8(self) -> int:
        """Read one unsigned byte."""
        return self._take(1)[0]

    def read_u16(self) -> int:
        """Read an unsigned 16-bit little-endian integer."""
        return _U16.unpack(self._take(2))[0]

    def read_i16(self) -> int:
        """Read a signed 16-bit little-endian integer."""
        return _I16.unpack(self._take(2))[0]

    def read_bytes(self, length: int) -> bytes:
        """Read exactly ``length`` raw bytes."""
        return self._take(length)

    def read_rest(self) -> bytes:
        """Read every byte that has not been consumed yet."""
        return self._take(self.remaining)


def _check_range(value: int, low: int, high: int, kind: str) -> None:
    if not low <= value <= high:
        raise ValueError(f"{value} does not fit in {kind}")


class ByteWriter:
    """Growable little-endian byte writer."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def write_u8(self, value: int) -> None:
        """Append one unsigned byte."""
        _check_range(value, 0, 0xFF, "u8")
        self._buffer.append(value)

    def write_u16(self, value: int) -> None:
        """Append an unsigned 16-bit little-endian integer."""
        _check_range(value, 0, 0xFFFF, "u16")
        self._buffer += _U16.pack(value)

    def write_i16(self, value: int) -> None:
        """Append a signed 16-bit little-endian integer."""
        _check_range(value, -0x8000, 0x7FFF, "i16")
        self._buffer += _I16.pack(value)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        """Append raw bytes."""
        self._buffer += data

    def to_bytes(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)