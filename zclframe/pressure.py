"""Pressure measurement cluster attributes (section 4.5)."""

from __future__ import annotations

import itertools
import math
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .parse import ByteReader, ByteWriter, ParseError

_F32 = struct.Struct("<f")
_F32_MAX = 3.4028234663852886e38
_ENCODED_LENGTH = 8


def _to_f32(value: float) -> float:
    """Round a float to single precision, saturating to infinity."""
    value = float(value)
    if math.isfinite(value) and abs(value) > _F32_MAX:
        return math.copysign(math.inf, value)
    return _F32.unpack(_F32.pack(value))[0]


def _to_i16(value: float) -> int:
    """Truncate toward zero and saturate into the i16 range; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value >= 0x7FFF:
        return 0x7FFF
    if value <= -0x8000:
        return -0x8000
    return int(value)


_LOWER_LIMIT = _to_f32(-3276.7)


@dataclass(frozen=True)
class PressureMeasurement:
    """Pressure measurement information attribute set, values in 0.1 kPa units."""

    measured_value: int
    min_measured_value: int
    max_measured_value: int
    tolerance: int

    @classmethod
    def from_kpa(
        cls,
        pressure_kpa: float,
        min_pressure: float,
        max_pressure: float,
        tolerance: int,
    ) -> PressureMeasurement:
        """Build a measurement from readings in kPa, validating the range."""
        pressure = _to_f32(pressure_kpa)
        low = _to_f32(min_pressure)
        high = _to_f32(max_pressure)
        if not 0 <= tolerance <= 0xFFFF:
            raise ValueError(f"tolerance must fit in 16 bits, got {tolerance}")
        if pressure < _LOWER_LIMIT or low < _LOWER_LIMIT or high < _LOWER_LIMIT:
            raise ValueError("Pressure cannot be below -3276.7 kPa")
        if low > high:
            raise ValueError("Min pressure cannot be greater than max pressure")
        if pressure < low or pressure > high:
            raise ValueError("Measured pressure is out of the defined range")
        return cls(
            measured_value=_to_i16(_to_f32(pressure * 10.0)),
            min_measured_value=_to_i16(_to_f32(low * 10.0)),
            max_measured_value=_to_i16(_to_f32(high * 10.0)),
            tolerance=tolerance,
        )

    def to_bytes(self) -> bytes:
        """Encode the four attributes as little-endian 16-bit values."""
        writer = ByteWriter()
        writer.write_i16(self.measured_value)
        writer.write_i16(self.min_measured_value)
        writer.write_i16(self.max_measured_value)
        writer.write_u16(self.tolerance)
        return writer.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> PressureMeasurement:
        """Decode exactly eight bytes; raise ``ParseError`` on any other length."""
        if len(data) != _ENCODED_LENGTH:
            raise ParseError("Invalid byte slice length")
        reader = ByteReader(data)
        return cls(
            measured_value=reader.read_i16(),
            min_measured_value=reader.read_i16(),
            max_measured_value=reader.read_i16(),
            tolerance=reader.read_u16(),
        )

    @classmethod
    def unpack_from_iter(cls, src: Iterable[int]) -> Optional[PressureMeasurement]:
        """Decode from an iterable of byte values, or return None if it is not eight long."""
        data = bytes(itertools.islice(src, _ENCODED_LENGTH + 1))
        try:
            return cls.from_bytes(data)
        except ParseError:
            return None