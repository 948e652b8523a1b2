# zclframe

Parse and build ZigBee Cluster Library (ZCL) frames in pure Python, with no
dependencies beyond the standard library.

The package follows the frame layout of the ZigBee Cluster Library
specification, revision 6:

- **Frame control** (`zclframe.header.FrameControl`): frame type,
  manufacturer-specific flag, direction and disable-default-response flag.
- **ZCL header** (`zclframe.header.ZclHeader`): frame control, an optional
  manufacturer code, a sequence number and a command identifier.
- **Frames** (`zclframe.frame`): general (global) commands, cluster-specific
  commands and frames with a reserved type.
- **Pressure measurement** (`zclframe.pressure.PressureMeasurement`): the
  measured, minimum and maximum value and the tolerance of the Pressure
  Measurement cluster.

All multi-byte values are little-endian.

## Installation

```
pip install zclframe
```

## Reading a frame

```python
from zclframe.frame import GeneralCommand, parse_frame

frame = parse_frame(bytes([0x18, 0x01, 0x0A, 0x00, 0x00, 0x29, 0x3F, 0x0A]))

assert isinstance(frame, GeneralCommand)
print(frame.header.command_identifier.name)  # REPORT_ATTRIBUTES
print(frame.payload)                          # b'\x00\x00)?\n'
print(frame.to_bytes())                       # the original bytes
```

`parse_frame` returns a `GeneralCommand`, a `ClusterSpecificCommand` or a
`ReservedFrame`, chosen by the frame type in the frame control byte. For
general and cluster-specific frames every byte after the header becomes the
payload; a `ReservedFrame` keeps only its header and ignores the rest. Each
of the three has `to_bytes()` to encode it again.

## Headers

```python
from zclframe.header import CommandIdentifier, FrameType, ZclHeader

header = ZclHeader.from_bytes(bytes([0x1C, 0x11, 0x12, 0x01, 0x0A]))
assert header.frame_control.frame_type() is FrameType.GLOBAL_COMMAND
assert header.frame_control.is_manufacturer_specific()
print(header.manufacturer_code)   # ManufacturerCode(value=4625)
print(header.sequence_number)     # 1
assert header.command_identifier is CommandIdentifier.REPORT_ATTRIBUTES
assert header.to_bytes() == bytes([0x1C, 0x11, 0x12, 0x01, 0x0A])
```

The manufacturer code is read only when the frame control marks the frame as
manufacturer specific, and written only in that case; writing such a header
without a manufacturer code raises `ValueError`. Command bytes that are not
known general commands map to `CommandIdentifier.RESERVED`.

`ZclHeader.read(reader)` and `ZclHeader.write(writer)` work on the
`ByteReader` and `ByteWriter` classes from `zclframe.parse`, so a header can
be combined with further fields in one pass.

## Pressure measurement

```python
from zclframe.pressure import PressureMeasurement

measurement = PressureMeasurement.from_kpa(101.3, 50.0, 200.0, 2)
data = measurement.to_bytes()             # eight bytes
assert PressureMeasurement.from_bytes(data) == measurement
```

Values are kept in units of 0.1 kPa. `from_kpa` raises `ValueError` when a
value is below -3276.7 kPa, when the minimum exceeds the maximum, when the
measured value lies outside the range, or when the tolerance does not fit in
16 bits. `from_bytes` accepts exactly eight bytes; `unpack_from_iter` takes
an iterable of byte values and returns `None` instead of raising when it does
not hold exactly eight.

## Errors

Truncated input raises `zclframe.parse.ParseError`, a subclass of
`ValueError`.

## What it does not do

Payloads are returned as raw bytes: the package does not decode the fields of
individual commands such as attribute reports, and it covers no cluster other
than pressure measurement. It has no command-line tool and does no radio or
network I/O; it only converts between bytes and Python objects.

## Running the tests

```
pip install -e ".[test]"
pytest
```