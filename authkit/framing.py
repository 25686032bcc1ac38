"""Length-field-based frames: a 16-byte big-endian header followed by a body."""

import struct
from dataclasses import dataclass
from typing import Optional

PACKAGE_LENGTH_BYTES = 4
HEADER_LENGTH_BYTES = 2
PROTOCOL_VERSION_BYTES = 2
OPERATION_BYTES = 4
SEQUENCE_ID_BYTES = 4
HEADER_LENGTH = (
    PACKAGE_LENGTH_BYTES
    + HEADER_LENGTH_BYTES
    + PROTOCOL_VERSION_BYTES
    + OPERATION_BYTES
    + SEQUENCE_ID_BYTES
)

_HEADER = struct.Struct(">ihhii")


def _wrap(n: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((n + half) % (1 << bits)) - half


def int32_to_bytes(n: int) -> bytes:
    """Big-endian int32, wrapping values that do not fit."""
    return struct.pack(">i", _wrap(n, 32))


def int16_to_bytes(n: int) -> bytes:
    """Big-endian int16, wrapping values that do not fit."""
    return struct.pack(">h", _wrap(n, 16))


def bytes_to_int(data: bytes) -> int:
    """Read a big-endian int32; fewer than four bytes read as 0."""
    if len(data) < 4:
        return 0
    return struct.unpack(">i", data[:4])[0]


def bytes_to_int16(data: bytes) -> int:
    """Read a big-endian int16; fewer than two bytes read as 0."""
    if len(data) < 2:
        return 0
    return struct.unpack(">h", data[:2])[0]


@dataclass(frozen=True)
class FrameHeader:
    package_length: int
    header_length: int
    protocol_version: int
    operation: int
    sequence_id: int


def enpack(message: bytes) -> bytes:
    """Frame ``message`` with header length 0, version 8, operation 99, sequence 10."""
    return _HEADER.pack(_wrap(len(message), 32), 0, 8, 99, 10) + message


def parse_header(buffer: bytes) -> Optional[FrameHeader]:
    """Parse the header at the start of ``buffer``, or None if it is incomplete."""
    if len(buffer) < HEADER_LENGTH:
        return None
    return FrameHeader(*_HEADER.unpack_from(buffer))


def depack(buffer: bytes) -> bytes:
    """Return the body of the first complete frame, or b"" if there is none."""
    header = parse_header(buffer)
    if header is None or header.package_length < 0:
        return b""
    end = HEADER_LENGTH + header.package_length
    if len(buffer) < end:
        return b""
    return bytes(buffer[HEADER_LENGTH:end])