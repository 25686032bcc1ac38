import pytest

from authkit.framing import (
    HEADER_LENGTH,
    FrameHeader,
    bytes_to_int,
    bytes_to_int16,
    depack,
    enpack,
    int16_to_bytes,
    int32_to_bytes,
    parse_header,
)


def test_header_length():
    assert HEADER_LENGTH == 16
    assert len(enpack(b"")) == HEADER_LENGTH


def test_enpack_header_fields():
    frame = enpack(b"hello")
    assert len(frame) == HEADER_LENGTH + 5
    assert parse_header(frame) == FrameHeader(5, 0, 8, 99, 10)
    assert frame.endswith(b"hello")


@pytest.mark.parametrize("n", [0, 1, -1, 32767, -32768])
def test_int16_round_trip(n):
    assert bytes_to_int16(int16_to_bytes(n)) == n


@pytest.mark.parametrize("n", [0, 99, -5, 2**31 - 1, -(2**31)])
def test_int32_round_trip(n):
    assert bytes_to_int(int32_to_bytes(n)) == n


def test_int32_wraps():
    assert bytes_to_int(int32_to_bytes(2**31)) == -(2**31)


def test_short_reads_are_zero():
    assert bytes_to_int(b"\x00\x01") == 0
    assert bytes_to_int16(b"\x01") == 0


def test_depack_round_trip_and_extra():
    body = b'{"ID":"0"}'
    assert depack(enpack(body) + enpack(b"next")) == body


def test_depack_incomplete():
    frame = enpack(b"payload")
    assert depack(b"") == b""
    assert depack(frame[:10]) == b""
    assert depack(frame[:-1]) == b""
    assert parse_header(frame[:15]) is None