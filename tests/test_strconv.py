import json
import math

import pytest

from authkit.strconv import StrValue


def test_source_cases():
    assert StrValue("1010").to_int64() == 1010
    float_s = StrValue("10.1")
    assert float_s.to_float64() == 10.1
    assert float_s.default_int64(5) == 5
    assert StrValue("true").to_bool() is True


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_true_values(text):
    assert StrValue(text).to_bool() is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_false_values(text):
    assert StrValue(text).to_bool() is False


def test_bad_bool():
    with pytest.raises(ValueError):
        StrValue("yes").to_bool()
    assert StrValue("yes").default_bool(True) is True


def test_int_range():
    assert StrValue("-9223372036854775808").to_int64() == -(1 << 63)
    with pytest.raises(ValueError):
        StrValue("9223372036854775808").to_int64()
    with pytest.raises(ValueError):
        StrValue(" 1").to_int()
    assert StrValue("x").default_int(7) == 7


def test_uint_rejects_sign():
    with pytest.raises(ValueError):
        StrValue("-1").to_uint64()
    assert StrValue("+1").default_uint(3) == 3
    assert StrValue("42").to_uint() == 42


def test_float_edges():
    assert math.isinf(StrValue("Inf").to_float64())
    with pytest.raises(ValueError):
        StrValue("1e400").to_float64()
    with pytest.raises(ValueError):
        StrValue("1_0").to_float64()
    assert StrValue("abc").default_float64(2.5) == 2.5


def test_float32_rounds():
    value = StrValue("10.1").to_float32()
    assert value != 10.1
    assert abs(value - 10.1) < 1e-6
    assert StrValue("?").default_float32(1.0) == 1.0


def test_to_json_and_bytes():
    assert StrValue('{"a": [1]}').to_json() == {"a": [1]}
    assert StrValue("ab").to_bytes() == b"ab"
    with pytest.raises(json.JSONDecodeError):
        StrValue("{").to_json()