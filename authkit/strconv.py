"""String value with strict numeric, boolean and JSON conversions."""

import json
import math
import re
import struct
from typing import Any

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}
_INF_RE = re.compile(r"[+-]?(inf|infinity)", re.IGNORECASE)
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1


class StrValue(str):
    """A string that converts itself into other types."""

    def to_bytes(self) -> bytes:
        return self.encode("utf-8")

    def to_bool(self) -> bool:
        if self in _TRUE:
            return True
        if self in _FALSE:
            return False
        raise ValueError(f"invalid boolean: {str(self)!r}")

    def default_bool(self, default: bool) -> bool:
        try:
            return self.to_bool()
        except ValueError:
            return default

    def to_int64(self) -> int:
        if not _INT_RE.fullmatch(self):
            raise ValueError(f"invalid integer: {str(self)!r}")
        value = int(self)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"integer out of range: {str(self)!r}")
        return value

    def default_int64(self, default: int) -> int:
        try:
            return self.to_int64()
        except ValueError:
            return default

    def to_int(self) -> int:
        return self.to_int64()

    def default_int(self, default: int) -> int:
        try:
            return self.to_int()
        except ValueError:
            return default

    def to_uint64(self) -> int:
        if not _UINT_RE.fullmatch(self):
            raise ValueError(f"invalid unsigned integer: {str(self)!r}")
        value = int(self)
        if value > _UINT64_MAX:
            raise ValueError(f"unsigned integer out of range: {str(self)!r}")
        return value

    def default_uint64(self, default: int) -> int:
        try:
            return self.to_uint64()
        except ValueError:
            return default

    def to_uint(self) -> int:
        return self.to_uint64()

    def default_uint(self, default: int) -> int:
        try:
            return self.to_uint()
        except ValueError:
            return default

    def to_float64(self) -> float:
        if not self or "_" in self or self != self.strip():
            raise ValueError(f"invalid float: {str(self)!r}")
        try:
            value = float(self)
        except ValueError:
            raise ValueError(f"invalid float: {str(self)!r}") from None
        if math.isinf(value) and not _INF_RE.fullmatch(self):
            raise ValueError(f"float out of range: {str(self)!r}")
        return value

    def default_float64(self, default: float) -> float:
        try:
            return self.to_float64()
        except ValueError:
            return default

    def to_float32(self) -> float:
        value = self.to_float64()
        try:
            return struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            return math.copysign(math.inf, value)

    def default_float32(self, default: float) -> float:
        try:
            return self.to_float32()
        except ValueError:
            return default

    def to_json(self) -> Any:
        """Decode the string as JSON; raises ``json.JSONDecodeError`` on bad input."""
        return json.loads(self)