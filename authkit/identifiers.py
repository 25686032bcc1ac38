"""Trace ids, object ids, snowflake ids and UUIDs."""

import datetime
import os
import secrets
import threading
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Optional

# ---- trace ids -------------------------------------------------------------


def _format_trace_time(now: datetime.datetime) -> str:
    base = now.strftime("%Y.%m.%d.%H.%M.%S")
    fraction = f"{now.microsecond:06d}".rstrip("0")
    return f"{base}.{fraction}" if fraction else base


def _default_trace_id() -> str:
    return f"trace-id-{os.getpid()}-{_format_trace_time(datetime.datetime.now())}"


_trace_id_func: Callable[[], str] = _default_trace_id


def set_trace_id_func(func: Optional[Callable[[], str]]) -> None:
    """Replace the trace id generator; ``None`` restores the default."""
    global _trace_id_func
    _trace_id_func = func if func is not None else _default_trace_id


def new_trace_id() -> str:
    return _trace_id_func()


# ---- object ids ------------------------------------------------------------

_object_id_lock = threading.Lock()
_object_id_process = secrets.token_bytes(5)
_object_id_counter = secrets.randbelow(1 << 24)


@dataclass(frozen=True)
class ObjectID:
    """A 12-byte id: 4-byte timestamp, 5 process bytes, 3-byte counter."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != 12:
            raise ValueError("an object id is 12 bytes long")

    def hex(self) -> str:
        return self.raw.hex()

    @property
    def timestamp(self) -> int:
        return int.from_bytes(self.raw[:4], "big")

    def __str__(self) -> str:
        return self.hex()


def new_object_id() -> ObjectID:
    global _object_id_counter
    with _object_id_lock:
        _object_id_counter = (_object_id_counter + 1) & 0xFFFFFF
        counter = _object_id_counter
    raw = (
        int(time.time()).to_bytes(4, "big")
        + _object_id_process
        + counter.to_bytes(3, "big")
    )
    return ObjectID(raw)


# ---- snowflake ids ---------------------------------------------------------

DEFAULT_EPOCH = 1288834974657
NODE_BITS = 10
STEP_BITS = 12
NODE_MAX = (1 << NODE_BITS) - 1
STEP_MASK = (1 << STEP_BITS) - 1
TIME_SHIFT = NODE_BITS + STEP_BITS

_epoch = DEFAULT_EPOCH


class SnowflakeNode:
    """Generates time-ordered 64-bit ids for one node."""

    def __init__(self, node: int, epoch: Optional[int] = None):
        if not 0 <= node <= NODE_MAX:
            raise ValueError(f"Node number must be between 0 and {NODE_MAX}")
        self.node = node
        self.epoch = _epoch if epoch is None else epoch
        self._lock = threading.Lock()
        self._time = 0
        self._step = 0

    def _now(self) -> int:
        return time.time_ns() // 1_000_000 - self.epoch

    def generate(self) -> int:
        with self._lock:
            now = self._now()
            if now == self._time:
                self._step = (self._step + 1) & STEP_MASK
                if self._step == 0:
                    while now <= self._time:
                        now = self._now()
            else:
                self._step = 0
            self._time = now
            return (now << TIME_SHIFT) | (self.node << STEP_BITS) | self._step


_snowflake_node = SnowflakeNode(1)


def set_snowflake_node(node: int, epoch: int = 0) -> None:
    """Use a new default node; a positive ``epoch`` (ms) replaces the epoch."""
    global _epoch, _snowflake_node
    if epoch > 0:
        _epoch = epoch
    _snowflake_node = SnowflakeNode(node)


def new_snowflake_id() -> int:
    return _snowflake_node.generate()


# ---- uuids -----------------------------------------------------------------


def new_uuid() -> uuid.UUID:
    return uuid.uuid4()


def must_uuid() -> uuid.UUID:
    return new_uuid()