"""Log writer that stores entries in an SQLite table."""

import datetime
import re
import sqlite3
import threading
from dataclasses import dataclass
from typing import List, Optional

from .log_hook import LogEntry
from .logger import (
    ACCOUNT_KEY_KEY,
    SPAN_FUNCTION_KEY,
    SPAN_TITLE_KEY,
    TRACE_ID_KEY,
    VERSION_KEY,
)
from .serialization import json_marshal_to_string

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_COLUMNS = (
    "id",
    "level",
    "message",
    "trace_id",
    "user_id",
    "span_title",
    "span_function",
    "data",
    "version",
    "created_at",
)
_INDEXED = ("level", "trace_id", "user_id", "version", "created_at")


@dataclass
class LogItem:
    level: str = ""
    message: str = ""
    trace_id: str = ""
    user_id: str = ""
    span_title: str = ""
    span_function: str = ""
    data: str = ""
    version: str = ""
    created_at: Optional[datetime.datetime] = None
    id: Optional[int] = None


def _take_str(data: dict, key: str) -> str:
    value = data.pop(key, "")
    return value if isinstance(value, str) else ""


class SqliteHook:
    """Writes log entries as rows of ``table_name``."""

    def __init__(self, database: str, table_name: str):
        if not _IDENTIFIER.fullmatch(table_name):
            raise ValueError(f"invalid table name: {table_name!r}")
        self.table_name = table_name
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(database, check_same_thread=False)
        with self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {table_name} ("
                "id INTEGER PRIMARY KEY AUTOINCREMENT, "
                "level TEXT, message TEXT, trace_id TEXT, user_id TEXT, "
                "span_title TEXT, span_function TEXT, data TEXT, "
                "version TEXT, created_at TEXT)"
            )
            for column in _INDEXED:
                self._conn.execute(
                    f"CREATE INDEX IF NOT EXISTS idx_{table_name}_{column} ON {table_name} ({column})"
                )

    def __enter__(self) -> "SqliteHook":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def exec(self, entry: LogEntry) -> None:
        data = dict(entry.data)
        item = LogItem(
            level=entry.level,
            message=entry.message,
            created_at=entry.time,
            trace_id=_take_str(data, TRACE_ID_KEY),
            user_id=_take_str(data, ACCOUNT_KEY_KEY),
            span_title=_take_str(data, SPAN_TITLE_KEY),
            span_function=_take_str(data, SPAN_FUNCTION_KEY),
            version=_take_str(data, VERSION_KEY),
        )
        if data:
            item.data = json_marshal_to_string(data)
        created = item.created_at.isoformat() if item.created_at is not None else None
        with self._lock, self._conn:
            self._conn.execute(
                f"INSERT INTO {self.table_name} "
                "(level, message, trace_id, user_id, span_title, span_function, data, version, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    item.level,
                    item.message,
                    item.trace_id,
                    item.user_id,
                    item.span_title,
                    item.span_function,
                    item.data,
                    item.version,
                    created,
                ),
            )

    def items(self) -> List[LogItem]:
        """All stored rows, oldest first."""
        with self._lock:
            rows = self._conn.execute(
                f"SELECT {', '.join(_COLUMNS)} FROM {self.table_name} ORDER BY id"
            ).fetchall()
        result = []
        for row in rows:
            values = dict(zip(_COLUMNS, row))
            created = values.pop("created_at")
            result.append(
                LogItem(
                    created_at=datetime.datetime.fromisoformat(created) if created else None,
                    **values,
                )
            )
        return result

    def close(self) -> None:
        with self._lock:
            self._conn.close()