"""Asynchronous log hook that hands entries to a writer on worker threads."""

import copy
import datetime
import queue
import sys
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol

ALL_LEVELS = ("panic", "fatal", "error", "warning", "info", "debug", "trace")

_STOP = object()


@dataclass
class LogEntry:
    level: str
    message: str
    time: datetime.datetime = field(default_factory=datetime.datetime.now)
    data: Dict[str, Any] = field(default_factory=dict)


class ExecCloser(Protocol):
    """Writes log entries to a store and closes it."""

    def exec(self, entry: LogEntry) -> None: ...

    def close(self) -> None: ...


FilterHandle = Callable[[LogEntry], LogEntry]


def _copy_entry(entry: LogEntry) -> LogEntry:
    return LogEntry(level=entry.level, message=entry.message, time=entry.time, data=copy.copy(dict(entry.data)))


class Hook:
    """Queues entries and writes them through ``executor`` on worker threads."""

    def __init__(
        self,
        executor: ExecCloser,
        *,
        max_queues: int = 512,
        max_workers: int = 1,
        extra: Optional[Dict[str, Any]] = None,
        filter: Optional[FilterHandle] = None,
        levels: Optional[Iterable[str]] = None,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._executor = executor
        self._extra = dict(extra or {})
        self._filter = filter
        chosen = list(levels or ())
        self._levels = chosen if chosen else list(ALL_LEVELS)
        self._queue: "queue.Queue[Any]" = queue.Queue(maxsize=max(max_queues, 0))
        self._closed = False
        self._lock = threading.Lock()
        self._workers = [threading.Thread(target=self._work, daemon=True) for _ in range(max_workers)]
        for worker in self._workers:
            worker.start()

    def levels(self) -> List[str]:
        return list(self._levels)

    def fire(self, entry: LogEntry) -> None:
        """Queue a copy of ``entry`` for writing."""
        with self._lock:
            if self._closed:
                raise RuntimeError("hook is closed")
        self._queue.put(_copy_entry(entry))

    def _work(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                self._exec(item)
            finally:
                self._queue.task_done()

    def _exec(self, entry: LogEntry) -> None:
        try:
            for key, value in self._extra.items():
                entry.data.setdefault(key, value)
            if self._filter is not None:
                entry = self._filter(entry)
            self._executor.exec(entry)
        except Exception as exc:
            sys.stderr.write(f"[log-hook] execution error: {exc}")

    def flush(self) -> None:
        """Write everything queued, stop the workers and close the writer."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        for _ in self._workers:
            self._queue.put(_STOP)
        for worker in self._workers:
            worker.join()
        self._executor.close()