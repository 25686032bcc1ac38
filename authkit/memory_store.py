"""Revoked-token store kept in memory, optionally saved to a JSON file."""

import json
import os
import tempfile
import threading
import time
from datetime import timedelta
from typing import Callable, Dict, Optional, Union

MEMORY = ":memory:"


def _seconds(expiration: Union[float, int, timedelta]) -> float:
    if isinstance(expiration, timedelta):
        return expiration.total_seconds()
    return float(expiration)


class MemoryStore:
    """Token store with per-key expiry; ``path`` other than ":memory:" persists it."""

    def __init__(self, path: str = MEMORY, *, clock: Callable[[], float] = time.time):
        self.path = path
        self._clock = clock
        self._lock = threading.Lock()
        self._closed = False
        self._entries: Dict[str, Optional[float]] = {}
        if path != MEMORY:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            if os.path.exists(path):
                self._load()

    def __enter__(self) -> "MemoryStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _load(self) -> None:
        with open(self.path, encoding="utf-8") as handle:
            text = handle.read()
        if not text.strip():
            return
        now = self._clock()
        for token, deadline in json.loads(text).items():
            if deadline is None or deadline > now:
                self._entries[token] = deadline

    def _save(self) -> None:
        if self.path == MEMORY:
            return
        directory = os.path.dirname(self.path) or "."
        fd, tmp = tempfile.mkstemp(dir=directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._entries, handle)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("store is closed")

    def _live(self, token: str, now: float) -> bool:
        if token not in self._entries:
            return False
        deadline = self._entries[token]
        if deadline is not None and deadline <= now:
            del self._entries[token]
            return False
        return True

    def set(self, token: str, expiration: Union[float, int, timedelta] = 0) -> None:
        """Store ``token``; a positive ``expiration`` (seconds) makes it expire."""
        seconds = _seconds(expiration)
        with self._lock:
            self._ensure_open()
            self._entries[token] = self._clock() + seconds if seconds > 0 else None
            self._save()

    def delete(self, token: str) -> None:
        """Remove ``token``; a missing token is not an error."""
        with self._lock:
            self._ensure_open()
            if self._entries.pop(token, False) is not False:
                self._save()

    def check(self, token: str) -> bool:
        with self._lock:
            self._ensure_open()
            return self._live(token, self._clock())

    def close(self) -> None:
        with self._lock:
            self._ensure_open()
            self._closed = True