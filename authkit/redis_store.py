"""Revoked-token store backed by Redis."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional, Union

import redis

DEFAULT_PORT = 6379


@dataclass
class RedisConfig:
    addr: str = "localhost:6379"
    db: int = 0
    password: Optional[str] = None
    key_prefix: str = ""


def _seconds(expiration: Union[float, int, timedelta]) -> float:
    if isinstance(expiration, timedelta):
        return expiration.total_seconds()
    return float(expiration)


def _split_addr(addr: str) -> tuple:
    host, sep, port = addr.rpartition(":")
    if not sep:
        return addr or "localhost", DEFAULT_PORT
    return host or "localhost", int(port)


class RedisStore:
    """Stores tokens as keys ``key_prefix + token`` with value "1"."""

    def __init__(self, client: Any, key_prefix: str = ""):
        self.client = client
        self.prefix = key_prefix

    @classmethod
    def from_config(cls, config: RedisConfig) -> "RedisStore":
        host, port = _split_addr(config.addr)
        client = redis.Redis(host=host, port=port, db=config.db, password=config.password)
        return cls(client, config.key_prefix)

    def __enter__(self) -> "RedisStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _key(self, token: str) -> str:
        return f"{self.prefix}{token}"

    def set(self, token: str, expiration: Union[float, int, timedelta] = 0) -> None:
        """Store ``token``; a positive ``expiration`` (seconds) makes it expire."""
        seconds = _seconds(expiration)
        if seconds > 0:
            self.client.set(self._key(token), "1", px=max(1, int(round(seconds * 1000))))
        else:
            self.client.set(self._key(token), "1")

    def delete(self, token: str) -> None:
        """Delete the key named exactly ``token``, without the prefix."""
        self.client.delete(token)

    def check(self, token: str) -> bool:
        return self.client.exists(self._key(token)) > 0

    def close(self) -> None:
        self.client.close()