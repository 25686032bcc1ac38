from datetime import timedelta

import pytest

from authkit.memory_store import MemoryStore


class _Clock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


def test_store_set_check_delete():
    store = MemoryStore(":memory:")
    try:
        key = "test"
        store.set(key, 0)
        assert store.check(key) is True
        store.delete(key)
        assert store.check(key) is False
    finally:
        store.close()


def test_missing_key_is_not_present():
    with MemoryStore() as store:
        assert store.check("absent") is False
        store.delete("absent")
        assert store.check("absent") is False


def test_expiration():
    clock = _Clock()
    with MemoryStore(clock=clock) as store:
        store.set("token", 10)
        clock.now += 9
        assert store.check("token") is True
        clock.now += 1
        assert store.check("token") is False


def test_timedelta_expiration():
    clock = _Clock()
    with MemoryStore(clock=clock) as store:
        store.set("token", timedelta(seconds=5))
        clock.now += 4
        assert store.check("token") is True
        clock.now += 2
        assert store.check("token") is False


def test_non_positive_expiration_never_expires():
    clock = _Clock()
    with MemoryStore(clock=clock) as store:
        store.set("token", -5)
        clock.now += 1_000_000
        assert store.check("token") is True


def test_persistence(tmp_path):
    path = tmp_path / "sub" / "tokens.json"
    clock = _Clock()
    first = MemoryStore(str(path), clock=clock)
    first.set("kept", 0)
    first.set("short", 5)
    first.set("removed", 0)
    first.delete("removed")
    first.close()

    clock.now += 10
    second = MemoryStore(str(path), clock=clock)
    assert second.check("kept") is True
    assert second.check("short") is False
    assert second.check("removed") is False
    second.close()


def test_closed_store_raises():
    store = MemoryStore()
    store.close()
    with pytest.raises(RuntimeError):
        store.set("token", 0)
    with pytest.raises(RuntimeError):
        store.check("token")
    with pytest.raises(RuntimeError):
        store.close()