from datetime import timedelta

from authkit.redis_store import RedisConfig, RedisStore


class _FakeRedis:
    def __init__(self):
        self.data = {}
        self.expiry = {}
        self.closed = False

    def set(self, name, value, px=None):
        self.data[name] = value
        if px is None:
            self.expiry.pop(name, None)
        else:
            self.expiry[name] = px
        return True

    def exists(self, *names):
        return sum(1 for name in names if name in self.data)

    def delete(self, *names):
        removed = 0
        for name in names:
            if self.data.pop(name, None) is not None:
                removed += 1
        return removed

    def close(self):
        self.closed = True


def test_store_set_check_delete():
    client = _FakeRedis()
    store = RedisStore(client)
    key = "test"
    store.set(key, 0)
    assert store.check(key) is True
    store.delete(key)
    assert store.check(key) is False
    store.close()
    assert client.closed is True


def test_prefix_applied_to_set_and_check():
    client = _FakeRedis()
    store = RedisStore(client, "jwt:")
    store.set("abc", 0)
    assert client.data == {"jwt:abc": "1"}
    assert store.check("abc") is True
    assert store.check("jwt:abc") is False


def test_delete_uses_unprefixed_key():
    client = _FakeRedis()
    store = RedisStore(client, "jwt:")
    store.set("abc", 0)
    store.delete("abc")
    assert store.check("abc") is True
    store.delete("jwt:abc")
    assert store.check("abc") is False


def test_expiration_in_milliseconds():
    client = _FakeRedis()
    store = RedisStore(client)
    store.set("a", 2.5)
    store.set("b", timedelta(seconds=3))
    store.set("c", -1)
    assert client.expiry["a"] == 2500
    assert client.expiry["b"] == 3000
    assert "c" not in client.expiry


def test_from_config():
    store = RedisStore.from_config(RedisConfig(addr="127.0.0.1:6379", db=1, key_prefix="p:"))
    kwargs = store.client.connection_pool.connection_kwargs
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 6379
    assert kwargs["db"] == 1
    assert store.prefix == "p:"
    store.close()