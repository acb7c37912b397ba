"""Tests for the Redis store."""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from shortlinks.errors import StoreError
from shortlinks.store.redis_store import RedisStore


@pytest.mark.asyncio
class TestRedisStore:
    """Test Redis store operations."""

    async def test_get_set_delete(self, store):
        assert await store.get("k") is None

        await store.set("k", "v")
        assert await store.get("k") == "v"

        assert await store.delete("k") is True
        assert await store.delete("k") is False
        assert await store.get("k") is None

    async def test_set_operations(self, store):
        assert await store.set_members("s") == set()

        assert await store.set_add("s", "a") is True
        assert await store.set_add("s", "a") is False
        assert await store.set_add("s", "b") is True
        assert await store.set_members("s") == {"a", "b"}

        assert await store.set_remove("s", "a") is True
        assert await store.set_remove("s", "a") is False
        assert await store.set_members("s") == {"b"}

    async def test_unicode_values(self, store):
        await store.set_add("s", "id🧙https://example.com🧙key")

        assert await store.set_members("s") == {"id🧙https://example.com🧙key"}

    async def test_health_check(self, store):
        assert await store.health_check() is True

    async def test_connect(self, store):
        await store.connect()

    @pytest.mark.parametrize("method,args,client_method", [
        ("get", ("k",), "get"),
        ("set", ("k", "v"), "set"),
        ("delete", ("k",), "delete"),
        ("set_add", ("s", "m"), "sadd"),
        ("set_remove", ("s", "m"), "srem"),
        ("set_members", ("s",), "smembers"),
    ])
    async def test_errors_are_wrapped(self, store, monkeypatch, method, args, client_method):
        async def broken(*a, **kw):
            raise RedisTimeoutError("timed out")

        monkeypatch.setattr(store.client, client_method, broken)

        with pytest.raises(StoreError) as exc_info:
            await getattr(store, method)(*args)

        assert isinstance(exc_info.value.__cause__, RedisTimeoutError)

    async def test_failed_ping(self, store, monkeypatch):
        async def broken_ping():
            raise RedisConnectionError("connection refused")

        monkeypatch.setattr(store.client, "ping", broken_ping)

        assert await store.health_check() is False
        with pytest.raises(StoreError, match="Redis unavailable"):
            await store.connect()


class TestRedisStoreConstruction:
    """Test store construction."""

    def test_requires_url_or_client(self):
        with pytest.raises(ValueError):
            RedisStore()

    def test_from_url(self):
        store = RedisStore(redis_url="redis://localhost:6379/0")

        assert store.client is not None
