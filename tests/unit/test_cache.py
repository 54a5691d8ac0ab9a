from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
import redis.asyncio as redis

from app.core.cache import InMemoryCache, RedisCache, build_cache
from app.core.config import Settings


@pytest.mark.anyio
async def test_in_memory_get_set_delete():
    cache = InMemoryCache()

    assert await cache.get("k") is None
    await cache.set("k", "v", ttl=60)
    assert await cache.get("k") == "v"
    await cache.delete("k")
    assert await cache.get("k") is None


@pytest.mark.anyio
async def test_in_memory_delete_missing_key_is_noop():
    cache = InMemoryCache()
    await cache.delete("missing")
    assert await cache.get("missing") is None


@pytest.mark.anyio
async def test_in_memory_entry_expires():
    cache = InMemoryCache()

    with patch("app.core.cache.time.monotonic", return_value=1000.0):
        await cache.set("k", "v", ttl=30)
    with patch("app.core.cache.time.monotonic", return_value=1029.0):
        assert await cache.get("k") == "v"
    with patch("app.core.cache.time.monotonic", return_value=1030.0):
        assert await cache.get("k") is None


@pytest.mark.anyio
async def test_in_memory_close_clears_entries():
    cache = InMemoryCache()
    await cache.set("k", "v", ttl=60)
    await cache.close()
    assert await cache.get("k") is None


def _redis_cache_with(mock_client: AsyncMock) -> RedisCache:
    cache = RedisCache("redis://localhost:6379/0")
    cache._redis = mock_client
    return cache


@pytest.mark.anyio
async def test_redis_set_uses_expiry():
    mock_client = AsyncMock()
    cache = _redis_cache_with(mock_client)

    await cache.set("1", "payload", ttl=1800)

    mock_client.set.assert_awaited_once_with("1", "payload", ex=1800)


@pytest.mark.anyio
async def test_redis_get_and_delete():
    mock_client = AsyncMock()
    mock_client.get.return_value = "payload"
    cache = _redis_cache_with(mock_client)

    assert await cache.get("1") == "payload"
    await cache.delete("1")

    mock_client.get.assert_awaited_once_with("1")
    mock_client.delete.assert_awaited_once_with("1")


@pytest.mark.anyio
async def test_redis_errors_propagate():
    mock_client = AsyncMock()
    mock_client.get.side_effect = redis.ConnectionError("down")
    cache = _redis_cache_with(mock_client)

    with pytest.raises(redis.ConnectionError):
        await cache.get("1")


@pytest.mark.anyio
async def test_redis_check_connection():
    mock_client = AsyncMock()
    mock_client.ping.return_value = True
    cache = _redis_cache_with(mock_client)
    assert await cache.check_connection() is True

    mock_client.ping.side_effect = redis.ConnectionError("down")
    assert await cache.check_connection() is False


@pytest.mark.anyio
async def test_redis_close():
    mock_client = AsyncMock()
    cache = _redis_cache_with(mock_client)
    await cache.close()
    mock_client.aclose.assert_awaited_once()


def test_build_cache_prefers_redis():
    cache = build_cache(Settings(REDIS_URL="redis://localhost:6379/0", CACHE_IN_MEMORY=True))
    assert isinstance(cache, RedisCache)


def test_build_cache_in_memory():
    cache = build_cache(Settings(CACHE_IN_MEMORY=True))
    assert isinstance(cache, InMemoryCache)


def test_build_cache_disabled():
    assert build_cache(Settings()) is None
