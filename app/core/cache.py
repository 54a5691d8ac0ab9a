"""String key/value caches with per-entry TTL: Redis for shared deployments, in-memory otherwise."""

from __future__ import annotations

import asyncio
import logging
import time

import redis.asyncio as redis

from app.core.config import Settings

logger = logging.getLogger(__name__)


class CacheBackend:
    async def get(self, key: str) -> str | None:
        raise NotImplementedError

    async def set(self, key: str, value: str, ttl: int) -> None:
        raise NotImplementedError

    async def delete(self, key: str) -> None:
        raise NotImplementedError

    async def check_connection(self) -> bool:
        return True

    async def close(self) -> None:
        pass


class InMemoryCache(CacheBackend):
    """Process-local cache. Entries are not shared between service instances."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> str | None:
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at <= time.monotonic():
                del self._entries[key]
                return None
            return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        async with self._lock:
            self._entries[key] = (value, time.monotonic() + ttl)

    async def delete(self, key: str) -> None:
        async with self._lock:
            self._entries.pop(key, None)

    async def close(self) -> None:
        async with self._lock:
            self._entries.clear()


class RedisCache(CacheBackend):
    def __init__(self, url: str) -> None:
        self._redis = redis.from_url(url, encoding="utf-8", decode_responses=True)

    async def get(self, key: str) -> str | None:
        return await self._redis.get(key)

    async def set(self, key: str, value: str, ttl: int) -> None:
        await self._redis.set(key, value, ex=ttl)

    async def delete(self, key: str) -> None:
        await self._redis.delete(key)

    async def check_connection(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except redis.RedisError:
            logger.exception("Redis connection check failed")
            return False

    async def close(self) -> None:
        await self._redis.aclose()


def build_cache(settings: Settings) -> CacheBackend | None:
    if settings.REDIS_URL:
        logger.info("Using Redis cache")
        return RedisCache(settings.REDIS_URL)
    if settings.CACHE_IN_MEMORY:
        logger.info("No REDIS_URL configured, using in-memory cache")
        return InMemoryCache()
    logger.info("Caching disabled")
    return None
