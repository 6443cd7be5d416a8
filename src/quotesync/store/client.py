"""Async Redis client wrapper."""

from __future__ import annotations

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from quotesync.core.exceptions import StoreError


class AsyncRedisClient:
    """Async Redis client wrapper storing string values without expiry."""

    def __init__(self, redis_url: str) -> None:
        self._redis_url = redis_url
        self._pool: aioredis.ConnectionPool | None = None
        self._redis: aioredis.Redis | None = None

    async def connect(self) -> None:
        """Connect to Redis."""
        self._pool = aioredis.ConnectionPool.from_url(
            self._redis_url,
            max_connections=20,
            decode_responses=True,
        )
        self._redis = aioredis.Redis(connection_pool=self._pool)

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._redis:
            await self._redis.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._redis = None
        self._pool = None

    def _require(self) -> aioredis.Redis:
        if self._redis is None:
            raise StoreError("Redis client is not connected")
        return self._redis

    async def get(self, key: str) -> str | None:
        """Get a value, or None if the key is absent."""
        try:
            return await self._require().get(key)
        except RedisError as e:
            raise StoreError(f"Redis GET failed: {e}", key=key) from e

    async def set(self, key: str, value: str) -> None:
        """Store a value."""
        try:
            await self._require().set(key, value)
        except RedisError as e:
            raise StoreError(f"Redis SET failed: {e}", key=key) from e

    async def ping(self) -> bool:
        """Check the connection."""
        try:
            return bool(await self._require().ping())
        except RedisError as e:
            raise StoreError(f"Redis PING failed: {e}") from e

    async def __aenter__(self) -> "AsyncRedisClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
