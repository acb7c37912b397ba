"""Redis implementation of the key-value store."""

import logging
from typing import Optional, Set

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..errors import StoreError
from .base import KeyValueStoreBase


class RedisStore(KeyValueStoreBase):
    """Key-value store backed by a shared ``redis.asyncio`` client.

    The client multiplexes a connection pool, so a single instance is
    created at startup and used by every request concurrently.
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        client: Optional[redis.Redis] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis store.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            client: Already constructed client; takes precedence over redis_url
            logger: Optional logger instance
        """
        if client is None and redis_url is None:
            raise ValueError("Either redis_url or client is required")

        self.redis_url = redis_url
        self.logger = logger or logging.getLogger(__name__)
        self.client = client if client is not None else redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
        )

    async def connect(self) -> None:
        """Verify the server answers before serving requests."""
        try:
            await self.client.ping()
        except RedisError as e:
            self.logger.error(f"Failed to connect to Redis: {e}")
            raise StoreError(f"Redis unavailable: {e}") from e
        self.logger.info("Connected to Redis")

    async def get(self, key: str) -> Optional[str]:
        try:
            return await self.client.get(key)
        except RedisError as e:
            self.logger.error(f"Redis GET {key} failed: {e}")
            raise StoreError(f"Store read failed for {key}") from e

    async def set(self, key: str, value: str) -> None:
        try:
            await self.client.set(key, value)
        except RedisError as e:
            self.logger.error(f"Redis SET {key} failed: {e}")
            raise StoreError(f"Store write failed for {key}") from e

    async def delete(self, key: str) -> bool:
        try:
            return await self.client.delete(key) > 0
        except RedisError as e:
            self.logger.error(f"Redis DEL {key} failed: {e}")
            raise StoreError(f"Store delete failed for {key}") from e

    async def set_add(self, set_key: str, member: str) -> bool:
        try:
            return await self.client.sadd(set_key, member) > 0
        except RedisError as e:
            self.logger.error(f"Redis SADD {set_key} failed: {e}")
            raise StoreError(f"Store write failed for {set_key}") from e

    async def set_remove(self, set_key: str, member: str) -> bool:
        try:
            return await self.client.srem(set_key, member) > 0
        except RedisError as e:
            self.logger.error(f"Redis SREM {set_key} failed: {e}")
            raise StoreError(f"Store delete failed for {set_key}") from e

    async def set_members(self, set_key: str) -> Set[str]:
        try:
            return set(await self.client.smembers(set_key))
        except RedisError as e:
            self.logger.error(f"Redis SMEMBERS {set_key} failed: {e}")
            raise StoreError(f"Store read failed for {set_key}") from e

    async def health_check(self) -> bool:
        try:
            return bool(await self.client.ping())
        except RedisError as e:
            self.logger.warning(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        await self.client.aclose()
        self.logger.info("Redis connection closed")
