"""Key-value store layer for redirect records."""

from .base import KeyValueStoreBase
from .redis_store import RedisStore

__all__ = ["KeyValueStoreBase", "RedisStore"]
