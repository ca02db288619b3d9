"""Redis-backed key-value store infrastructure."""

from infrastructure.key_value.connection import RedisConnectionFactory
from infrastructure.key_value.redis_store import RedisKeyValueStore

__all__ = ["RedisConnectionFactory", "RedisKeyValueStore"]
