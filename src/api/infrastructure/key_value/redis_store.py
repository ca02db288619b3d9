"""Redis implementation of the KeyValueStore protocol.

Wraps a ``redis.asyncio.Redis`` client bound to a single pooled connection
and translates redis-py errors into key-value store exceptions.
"""

from __future__ import annotations

from contextlib import aclosing

from redis.asyncio import Redis
from redis.exceptions import RedisError

from shared_kernel.key_value.exceptions import KeyNotFoundError, StoreOperationError

# Replies are decoded as UTF-8 inside redis-py, so undecodable bytes surface
# as UnicodeDecodeError rather than RedisError.
_STORE_FAILURES = (RedisError, OSError, UnicodeDecodeError)


class RedisKeyValueStore:
    """KeyValueStore backed by Redis SET / GET / SCAN."""

    def __init__(self, client: Redis):
        """Initialize the store handle.

        Args:
            client: Redis client created with ``decode_responses=True``
        """
        self._client = client

    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``.

        Raises:
            StoreOperationError: If Redis rejects the write or the call fails
        """
        try:
            accepted = await self._client.set(key, value)
        except _STORE_FAILURES as e:
            raise StoreOperationError(f"SET {key} failed: {e}", command="SET") from e

        if not accepted:
            raise StoreOperationError(f"SET {key} was not applied", command="SET")

    async def get(self, key: str) -> str:
        """Fetch the value stored under ``key``.

        Raises:
            KeyNotFoundError: If the key does not exist
            StoreOperationError: If the call fails
        """
        try:
            value = await self._client.get(key)
        except _STORE_FAILURES as e:
            raise StoreOperationError(f"GET {key} failed: {e}", command="GET") from e

        if value is None:
            raise KeyNotFoundError(key)
        return value

    async def enumerate_keys(self, limit: int) -> list[str]:
        """Return at most ``limit`` distinct keys using SCAN.

        SCAN may report a key more than once; repeats are dropped so each
        key appears a single time, in first-seen order.

        Raises:
            StoreOperationError: If the scan fails
        """
        if limit <= 0:
            return []

        keys: list[str] = []
        seen: set[str] = set()
        try:
            async with aclosing(self._client.scan_iter(count=limit)) as scan:
                async for key in scan:
                    if key in seen:
                        continue
                    seen.add(key)
                    keys.append(key)
                    if len(keys) >= limit:
                        break
        except _STORE_FAILURES as e:
            raise StoreOperationError(f"SCAN failed: {e}", command="SCAN") from e

        return keys

    async def ping(self) -> bool:
        """Check that Redis answers PING."""
        try:
            return bool(await self._client.ping())
        except _STORE_FAILURES as e:
            raise StoreOperationError(f"PING failed: {e}", command="PING") from e
