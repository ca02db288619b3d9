"""Connection factory for the Redis key-value store.

Owns the process-wide ``redis.asyncio`` connection pool and hands out
store handles, each bound to one pooled connection for its lifetime.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from redis.asyncio import BlockingConnectionPool, Redis
from redis.exceptions import RedisError

from infrastructure.key_value.redis_store import RedisKeyValueStore
from infrastructure.observability.probes import (
    DefaultStoreConnectionProbe,
    StoreConnectionProbe,
)
from shared_kernel.key_value.exceptions import (
    KeyValueStoreError,
    StoreConnectionError,
)

if TYPE_CHECKING:
    from infrastructure.settings import StoreSettings


class RedisConnectionFactory:
    """Factory for pooled Redis connections.

    The pool itself does no I/O until the first connection is requested.
    When every connection is checked out, callers wait up to
    ``socket_connect_timeout`` seconds for one to be released.

    Attributes:
        _settings: Store configuration settings
        _pool: The underlying BlockingConnectionPool
        _probe: Observability probe for monitoring
    """

    def __init__(
        self,
        settings: StoreSettings,
        probe: StoreConnectionProbe | None = None,
    ):
        """Initialize the factory and its connection pool.

        Args:
            settings: Store connection settings
            probe: Optional observability probe
        """
        self._settings = settings
        self._probe = probe or DefaultStoreConnectionProbe()
        self._pool = BlockingConnectionPool(
            host=settings.host,
            port=settings.port,
            db=settings.db,
            password=settings.password.get_secret_value() or None,
            max_connections=settings.max_connections,
            timeout=settings.socket_connect_timeout,
            socket_timeout=settings.socket_timeout,
            socket_connect_timeout=settings.socket_connect_timeout,
            decode_responses=True,
        )
        self._probe.pool_created(
            url=settings.url,
            max_connections=settings.max_connections,
        )

    @property
    def settings(self) -> StoreSettings:
        """Settings the pool was built from."""
        return self._settings

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[RedisKeyValueStore]:
        """Acquire a pooled connection for the duration of the block.

        Yields:
            A RedisKeyValueStore bound to the acquired connection

        Raises:
            StoreConnectionError: If the connection cannot be established
                or the pool stays exhausted past the timeout
        """
        client = Redis(connection_pool=self._pool, single_connection_client=True)
        try:
            await client.initialize()
        except (RedisError, OSError) as e:
            self._probe.connection_failed(url=self._settings.url, error=e)
            raise StoreConnectionError(
                f"Failed to connect to store at {self._settings.url}: {e}"
            ) from e

        self._probe.connection_acquired()
        try:
            yield RedisKeyValueStore(client)
        finally:
            await client.aclose(close_connection_pool=False)
            self._probe.connection_released()

    async def verify_connection(self) -> bool:
        """Check that a connection can be acquired and answers PING."""
        try:
            async with self.connection() as store:
                return await store.ping()
        except KeyValueStoreError:
            return False

    async def close(self) -> None:
        """Disconnect every connection in the pool."""
        await self._pool.disconnect()
        self._probe.pool_closed()
