"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class StoreConnectionProbe(Protocol):
    """Domain probe for key-value store connection observability.

    This probe captures domain-significant events related to store
    connections without exposing logging implementation details.
    """

    def pool_created(self, url: str, max_connections: int) -> None:
        """Record that the connection pool was created."""
        ...

    def pool_closed(self) -> None:
        """Record that the connection pool was closed."""
        ...

    def connection_acquired(self) -> None:
        """Record that a connection was acquired from the pool."""
        ...

    def connection_released(self) -> None:
        """Record that a connection was returned to the pool."""
        ...

    def connection_failed(self, url: str, error: Exception) -> None:
        """Record that acquiring a connection failed."""
        ...


class DefaultStoreConnectionProbe:
    """Default implementation of StoreConnectionProbe using structlog.

    The pool is application-scoped, so its events carry no request metadata.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger()

    def pool_created(self, url: str, max_connections: int) -> None:
        """Record that the connection pool was created."""
        self._logger.info(
            "store_pool_created",
            url=url,
            max_connections=max_connections,
        )

    def pool_closed(self) -> None:
        """Record that the connection pool was closed."""
        self._logger.info("store_pool_closed")

    def connection_acquired(self) -> None:
        """Record that a connection was acquired from the pool."""
        self._logger.debug("store_connection_acquired")

    def connection_released(self) -> None:
        """Record that a connection was returned to the pool."""
        self._logger.debug("store_connection_released")

    def connection_failed(self, url: str, error: Exception) -> None:
        """Record that acquiring a connection failed."""
        self._logger.error(
            "store_connection_failed",
            url=url,
            error=str(error),
        )
