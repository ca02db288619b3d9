"""Key-value store protocols.

Defines the interface consumed from the external key-value service, allowing
for swappable implementations (Redis, in-memory fakes in tests).
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """A handle on a flat string-keyed store.

    Every call is a single round trip. Implementations make no atomicity
    promise across calls; any per-call timeout is enforced by the
    underlying client.
    """

    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Raises:
            StoreOperationError: If the write fails
        """
        ...

    async def get(self, key: str) -> str:
        """Fetch the value stored under ``key``.

        Raises:
            KeyNotFoundError: If the key holds no value
            StoreOperationError: If the read fails
        """
        ...

    async def enumerate_keys(self, limit: int) -> list[str]:
        """Return at most ``limit`` keys, in the store's enumeration order.

        Keys only, no values.

        Raises:
            StoreOperationError: If the enumeration fails
        """
        ...

    async def ping(self) -> bool:
        """Check that the store answers."""
        ...


@runtime_checkable
class StoreConnectionProvider(Protocol):
    """Hands out store handles backed by a live connection."""

    def connection(self) -> AbstractAsyncContextManager[KeyValueStore]:
        """Acquire a connection for the duration of the ``async with`` block.

        Raises:
            StoreConnectionError: If no connection can be acquired
        """
        ...
