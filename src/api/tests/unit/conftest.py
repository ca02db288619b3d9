"""Unit test fixtures with fake and mocked dependencies."""

from __future__ import annotations

from contextlib import asynccontextmanager

import pytest

from shared_kernel.key_value.exceptions import (
    KeyNotFoundError,
    StoreConnectionError,
    StoreOperationError,
)


class FakeKeyValueStore:
    """In-memory KeyValueStore recording every call it receives.

    Enumeration follows insertion order. Failures are injected by naming
    the command in ``failing_commands`` or the key in ``failing_keys``.
    Keys in ``evict_after_enumerate`` are removed right after an
    enumeration returns them, simulating a concurrent delete.
    """

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.calls: list[tuple[str, ...]] = []
        self.failing_commands: set[str] = set()
        self.failing_keys: set[str] = set()
        self.evict_after_enumerate: set[str] = set()

    def _check(self, command: str) -> None:
        if command in self.failing_commands:
            raise StoreOperationError(f"{command} failed", command=command)

    async def set(self, key: str, value: str) -> None:
        self.calls.append(("set", key, value))
        self._check("set")
        self.data[key] = value

    async def get(self, key: str) -> str:
        self.calls.append(("get", key))
        self._check("get")
        if key in self.failing_keys:
            raise StoreOperationError(f"GET {key} timed out", command="GET")
        if key not in self.data:
            raise KeyNotFoundError(key)
        return self.data[key]

    async def enumerate_keys(self, limit: int) -> list[str]:
        self.calls.append(("enumerate_keys", str(limit)))
        self._check("enumerate_keys")
        keys = list(self.data)[: max(limit, 0)]
        for key in self.evict_after_enumerate:
            self.data.pop(key, None)
        return keys

    async def ping(self) -> bool:
        self.calls.append(("ping",))
        self._check("ping")
        return True


class FakeConnectionProvider:
    """StoreConnectionProvider handing out a single FakeKeyValueStore."""

    def __init__(self, store: FakeKeyValueStore) -> None:
        self.store = store
        self.available = True
        self.acquired = 0
        self.released = 0

    @asynccontextmanager
    async def connection(self):
        if not self.available:
            raise StoreConnectionError("Connection refused")
        self.acquired += 1
        try:
            yield self.store
        finally:
            self.released += 1


@pytest.fixture
def fake_store() -> FakeKeyValueStore:
    """Provide an empty in-memory key-value store."""
    return FakeKeyValueStore()


@pytest.fixture
def fake_connections(fake_store: FakeKeyValueStore) -> FakeConnectionProvider:
    """Provide a connection provider over the fake store."""
    return FakeConnectionProvider(fake_store)


@pytest.fixture
def store_settings():
    """Provide test store settings."""
    from infrastructure.settings import StoreSettings

    return StoreSettings(
        host="testhost",
        port=6380,
        db=2,
        password="testpass",
        max_connections=5,
        socket_timeout=1.5,
        socket_connect_timeout=2.5,
    )
