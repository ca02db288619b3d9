"""Integration test fixtures for key-value store tests.

These fixtures require a running Redis instance. Use docker-compose for
testing; tests are skipped when the store cannot be reached.
"""

from collections.abc import AsyncGenerator
import os

import pytest
import pytest_asyncio
from pydantic import SecretStr

from infrastructure.key_value.connection import RedisConnectionFactory
from infrastructure.settings import StoreSettings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires a running Redis)",
    )


@pytest.fixture(scope="session")
def integration_store_settings() -> StoreSettings:
    """Store settings for integration tests.

    Override with environment variables:
        USERSTORE_STORE_HOST, USERSTORE_STORE_PORT, etc.

    Uses logical database 15 by default so tests never touch real data.
    """
    return StoreSettings(
        host=os.getenv("USERSTORE_STORE_HOST", "127.0.0.1"),
        port=int(os.getenv("USERSTORE_STORE_PORT", "6379")),
        db=int(os.getenv("USERSTORE_TEST_STORE_DB", "15")),
        password=SecretStr(os.getenv("USERSTORE_STORE_PASSWORD", "")),
        socket_connect_timeout=1.0,
    )


@pytest_asyncio.fixture
async def connection_factory(
    integration_store_settings: StoreSettings,
) -> AsyncGenerator[RedisConnectionFactory, None]:
    """Provide a connection factory over a flushed test database.

    Skips the test when Redis is not reachable.
    """
    factory = RedisConnectionFactory(integration_store_settings)
    if not await factory.verify_connection():
        await factory.close()
        pytest.skip(f"Redis not reachable at {integration_store_settings.url}")

    async with factory.connection() as store:
        await store._client.flushdb()

    yield factory

    async with factory.connection() as store:
        await store._client.flushdb()
    await factory.close()
