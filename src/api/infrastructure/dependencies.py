"""Shared infrastructure dependencies.

Provides ONLY raw store infrastructure resources (the connection factory)
and request-scoped observation context.
Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from functools import lru_cache
from uuid import uuid4

from fastapi import Request

from infrastructure.key_value.connection import RedisConnectionFactory
from infrastructure.observability.context import ObservationContext
from infrastructure.settings import get_store_settings


@lru_cache
def get_store_connection_factory() -> RedisConnectionFactory:
    """Get the application-scoped store connection factory (singleton).

    The underlying pool is safe to share across concurrent requests.

    Returns:
        RedisConnectionFactory configured from store settings.
    """
    settings = get_store_settings()
    return RedisConnectionFactory(settings)


async def close_store_connections() -> None:
    """Close the connection pool if it was ever created.

    Should be called on application shutdown. Resets the cached factory
    so a later call creates a fresh pool.
    """
    if get_store_connection_factory.cache_info().currsize == 0:
        return

    await get_store_connection_factory().close()
    get_store_connection_factory.cache_clear()


def get_observation_context(request: Request) -> ObservationContext:
    """Build the observation context for the current request.

    Uses the caller's X-Request-ID header when present, otherwise
    generates one.
    """
    return ObservationContext(
        request_id=request.headers.get("X-Request-ID") or uuid4().hex,
        method=request.method,
        path=request.url.path,
    )
