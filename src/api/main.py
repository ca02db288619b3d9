"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Annotated

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from infrastructure.dependencies import (
    close_store_connections,
    get_store_connection_factory,
)
from infrastructure.key_value.connection import RedisConnectionFactory
from infrastructure.logging import configure_logging
from infrastructure.settings import get_settings
from infrastructure.version import __version__
from users.presentation import routes as users_routes


@asynccontextmanager
async def userstore_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Store connection pool lifecycle (created lazily, closed on shutdown)
    """
    configure_logging(debug=get_settings().debug)

    yield

    await close_store_connections()


app = FastAPI(
    title="UserStore API",
    description="Create and list users kept in a key-value store",
    version=__version__,
    lifespan=userstore_lifespan,
)

# Include Users bounded context routes
app.include_router(users_routes.router)


@app.get("/", response_class=PlainTextResponse)
def root() -> str:
    """Liveness probe."""
    return "Hello, World!"


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/store")
async def health_store(
    factory: Annotated[RedisConnectionFactory, Depends(get_store_connection_factory)],
) -> dict:
    """Check key-value store connection health.

    Returns the connection status and the store address.
    """
    settings = factory.settings
    try:
        is_healthy = await factory.verify_connection()

        return {
            "status": "ok" if is_healthy else "unhealthy",
            "connected": is_healthy,
            "host": settings.host,
            "port": settings.port,
        }
    except Exception as e:
        return {
            "status": "error",
            "connected": False,
            "host": settings.host,
            "port": settings.port,
            "error": str(e),
        }


def run() -> None:
    """Serve the application with uvicorn using the configured address."""
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
