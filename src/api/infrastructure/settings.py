"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseSettings):
    """Key-value store (Redis) connection settings.

    Environment variables:
        USERSTORE_STORE_HOST: Store host (default: 127.0.0.1)
        USERSTORE_STORE_PORT: Store port (default: 6379)
        USERSTORE_STORE_DB: Logical database index (default: 0)
        USERSTORE_STORE_PASSWORD: Store password (optional)
        USERSTORE_STORE_MAX_CONNECTIONS: Maximum pooled connections (default: 10)
        USERSTORE_STORE_SOCKET_TIMEOUT: Per-command timeout in seconds (default: 5.0)
        USERSTORE_STORE_SOCKET_CONNECT_TIMEOUT: Connect timeout in seconds (default: 5.0)
    """

    model_config = SettingsConfigDict(
        env_prefix="USERSTORE_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Store host")
    port: int = Field(default=6379, description="Store port", ge=1, le=65535)
    db: int = Field(default=0, description="Logical database index", ge=0, le=15)
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Store password",
    )
    max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    socket_timeout: float = Field(
        default=5.0,
        description="Per-command socket timeout in seconds",
        gt=0,
    )
    socket_connect_timeout: float = Field(
        default=5.0,
        description="Connect timeout in seconds",
        gt=0,
    )

    @property
    def url(self) -> str:
        """Generate a connection URL (without password for logging)."""
        return f"redis://{self.host}:{self.port}/{self.db}"


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="USERSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="UserStore API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    # HTTP server
    host: str = Field(default="127.0.0.1", description="Address the server binds to")
    port: int = Field(
        default=8000,
        description="Port the server listens on",
        ge=1,
        le=65535,
    )

    list_limit: int = Field(
        default=10,
        description="Maximum number of users returned by GET /users",
        ge=1,
        le=1000,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_store_settings() -> StoreSettings:
    """Get cached store settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return StoreSettings()
