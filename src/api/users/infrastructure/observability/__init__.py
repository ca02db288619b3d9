"""Observability for Users infrastructure."""

from users.infrastructure.observability.user_store_probe import (
    DefaultUserStoreProbe,
    UserStoreProbe,
)

__all__ = ["DefaultUserStoreProbe", "UserStoreProbe"]
