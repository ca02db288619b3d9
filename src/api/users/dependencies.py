"""Dependency injection for the Users bounded context.

Provides the user store and its collaborators to FastAPI routes. Tests
substitute a fake store by overriding ``get_user_store`` (or
``get_store_connection_factory``) in ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.dependencies import (
    get_observation_context,
    get_store_connection_factory,
)
from infrastructure.observability.context import ObservationContext
from infrastructure.settings import get_settings
from shared_kernel.key_value.protocols import StoreConnectionProvider
from users.infrastructure.observability import (
    DefaultUserStoreProbe,
    UserStoreProbe,
)
from users.infrastructure.user_store import UserStoreAdapter
from users.ports.repositories import IUserStore


def get_user_store_probe(
    context: Annotated[ObservationContext, Depends(get_observation_context)],
) -> UserStoreProbe:
    """Get a UserStoreProbe bound to the current request.

    Args:
        context: Request-scoped observation context

    Returns:
        DefaultUserStoreProbe instance for observability
    """
    return DefaultUserStoreProbe().with_context(context)


def get_user_store(
    connections: Annotated[
        StoreConnectionProvider, Depends(get_store_connection_factory)
    ],
    probe: Annotated[UserStoreProbe, Depends(get_user_store_probe)],
) -> IUserStore:
    """Get a UserStoreAdapter over the shared connection factory.

    Args:
        connections: Application-scoped store connection factory
        probe: Request-bound user store probe

    Returns:
        UserStoreAdapter instance
    """
    return UserStoreAdapter(connections=connections, probe=probe)


def get_list_limit() -> int:
    """Maximum number of users returned by a listing."""
    return get_settings().list_limit
