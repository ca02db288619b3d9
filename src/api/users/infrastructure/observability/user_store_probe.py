"""Domain probe for user store operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to creating and listing users.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserStoreProbe(Protocol):
    """Domain probe for user store operations."""

    def user_created(self, user_id: str, username: str) -> None:
        """Record that a user was written to the store."""
        ...

    def user_create_failed(self, user_id: str, error: str) -> None:
        """Record that writing a user failed."""
        ...

    def users_listed(self, count: int, limit: int) -> None:
        """Record that users were listed."""
        ...

    def user_list_failed(self, error: str, key: str | None = None) -> None:
        """Record that listing users failed, optionally at a given key."""
        ...

    def store_unavailable(self, operation: str, error: str) -> None:
        """Record that no store connection could be acquired."""
        ...

    def with_context(self, context: ObservationContext) -> UserStoreProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserStoreProbe:
    """Default implementation of UserStoreProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserStoreProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserStoreProbe(logger=self._logger, context=context)

    def user_created(self, user_id: str, username: str) -> None:
        self._logger.info(
            "user_created",
            user_id=user_id,
            username=username,
            **self._get_context_kwargs(),
        )

    def user_create_failed(self, user_id: str, error: str) -> None:
        self._logger.error(
            "user_create_failed",
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def users_listed(self, count: int, limit: int) -> None:
        self._logger.debug(
            "users_listed",
            count=count,
            limit=limit,
            **self._get_context_kwargs(),
        )

    def user_list_failed(self, error: str, key: str | None = None) -> None:
        self._logger.error(
            "user_list_failed",
            error=error,
            key=key,
            **self._get_context_kwargs(),
        )

    def store_unavailable(self, operation: str, error: str) -> None:
        self._logger.error(
            "user_store_unavailable",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )
