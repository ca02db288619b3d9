"""Repository protocols (ports) for the Users bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from users.domain.aggregates import User


@runtime_checkable
class IUserStore(Protocol):
    """Store for User records kept as id -> username pairs.

    Implementations own identifier generation, so callers only ever
    supply the username.
    """

    async def create(self, username: str) -> User:
        """Create and persist a new user.

        Args:
            username: Non-empty username

        Returns:
            The created User with a freshly generated id

        Raises:
            ClientInputError: If username is empty
            StoreUnavailableError: If no connection can be acquired
            StoreWriteError: If the write fails
        """
        ...

    async def list(self, limit: int) -> list[User]:
        """List up to ``limit`` users in store enumeration order.

        Args:
            limit: Maximum number of users to return

        Returns:
            Users built from the enumerated keys and their fetched values

        Raises:
            StoreUnavailableError: If no connection can be acquired
            StoreReadError: If enumeration or any single fetch fails
        """
        ...
