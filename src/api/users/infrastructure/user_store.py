"""Key-value store implementation of IUserStore.

Each user is one flat pair in the store: the key is the user's id in
canonical UUID form and the value is the username as plain text.
"""

from __future__ import annotations

from contextlib import AsyncExitStack

from shared_kernel.key_value.exceptions import (
    KeyValueStoreError,
    StoreConnectionError,
)
from shared_kernel.key_value.protocols import KeyValueStore, StoreConnectionProvider
from users.domain.aggregates import User
from users.domain.value_objects import UserId
from users.infrastructure.observability import (
    DefaultUserStoreProbe,
    UserStoreProbe,
)
from users.ports.exceptions import (
    ClientInputError,
    StoreReadError,
    StoreUnavailableError,
    StoreWriteError,
)
from users.ports.repositories import IUserStore


class UserStoreAdapter(IUserStore):
    """Translates user operations into key-value store primitives.

    Stateless across requests: it holds the injected connection provider
    and probe, nothing else. Every operation acquires its own connection.

    Listing is enumerate-then-fetch: the store's enumeration returns keys
    only, so each value is fetched with a separate GET. The two phases are
    not atomic. A key created after enumeration is missed, and a key that
    disappears before its GET fails the whole listing.
    """

    def __init__(
        self,
        connections: StoreConnectionProvider,
        probe: UserStoreProbe | None = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            connections: Provider of store connections
            probe: Optional domain probe for observability
        """
        self._connections = connections
        self._probe = probe or DefaultUserStoreProbe()

    async def _acquire(self, stack: AsyncExitStack, operation: str) -> KeyValueStore:
        """Enter a store connection on ``stack``.

        Raises:
            StoreUnavailableError: If the connection cannot be acquired
        """
        try:
            return await stack.enter_async_context(self._connections.connection())
        except StoreConnectionError as e:
            self._probe.store_unavailable(operation=operation, error=str(e))
            raise StoreUnavailableError(f"Store unavailable: {e}") from e

    async def create(self, username: str) -> User:
        """Create a user under a freshly generated id.

        Issues exactly one SET. Nothing is buffered, so once this returns
        a GET of the new key yields ``username``.

        Args:
            username: Non-empty username

        Returns:
            The created User

        Raises:
            ClientInputError: If username is empty (no store call is made)
            StoreUnavailableError: If no connection can be acquired
            StoreWriteError: If the SET fails
        """
        if not username:
            raise ClientInputError("username must not be empty")

        user = User(id=UserId.generate(), username=username)

        async with AsyncExitStack() as stack:
            store = await self._acquire(stack, "create")
            try:
                await store.set(user.key, user.username)
            except KeyValueStoreError as e:
                self._probe.user_create_failed(user_id=user.id.value, error=str(e))
                raise StoreWriteError(f"Failed to store user {user.id}: {e}") from e

        self._probe.user_created(user_id=user.id.value, username=user.username)
        return user

    async def list(self, limit: int) -> list[User]:
        """List up to ``limit`` users, enumerating keys then fetching each.

        Args:
            limit: Maximum number of users to return

        Returns:
            Users in store enumeration order

        Raises:
            StoreUnavailableError: If no connection can be acquired
            StoreReadError: If enumeration fails or any single GET fails
        """
        users = []

        async with AsyncExitStack() as stack:
            store = await self._acquire(stack, "list")

            try:
                keys = await store.enumerate_keys(limit)
            except KeyValueStoreError as e:
                self._probe.user_list_failed(error=str(e))
                raise StoreReadError(f"Failed to enumerate users: {e}") from e

            for key in keys[: max(limit, 0)]:
                try:
                    username = await store.get(key)
                except KeyValueStoreError as e:
                    self._probe.user_list_failed(error=str(e), key=key)
                    raise StoreReadError(f"Failed to fetch user {key}: {e}") from e
                users.append(User.from_store_pair(key, username))

        self._probe.users_listed(count=len(users), limit=limit)
        return users
