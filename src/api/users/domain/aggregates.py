"""User aggregate for the Users context."""

from __future__ import annotations

from dataclasses import dataclass

from users.domain.value_objects import UserId


@dataclass(frozen=True)
class User:
    """A user record: an immutable id and the username it was created with.

    In the store a user is a single flat pair, ``key`` -> ``username``.
    Users are never updated or deleted; the only way to read them back is
    by enumerating the store.
    """

    id: UserId
    username: str

    @classmethod
    def from_store_pair(cls, key: str, value: str) -> User:
        """Rebuild a user from an enumerated key and its fetched value.

        The key is taken verbatim as the id; keys written by other clients
        are not rejected for failing to parse as UUIDs.
        """
        return cls(id=UserId(value=key), username=value)

    @property
    def key(self) -> str:
        """Store key for this user."""
        return str(self.id)

    def __str__(self) -> str:
        return f"User({self.username})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
