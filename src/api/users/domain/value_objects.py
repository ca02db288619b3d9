"""Value objects for the Users domain."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class UserId:
    """Identifier for a User aggregate.

    Uses random (version 4) UUIDs. The store does not enforce key
    uniqueness, so two users can only collide through the generator.
    """

    value: str

    def __str__(self) -> str:
        """Return the canonical hyphenated form, used as the store key."""
        return self.value

    @classmethod
    def generate(cls) -> UserId:
        """Generate a new UserId from a random UUID."""
        return cls(value=str(uuid4()))
