"""Domain layer for the Users context."""

from users.domain.aggregates import User
from users.domain.value_objects import UserId

__all__ = ["User", "UserId"]
