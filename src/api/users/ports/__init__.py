"""Ports (interfaces) for the Users context."""

from users.ports.exceptions import (
    ClientInputError,
    StoreReadError,
    StoreUnavailableError,
    StoreWriteError,
    UserStoreError,
)
from users.ports.repositories import IUserStore

__all__ = [
    "ClientInputError",
    "IUserStore",
    "StoreReadError",
    "StoreUnavailableError",
    "StoreWriteError",
    "UserStoreError",
]
