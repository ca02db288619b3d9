"""Domain exceptions for the Users bounded context.

These exceptions represent domain-level errors raised by the user store.
The presentation layer maps them to HTTP responses; every store-side
error becomes a generic 500, the subtype only matters internally.
"""


class ClientInputError(ValueError):
    """Raised when caller-supplied input is unusable.

    Raised before any store call is made, so no key is ever written
    for rejected input.
    """

    pass


class UserStoreError(Exception):
    """Base exception for failures talking to the key-value store."""

    pass


class StoreUnavailableError(UserStoreError):
    """Raised when no store connection can be acquired.

    Fatal for the current request only.
    """

    pass


class StoreWriteError(UserStoreError):
    """Raised when storing a user (SET) fails."""

    pass


class StoreReadError(UserStoreError):
    """Raised when enumerating keys or fetching a value fails.

    A list in which any single fetch fails raises this error as a whole;
    partial listings are never returned.
    """

    pass
