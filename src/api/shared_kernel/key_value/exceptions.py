"""Exceptions for key-value store operations."""


class KeyValueStoreError(Exception):
    """Base exception for key-value store errors."""

    pass


class StoreConnectionError(KeyValueStoreError):
    """Raised when a connection to the store cannot be acquired."""

    pass


class StoreOperationError(KeyValueStoreError):
    """Raised when a store command fails (I/O error, timeout, rejection)."""

    def __init__(self, message: str, command: str | None = None):
        super().__init__(message)
        self.command = command


class KeyNotFoundError(KeyValueStoreError):
    """Raised when a GET targets a key that holds no value."""

    def __init__(self, key: str):
        super().__init__(f"Key not found: {key}")
        self.key = key
