"""Key-value store primitives.

This module provides the store-facing port (set/get/enumerate-keys) and its
error types, shared by bounded contexts that persist flat key -> text pairs.
"""

from shared_kernel.key_value.exceptions import (
    KeyNotFoundError,
    KeyValueStoreError,
    StoreConnectionError,
    StoreOperationError,
)
from shared_kernel.key_value.protocols import KeyValueStore, StoreConnectionProvider

__all__ = [
    "KeyNotFoundError",
    "KeyValueStore",
    "KeyValueStoreError",
    "StoreConnectionError",
    "StoreConnectionProvider",
    "StoreOperationError",
]
