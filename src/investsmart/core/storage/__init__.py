"""
Persistence providers for investsmart.

Synchronous key -> text stores behind a pluggable interface: an in-memory
store for tests and a local-filesystem store by default.
"""

from .base import KeyValueStore, StorageError, StoragePermissionError, validate_key
from .local import LocalStore
from .memory import InMemoryStore

__all__ = [
    "InMemoryStore",
    "KeyValueStore",
    "LocalStore",
    "StorageError",
    "StoragePermissionError",
    "validate_key",
]
