"""
Abstract base class for persistence providers.

A provider is a dumb key -> text blob store. The record store hands it a
whole serialized collection per key and reads it back; providers know
nothing about the shape of what they hold.
"""

from abc import ABC, abstractmethod

from investsmart.core.exceptions import StorageError, StoragePermissionError


class KeyValueStore(ABC):
    """Abstract base class for synchronous key -> text storage."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored text for ``key``, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


def validate_key(key: str) -> str:
    """Reject keys that are empty or could escape a provider's namespace."""
    if not isinstance(key, str):
        raise StoragePermissionError(f"Storage key must be a string, got {type(key).__name__}")
    raw_key = key.strip()
    if not raw_key:
        raise StoragePermissionError("Storage key cannot be empty.")
    if "\x00" in raw_key:
        raise StoragePermissionError("Storage key cannot contain null bytes.")
    return raw_key


__all__ = ["KeyValueStore", "StorageError", "StoragePermissionError", "validate_key"]
