"""In-memory persistence provider, used for tests and ephemeral sessions."""

import threading

from .base import KeyValueStore, validate_key


class InMemoryStore(KeyValueStore):
    """Dict-backed provider. Contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None, **config):
        super().__init__(**config)
        self._data: dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(validate_key(key))

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"InMemoryStore stores text, got {type(value).__name__}")
        with self._lock:
            self._data[validate_key(key)] = value
