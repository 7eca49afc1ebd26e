"""RecordStore — ordered CRUD over one persisted collection of records.

The whole collection lives under a single key of a ``KeyValueStore`` as a
JSON array. Each mutation rewrites that array before it returns, and the
in-memory list is only swapped in after the write succeeds, so readers never
see a mutation the provider does not hold.
"""

from __future__ import annotations

import dataclasses
import json
import threading
import weakref
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from loguru import logger

from investsmart.core.exceptions import RecordError, StorageError
from investsmart.core.storage import KeyValueStore, validate_key

from .export import to_csv
from .ids import MonotonicIdGenerator

R = TypeVar("R")


class RecordStore(Generic[R]):
    """Persisted, insertion-ordered collection of one record type.

    New records are prepended, so ``list()`` is newest first. Records are
    only ever added or removed, never edited in place. Every mutation re-reads
    the persisted collection first, so stores sharing a provider and key never
    hand out the same id or drop each other's records.

    Example::

        leads = RecordStore(Lead, LocalStore("~/.investsmart-data/store"), "invest_leads")
        lead = leads.add(name="Asha", email="asha@example.com")
        leads.remove(lead.id)
    """

    _LOCKS_GUARD = threading.Lock()
    _KEY_LOCKS: weakref.WeakKeyDictionary[KeyValueStore, dict[str, threading.RLock]] = weakref.WeakKeyDictionary()

    def __init__(
        self,
        record_type: type[R],
        provider: KeyValueStore,
        key: str,
        id_generator: MonotonicIdGenerator | None = None,
    ) -> None:
        if not dataclasses.is_dataclass(record_type) or "id" not in {f.name for f in dataclasses.fields(record_type)}:
            raise TypeError(f"{record_type!r} must be a dataclass with an 'id' field")
        if not callable(getattr(record_type, "create", None)):
            raise TypeError(f"{record_type.__name__} must define a create(record_id, **fields) classmethod")

        self.record_type = record_type
        self.provider = provider
        self.key = validate_key(key)
        self._ids = id_generator or MonotonicIdGenerator()
        self._records: list[R] = []

        self.load()

    # -- public API ----------------------------------------------------------

    def load(self) -> list[R]:
        """(Re)read the collection from the provider.

        A missing or unreadable blob leaves the store empty; this never raises.
        """
        with self._lock():
            self._refresh_unlocked()
        logger.debug(f"Loaded {len(self._records)} {self.record_type.__name__} record(s) from '{self.key}'")
        return self.list()

    def add(self, **fields: Any) -> R:
        """Create a record from ``fields``, prepend it and persist.

        Raises:
            RecordError: If the fields don't fit the record type.
            StorageError: If the provider cannot persist the collection.
        """
        with self._lock():
            self._refresh_unlocked()
            record_id = self._ids.next_id()
            try:
                record = self.record_type.create(record_id, **fields)
            except (TypeError, ValueError) as e:
                raise RecordError(f"Cannot create {self.record_type.__name__}: {e}") from e

            updated = [record, *self._records]
            self._write_unlocked(updated)
            self._records = updated

        logger.debug(f"Added {self.record_type.__name__} {record_id} to '{self.key}'")
        return record

    def remove(self, record_id: int) -> bool:
        """Delete the record with ``record_id`` and persist.

        Returns:
            True if a record was removed, False if no record had that id.
        """
        with self._lock():
            self._refresh_unlocked()
            updated = [r for r in self._records if r.id != record_id]
            removed = len(updated) != len(self._records)
            self._write_unlocked(updated)
            self._records = updated

        if removed:
            logger.debug(f"Removed {self.record_type.__name__} {record_id} from '{self.key}'")
        return removed

    def list(self) -> list[R]:
        """Records in stored order (newest first)."""
        return list(self._records)

    def get(self, record_id: int) -> R | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def to_csv(self) -> str:
        return to_csv(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self.list())

    def __repr__(self) -> str:
        return f"RecordStore({self.record_type.__name__}, key='{self.key}', records={len(self._records)})"

    # -- internal helpers ----------------------------------------------------

    def _read_unlocked(self) -> list[R]:
        name = self.record_type.__name__
        try:
            raw = self.provider.get(self.key)
        except StorageError as e:
            logger.error(f"Cannot read '{self.key}', starting with an empty {name} collection: {e}")
            return []
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            logger.warning(f"Corrupted JSON under '{self.key}', resetting {name} collection: {e}")
            return []
        if not isinstance(data, list):
            logger.warning(f"Expected a JSON array under '{self.key}', got {type(data).__name__}; resetting")
            return []

        records: list[R] = []
        seen: set[int] = set()
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                logger.warning(f"Entry {index} under '{self.key}' is not an object; resetting {name} collection")
                return []
            try:
                record = self.record_type(**entry)
            except (TypeError, ValueError) as e:
                logger.warning(f"Entry {index} under '{self.key}' is not a valid {name}: {e}; resetting")
                return []
            if record.id in seen:
                logger.warning(f"Duplicate id {record.id} under '{self.key}'; resetting {name} collection")
                return []
            seen.add(record.id)
            records.append(record)
        return records

    def _refresh_unlocked(self) -> None:
        """Pick up writes made through other stores sharing this provider and key."""
        self._records = self._read_unlocked()
        for record in self._records:
            self._ids.observe(record.id)

    def _write_unlocked(self, records: list[R]) -> None:
        payload = json.dumps([dataclasses.asdict(r) for r in records], ensure_ascii=False)
        self.provider.set(self.key, payload)

    @contextmanager
    def _lock(self):
        """Serialize mutations per (provider, key) across store instances."""
        with self._LOCKS_GUARD:
            provider_locks = self._KEY_LOCKS.setdefault(self.provider, {})
            lock = provider_locks.get(self.key)
            if lock is None:
                lock = threading.RLock()
                provider_locks[self.key] = lock
        with lock:
            yield
