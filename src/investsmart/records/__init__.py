"""Persisted record collections (leads, holdings) with CSV export.

Provides the generic ``RecordStore`` over any injected ``KeyValueStore``,
the ``Lead`` and ``Holding`` record types, and ``to_csv``.
"""

from .export import to_csv
from .ids import MonotonicIdGenerator
from .models import Holding, Lead
from .store import RecordStore

__all__ = [
    "Holding",
    "Lead",
    "MonotonicIdGenerator",
    "RecordStore",
    "to_csv",
]
