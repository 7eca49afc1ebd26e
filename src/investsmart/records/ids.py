"""Record id generation.

Ids are wall-clock milliseconds, bumped past the last id handed out so two
adds in the same millisecond (or after a clock step backwards) never
collide.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


class MonotonicIdGenerator:
    """Strictly increasing integer ids seeded from the clock."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    @property
    def last_id(self) -> int:
        return self._last

    def observe(self, record_id: int) -> None:
        """Never hand out ``record_id`` or anything below it again."""
        with self._lock:
            self._last = max(self._last, record_id)

    def next_id(self) -> int:
        with self._lock:
            candidate = int(self._clock() * 1000)
            self._last = max(candidate, self._last + 1)
            return self._last
