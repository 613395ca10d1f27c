from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, Optional, Tuple

LOGGER = logging.getLogger(__name__)

MonthKey = Tuple[int, int]              # (lunar year, signed month)
MonthEntry = Tuple[int, int, float]     # (day_count, index_in_year, first_jd)


class MonthCache:
    """
    Process-wide memo of lunar month construction.

    The lock only guards the dict; the kernel work happens outside it, so
    two threads missing the same key may both compute it. Both produce the
    same entry and the later insert wins.

    ``clear()`` starts a new generation. An entry whose computation began
    before the clear is returned to its caller but never stored, so a month
    built with a replaced kernel cannot outlive the switch.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[MonthKey, MonthEntry] = {}
        self._generation = 0

    def get(self, key: MonthKey) -> Optional[MonthEntry]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: MonthKey, entry: MonthEntry, generation: Optional[int] = None) -> bool:
        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._entries[key] = entry
            return True

    def get_or_compute(self, key: MonthKey, compute: Callable[[], MonthEntry]) -> MonthEntry:
        with self._lock:
            hit = self._entries.get(key)
            generation = self._generation
        if hit is not None:
            return hit
        LOGGER.debug("month cache miss %s", key)
        entry = compute()
        if not self.put(key, entry, generation):
            LOGGER.debug("month %s computed across a clear, not stored", key)
        return entry

    def clear(self) -> None:
        with self._lock:
            n = len(self._entries)
            self._entries.clear()
            self._generation += 1
        LOGGER.debug("month cache cleared (%d entries)", n)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


MONTH_CACHE = MonthCache()
