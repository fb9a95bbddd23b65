"""TTLStore — a capacity-bounded, time-boxed key/value store.

Eviction under capacity pressure removes the entry with the oldest creation
time (FIFO by age, not LRU). Creation order is tracked in a heap with lazy
invalidation, so overwritten or deleted keys leave stale heap slots that are
skipped on pop and compacted when they pile up.
"""

from __future__ import annotations

import copy
import heapq
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Clock = Callable[[], float]


@dataclass
class CacheEntry(Generic[T]):
    value: T
    created_at: float
    access_count: int = 1

    def is_expired(self, ttl_seconds: float, now: float) -> bool:
        return now - self.created_at > ttl_seconds


class TTLStore(Generic[T]):
    def __init__(
        self,
        name: str,
        ttl_seconds: float,
        max_entries: int,
        clock: Clock = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be >= 1")
        self.name = name
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self._seqs: dict[str, int] = {}
        self._order: list[tuple[float, int, str]] = []
        self._next_seq = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def keys(self) -> list[str]:
        return list(self._entries)

    def entry(self, key: str) -> CacheEntry[T] | None:
        """Raw entry without touching access counts or expiry."""
        return self._entries.get(key)

    def get(self, key: str) -> T | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self.ttl_seconds, self._clock()):
            self._remove(key)
            logger.debug("%s cache: expired %r", self.name, key)
            return None
        entry.access_count += 1
        return copy.deepcopy(entry.value)

    def put(self, key: str, value: T) -> str | None:
        """Insert ``value``; returns the evicted key, if any."""
        evicted = None
        if key not in self._entries and len(self._entries) >= self.max_entries:
            evicted = self.evict_oldest()
        now = self._clock()
        seq = self._next_seq
        self._next_seq += 1
        self._entries[key] = CacheEntry(copy.deepcopy(value), now)
        self._seqs[key] = seq
        heapq.heappush(self._order, (now, seq, key))
        self._maybe_compact()
        return evicted

    def delete(self, key: str) -> bool:
        if key not in self._entries:
            return False
        self._remove(key)
        return True

    def evict_oldest(self) -> str | None:
        while self._order:
            _, seq, key = heapq.heappop(self._order)
            if self._seqs.get(key) == seq:
                self._remove(key)
                logger.debug("%s cache: evicted %r", self.name, key)
                return key
        return None

    def sweep(self) -> int:
        now = self._clock()
        expired = [k for k, e in self._entries.items() if e.is_expired(self.ttl_seconds, now)]
        for key in expired:
            self._remove(key)
        self._maybe_compact()
        return len(expired)

    def clear(self) -> None:
        self._entries.clear()
        self._seqs.clear()
        self._order.clear()

    def _remove(self, key: str) -> None:
        self._entries.pop(key, None)
        self._seqs.pop(key, None)

    def _maybe_compact(self) -> None:
        if len(self._order) > 2 * len(self._entries) + 16:
            self._order = [(e.created_at, self._seqs[k], k) for k, e in self._entries.items()]
            heapq.heapify(self._order)
