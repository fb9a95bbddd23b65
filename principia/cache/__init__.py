"""Cache — time-boxed, capacity-bounded memoization."""

from .result_cache import CacheStats, ResultCache
from .store import CacheEntry, TTLStore

__all__ = ["CacheEntry", "TTLStore", "CacheStats", "ResultCache"]
