"""ResultCache — pages, principle sets and analysis subtrees.

Three independent TTL stores share one capacity bound. A background task
sweeps expired entries on a fixed interval so memory stays bounded even when
reads are rare. All mutation happens on the event loop thread; each store
operation runs without awaiting, so no lock is needed.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import time
from dataclasses import dataclass
from typing import Any

from ..config import CacheConfig
from ..types import AnalysisNode, Principle, SourcePage
from .store import Clock, TTLStore

logger = logging.getLogger(__name__)

# rough per-entry footprints used for the memory estimate
PAGE_BYTES = 1024
PRINCIPLE_SET_BYTES = 512
SUBTREE_BYTES = 2048


@dataclass
class CacheStats:
    pages_count: int
    principles_count: int
    subtrees_count: int
    estimated_memory_bytes: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "wikipedia_pages_count": self.pages_count,
            "principles_count": self.principles_count,
            "analysis_nodes_count": self.subtrees_count,
            "total_memory_usage": self.estimated_memory_bytes,
        }


class ResultCache:
    def __init__(self, config: CacheConfig | None = None, clock: Clock = time.monotonic) -> None:
        self.config = config or CacheConfig()
        c = self.config
        self.pages: TTLStore[SourcePage] = TTLStore("pages", c.page_ttl_seconds, c.max_entries, clock)
        self.principles: TTLStore[list[Principle]] = TTLStore(
            "principles", c.principle_ttl_seconds, c.max_entries, clock
        )
        self.subtrees: TTLStore[AnalysisNode] = TTLStore(
            "subtrees", c.subtree_ttl_seconds, c.max_entries, clock
        )
        self._sweeper: asyncio.Task | None = None

    @staticmethod
    def analysis_key(term: str, max_depth: int, max_results: int) -> str:
        return f"analysis:{term}:{max_depth}:{max_results}"

    # ---- pages ----

    def get_page(self, title: str) -> SourcePage | None:
        return self.pages.get(title)

    def put_page(self, title: str, page: SourcePage) -> None:
        self.pages.put(title, page)

    # ---- principle sets ----

    def get_principles(self, page_title: str) -> list[Principle] | None:
        return self.principles.get(page_title)

    def put_principles(self, page_title: str, principles: list[Principle]) -> None:
        self.principles.put(page_title, principles)

    # ---- analysis subtrees ----

    def get_subtree(self, key: str) -> AnalysisNode | None:
        return self.subtrees.get(key)

    def put_subtree(self, key: str, node: AnalysisNode) -> None:
        self.subtrees.put(key, node)

    # ---- management ----

    def cleanup_expired(self) -> int:
        return self.pages.sweep() + self.principles.sweep() + self.subtrees.sweep()

    def stats(self) -> CacheStats:
        pages, principles, subtrees = len(self.pages), len(self.principles), len(self.subtrees)
        return CacheStats(
            pages_count=pages,
            principles_count=principles,
            subtrees_count=subtrees,
            estimated_memory_bytes=pages * PAGE_BYTES
            + principles * PRINCIPLE_SET_BYTES
            + subtrees * SUBTREE_BYTES,
        )

    def clear(self) -> None:
        self.pages.clear()
        self.principles.clear()
        self.subtrees.clear()
        logger.info("cache cleared")

    # ---- background sweep ----

    @property
    def sweeping(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()

    def start(self) -> None:
        if self.sweeping:
            return
        self._sweeper = asyncio.get_running_loop().create_task(self._sweep_loop())

    async def stop(self) -> None:
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._sweeper
        self._sweeper = None

    async def _sweep_loop(self) -> None:
        interval = self.config.sweep_interval_seconds
        while True:
            await asyncio.sleep(interval)
            removed = self.cleanup_expired()
            stats = self.stats()
            logger.debug(
                "cache sweep removed %d: pages=%d principles=%d nodes=%d memory=%dKB",
                removed,
                stats.pages_count,
                stats.principles_count,
                stats.subtrees_count,
                stats.estimated_memory_bytes // 1024,
            )
