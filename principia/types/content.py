"""Content-provider boundary types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class SourcePage:
    title: str
    text: str
    url: str = ""
    page_id: int = 0


@runtime_checkable
class ContentProvider(Protocol):
    """Fetches encyclopedic pages. ``fetch_page`` returns None for a missing page."""

    async def search_titles(self, query: str, limit: int) -> list[str]: ...
    async def fetch_page(self, title: str) -> SourcePage | None: ...


@runtime_checkable
class EmbeddingProvider(Protocol):
    def embed(self, text: str) -> list[float] | None: ...
