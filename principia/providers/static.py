"""In-memory content provider for tests and offline runs."""

from __future__ import annotations

from ..types import SourcePage


class StaticContentProvider:
    def __init__(self, pages: dict[str, str] | None = None, url_prefix: str = "static://"):
        self.url_prefix = url_prefix
        self.pages: dict[str, SourcePage] = {}
        self.fetch_counts: dict[str, int] = {}
        for title, text in (pages or {}).items():
            self.add_page(title, text)

    def add_page(self, title: str, text: str) -> SourcePage:
        page = SourcePage(title=title, text=text, url=f"{self.url_prefix}{title}", page_id=len(self.pages) + 1)
        self.pages[title] = page
        return page

    async def search_titles(self, query: str, limit: int = 10) -> list[str]:
        q = query.lower()
        return [t for t in self.pages if q in t.lower()][:limit]

    async def fetch_page(self, title: str) -> SourcePage | None:
        self.fetch_counts[title] = self.fetch_counts.get(title, 0) + 1
        return self.pages.get(title)
