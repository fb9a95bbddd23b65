"""
Wikipedia content provider

Talks to the MediaWiki action API over aiohttp. Transport errors, non-200
responses and malformed payloads surface as ContentProviderError; a page the
API reports as missing, or one without an extract, is returned as None.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from ..config import ProviderConfig
from ..errors import ContentProviderError
from ..types import SourcePage

PROVIDER_NAME = "wikipedia"
# namespaces that never name an article
EXCLUDED_LINK_PREFIXES = ("Category:", "File:")


class WikipediaClient:
    """Async MediaWiki client.

    Use as an async context manager, or call ``close()`` when done::

        async with WikipediaClient() as wiki:
            page = await wiki.fetch_page("Steel")
    """

    def __init__(self, config: ProviderConfig | None = None,
                 session: aiohttp.ClientSession | None = None):
        self.config = config or ProviderConfig()
        self.session = session
        self._owns_session = session is None
        self.logger = logging.getLogger(f"{__name__}.WikipediaClient")

    async def __aenter__(self) -> WikipediaClient:
        await self._ensure_session()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
            self.session = aiohttp.ClientSession(
                timeout=timeout, headers={"User-Agent": self.config.user_agent}
            )
            self._owns_session = True
        return self.session

    async def close(self) -> None:
        if self.session is not None and self._owns_session and not self.session.closed:
            await self.session.close()
        self.session = None

    def page_url(self, title: str) -> str:
        return f"{self.config.page_url}{quote(title.replace(' ', '_'))}"

    async def _get(self, params: dict[str, str]) -> Any:
        session = await self._ensure_session()
        query = {"format": "json", **params}
        self.logger.debug("GET %s %s", self.config.api_url, query.get("action"))
        try:
            async with session.get(self.config.api_url, params=query) as response:
                if response.status != 200:
                    raise ContentProviderError(
                        PROVIDER_NAME,
                        f"API request failed with status {response.status}",
                        status_code=response.status,
                    )
                return await response.json(content_type=None)
        except ContentProviderError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise ContentProviderError(PROVIDER_NAME, f"API request failed: {e}", cause=e) from e

    async def search_titles(self, query: str, limit: int = 10) -> list[str]:
        data = await self._get({"action": "opensearch", "search": query, "limit": str(limit)})
        if not isinstance(data, list) or len(data) < 2 or not isinstance(data[1], list):
            raise ContentProviderError(PROVIDER_NAME, "Malformed opensearch response")
        return [str(title) for title in data[1]]

    @staticmethod
    def _pages(data: Any) -> list[dict[str, Any]]:
        try:
            pages = data["query"]["pages"]
        except (KeyError, TypeError) as e:
            raise ContentProviderError(PROVIDER_NAME, "Malformed query response", cause=e) from e
        return list(pages.values()) if isinstance(pages, dict) else list(pages)

    def _to_page(self, raw: dict[str, Any]) -> SourcePage | None:
        extract = raw.get("extract")
        if "missing" in raw or "invalid" in raw or not extract:
            return None
        title = raw.get("title", "")
        return SourcePage(
            title=title,
            text=extract,
            url=self.page_url(title),
            page_id=int(raw.get("pageid", 0)),
        )

    async def _extracts(self, titles: str) -> list[dict[str, Any]]:
        data = await self._get({
            "action": "query",
            "titles": titles,
            "prop": "extracts",
            "exintro": "",
            "explaintext": "",
            "exsectionformat": "plain",
        })
        return self._pages(data)

    async def fetch_page(self, title: str) -> SourcePage | None:
        for raw in await self._extracts(title):
            page = self._to_page(raw)
            if page is not None:
                return page
        self.logger.info("page not found: %s", title)
        return None

    async def fetch_many(self, titles: list[str]) -> list[SourcePage]:
        """Fetch several pages in one request; missing pages are omitted."""
        if not titles:
            return []
        pages = []
        for raw in await self._extracts("|".join(titles)):
            page = self._to_page(raw)
            if page is not None:
                pages.append(page)
        return pages

    async def fetch_links(self, title: str, limit: int = 50) -> list[str]:
        data = await self._get({
            "action": "query",
            "titles": title,
            "prop": "links",
            "pllimit": str(limit),
        })
        links = []
        for raw in self._pages(data):
            for link in raw.get("links", []):
                name = link.get("title", "")
                if name and not name.startswith(EXCLUDED_LINK_PREFIXES):
                    links.append(name)
        return links
