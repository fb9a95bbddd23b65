"""
Pytest Configuration and Fixtures
"""

import pytest

from principia.errors import ContentProviderError
from principia.providers import StaticContentProvider
from principia.types import SourcePage

BRIDGE_TEXT = (
    "A bridge is a structure built to span physical obstacles. "
    "The Truss Bridge design follows the principle of triangulated load paths under tension and compression. "
    "Steel provides strength to resist tension and compression forces. "
    "See also (suspension bridge)."
)

# Alpha -> Beta, Gamma; Beta -> Alpha, Gamma; Gamma -> Alpha, Beta
CYCLE_PAGES = {
    "Alpha": "Alpha links to Beta and Gamma.",
    "Beta": "Beta relates to Alpha and Gamma.",
    "Gamma": "Gamma returns to Alpha and Beta.",
}


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FailingProvider:
    """Raises ContentProviderError for selected titles (or all of them)."""

    def __init__(self, pages: dict[str, str] | None = None, failing: set[str] | None = None):
        self.inner = StaticContentProvider(pages or {})
        self.failing = failing
        self.attempts: dict[str, int] = {}

    def _fails(self, title: str) -> bool:
        return self.failing is None or title in self.failing

    async def search_titles(self, query: str, limit: int = 10) -> list[str]:
        if self.failing is None:
            raise ContentProviderError("failing", "search unavailable")
        return await self.inner.search_titles(query, limit)

    async def fetch_page(self, title: str) -> SourcePage | None:
        self.attempts[title] = self.attempts.get(title, 0) + 1
        if self._fails(title):
            raise ContentProviderError("failing", f"cannot fetch {title}", status_code=503)
        return await self.inner.fetch_page(title)


@pytest.fixture
def clock() -> FakeClock:
    """Fake monotonic clock starting at t=1000."""
    return FakeClock()


@pytest.fixture
def bridge_provider() -> StaticContentProvider:
    """Static provider holding a single bridge page."""
    return StaticContentProvider({"bridge": BRIDGE_TEXT})


@pytest.fixture
def cycle_provider() -> StaticContentProvider:
    """Static provider whose three pages all reference each other."""
    return StaticContentProvider(CYCLE_PAGES)
