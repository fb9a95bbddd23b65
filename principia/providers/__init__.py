"""Content providers."""

from .static import StaticContentProvider
from .wikipedia import WikipediaClient

__all__ = ["StaticContentProvider", "WikipediaClient"]
