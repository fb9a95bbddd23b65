"""Lexical and optional embedding similarity."""

from __future__ import annotations

from .types import EmbeddingProvider


def jaccard(a: str, b: str) -> float:
    words_a = set(a.split())
    words_b = set(b.split())
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def word_overlap(a: str, b: str) -> float:
    """Case-insensitive token Jaccard."""
    return jaccard(a.lower(), b.lower())


def shared_ratio(a: frozenset[str] | set[str], b: frozenset[str] | set[str]) -> float:
    """Shared terms over the smaller set; 0 when either side is empty."""
    if not a or not b:
        return 0.0
    return len(a & b) / min(len(a), len(b))


def cosine(a: list[float], b: list[float]) -> float:
    if len(a) != len(b):
        return 0.0
    dot = sum(x * y for x, y in zip(a, b, strict=False))
    na = sum(x * x for x in a) ** 0.5
    nb = sum(x * x for x in b) ** 0.5
    if na == 0.0 or nb == 0.0:
        return 0.0
    return float(dot / (na * nb))


class TextSimilarity:
    """Embedding cosine when both texts embed, word overlap otherwise."""

    def __init__(self, embedder: EmbeddingProvider | None = None) -> None:
        self._embedder = embedder

    @property
    def uses_embeddings(self) -> bool:
        return self._embedder is not None

    def score(self, a: str, b: str) -> float:
        if self._embedder is not None:
            ea = self._embedder.embed(a)
            eb = self._embedder.embed(b)
            if ea is not None and eb is not None:
                return cosine(ea, eb)
        return word_overlap(a, b)
