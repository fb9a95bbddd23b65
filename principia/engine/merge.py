"""Merging decomposer and classifier principles."""

from __future__ import annotations

from ..similarity import TextSimilarity, shared_ratio, word_overlap
from ..types import Principle

TITLE_THRESHOLD = 0.7
DESCRIPTION_THRESHOLD = 0.6
RELATED_TERMS_THRESHOLD = 0.5


def is_duplicate(a: Principle, b: Principle, similarity: TextSimilarity | None = None) -> bool:
    description_score = (similarity or TextSimilarity()).score(a.description, b.description)
    return (
        word_overlap(a.title, b.title) > TITLE_THRESHOLD
        or description_score > DESCRIPTION_THRESHOLD
        or shared_ratio(a.related_terms, b.related_terms) > RELATED_TERMS_THRESHOLD
    )


def merge_principles(
    primary: list[Principle],
    secondary: list[Principle],
    limit: int = 8,
    similarity: TextSimilarity | None = None,
) -> list[Principle]:
    """``primary`` wins; ``secondary`` entries are appended unless duplicated."""
    similarity = similarity or TextSimilarity()
    merged = list(primary)
    for candidate in secondary:
        if not any(is_duplicate(candidate, kept, similarity) for kept in merged):
            merged.append(candidate)
    merged.sort(key=lambda p: p.confidence, reverse=True)
    return merged[:limit]
