"""PatternClassifier — sentence-level principle extraction and category scoring."""

from __future__ import annotations

import logging

from ..patterns import compile_pattern, compile_patterns, count_matches
from ..similarity import jaccard
from ..types import GENERAL, Category, OtherCategory, Principle, PrincipleCategory
from .patterns import (
    CAPITALIZED_PHRASE,
    CATEGORY_PATTERNS,
    MATH_NOTATION,
    PARENTHETICAL,
    PRINCIPLE_INDICATORS,
    RELATION_INDICATORS,
    TECHNICAL_TERM,
    is_stop_word,
)

logger = logging.getLogger(__name__)

SENTENCE_DELIMITER = ". "
TITLE_WORDS = 8
RELATED_TERM_LIMIT = 5
RELATED_CONCEPT_LIMIT = 15
FOLLOWING_WINDOW_CHARS = 50
FOLLOWING_WINDOW_WORDS = 3


class PatternClassifier:
    """Scores free text against the nine category pattern groups.

    Each ``". "``-delimited unit that mentions a principle indicator becomes a
    candidate principle; the best-scoring category wins and candidates below
    ``min_confidence`` are dropped. Survivors are ranked by confidence and
    near-duplicate descriptions are removed.
    """

    def __init__(
        self,
        max_principles: int = 10,
        min_confidence: float = 0.3,
        duplicate_threshold: float = 0.8,
        category_patterns: dict[PrincipleCategory, list[str]] | None = None,
        indicator_patterns: list[str] | None = None,
        relation_patterns: list[str] | None = None,
    ) -> None:
        self.max_principles = max_principles
        self.min_confidence = min_confidence
        self.duplicate_threshold = duplicate_threshold
        groups = category_patterns or CATEGORY_PATTERNS
        # enumeration order is the scan order for tie-breaks
        self._categories = [(cat, compile_patterns(groups.get(cat, []))) for cat in PrincipleCategory]
        self._category_lookup = dict(self._categories)
        self._indicators = compile_patterns(indicator_patterns or PRINCIPLE_INDICATORS)
        self._relations = compile_patterns(relation_patterns or RELATION_INDICATORS)
        self._math = compile_pattern(MATH_NOTATION, 0)
        self._technical = compile_pattern(TECHNICAL_TERM, 0)
        self._capitalized = compile_pattern(CAPITALIZED_PHRASE, 0)
        self._parenthetical = compile_pattern(PARENTHETICAL, 0)

    # ---- classification ----

    def classify(self, text: str, source_reference: str = "") -> list[Principle]:
        candidates = []
        for unit in self.split_units(text):
            principle = self.principle_from_unit(unit, source_reference)
            if principle is not None:
                candidates.append(principle)
        ranked = self.deduplicate(candidates)
        logger.debug("classified %d units into %d principles", len(candidates), len(ranked))
        return ranked

    @staticmethod
    def split_units(text: str) -> list[str]:
        return [u for u in text.split(SENTENCE_DELIMITER) if u.strip()]

    def principle_from_unit(self, unit: str, source_reference: str = "") -> Principle | None:
        if not any(p.search(unit) for p in self._indicators):
            return None
        category = self.categorize(unit)
        confidence = self.confidence(unit, category)
        if confidence < self.min_confidence:
            return None
        return Principle(
            title=self.title_for(unit),
            description=unit.strip(),
            category=category,
            confidence=confidence,
            source_reference=source_reference,
            related_terms=frozenset(self.extract_related_terms(unit)),
        )

    def category_scores(self, text: str) -> dict[PrincipleCategory, int]:
        scores = {}
        for category, patterns in self._categories:
            score = count_matches(patterns, text)
            if score > 0:
                scores[category] = score
        return scores

    def categorize(self, text: str) -> Category:
        best: Category = GENERAL
        best_score = 0
        for category, score in self.category_scores(text).items():
            # strict ">" keeps the first-scanned group on ties
            if score > best_score:
                best, best_score = category, score
        return best

    def confidence(self, text: str, category: Category) -> float:
        if isinstance(category, OtherCategory):
            return 0.3
        score = 0.2 * count_matches(self._indicators, text)
        score += 0.15 * count_matches(self._category_lookup[category], text)
        if 50 < len(text) < 300:
            score += 0.1
        if self._math.search(text):
            score += 0.2
        return max(0.0, min(score, 1.0))

    @staticmethod
    def title_for(text: str) -> str:
        title = " ".join(text.split()[:TITLE_WORDS])
        return title.rstrip(".,;:")

    # ---- related terms ----

    def extract_related_terms(self, text: str) -> list[str]:
        terms: dict[str, None] = {}
        for m in self._technical.finditer(text):
            term = m.group(0)
            if len(term) > 3 and not is_stop_word(term):
                terms[term] = None
        for pattern in self._relations:
            for m in pattern.finditer(text):
                window = text[m.end(): m.end() + FOLLOWING_WINDOW_CHARS]
                words = window.split()[:FOLLOWING_WINDOW_WORDS]
                if words:
                    term = " ".join(words)
                    if not is_stop_word(term):
                        terms[term] = None
        return list(terms)[:RELATED_TERM_LIMIT]

    def extract_related_concepts(self, text: str, limit: int = RELATED_CONCEPT_LIMIT) -> list[str]:
        """Concept names for recursion, in order of first appearance."""
        concepts: dict[str, None] = {}
        for m in self._capitalized.finditer(text):
            concept = m.group(0)
            if len(concept) > 3 and not is_stop_word(concept):
                concepts[concept] = None
        for m in self._parenthetical.finditer(text):
            inner = m.group(1)
            if 3 < len(inner) < 50:
                concepts[inner] = None
        return list(concepts)[:limit]

    # ---- ranking ----

    def deduplicate(self, principles: list[Principle]) -> list[Principle]:
        ordered = sorted(principles, key=lambda p: p.confidence, reverse=True)
        kept: list[Principle] = []
        for candidate in ordered:
            if all(
                jaccard(candidate.description, existing.description) <= self.duplicate_threshold
                for existing in kept
            ):
                kept.append(candidate)
        return kept[: self.max_principles]
