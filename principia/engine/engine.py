"""
RecursiveAnalysisEngine — fetch → classify/decompose → merge → recurse.

Each request expands depth-first from the seed term. A single path-visited
set is threaded through the recursion: a term is added before its children
are expanded and removed once they are done (also on error), so a concept
never repeats along one root-to-leaf path while disjoint branches may still
expand it independently.
"""

from __future__ import annotations

import time

from ..cache import CacheStats, ResultCache
from ..classifier import PatternClassifier
from ..config import EngineConfig
from ..errors import AnalysisFailedError, PrincipiaError
from ..infra.logging import get_logger
from ..knowledge import ConceptDecomposer
from ..similarity import TextSimilarity
from ..types import (
    AnalysisNode,
    AnalysisResult,
    ConceptDecomposition,
    ContentProvider,
    Principle,
    SourcePage,
    Suggestion,
)
from .merge import merge_principles

logger = get_logger(__name__)

ENGINEERING_KEYWORDS = (
    "engine", "motor", "system", "design", "structure", "material", "process",
    "machine", "device", "technology", "mechanism", "circuit", "bridge", "building",
    "manufacturing", "engineering", "mechanical", "electrical", "chemical", "civil",
)

_TITLE_CATEGORIES = (
    (("bridge", "building", "structure"), "Structural"),
    (("engine", "motor", "gear"), "Mechanical"),
    (("circuit", "electronic", "electrical"), "Electrical"),
    (("material", "steel", "composite"), "Material"),
    (("process", "manufacturing"), "Process"),
)


def engineering_relevance(title: str) -> float:
    lowered = title.lower()
    score = 0.2 * sum(1 for k in ENGINEERING_KEYWORDS if k in lowered)
    if len(title) > 10:
        score += 0.1
    return min(score, 1.0)


def infer_category(title: str) -> str:
    lowered = title.lower()
    for keywords, category in _TITLE_CATEGORIES:
        if any(k in lowered for k in keywords):
            return category
    return "General"


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class RecursiveAnalysisEngine:
    def __init__(
        self,
        provider: ContentProvider,
        cache: ResultCache | None = None,
        classifier: PatternClassifier | None = None,
        decomposer: ConceptDecomposer | None = None,
        config: EngineConfig | None = None,
        similarity: TextSimilarity | None = None,
    ) -> None:
        self.provider = provider
        self.cache = cache if cache is not None else ResultCache()
        self.classifier = classifier or PatternClassifier()
        self.decomposer = decomposer or ConceptDecomposer()
        self.config = config or EngineConfig()
        self.similarity = similarity or TextSimilarity()

    async def __aenter__(self) -> RecursiveAnalysisEngine:
        self.start()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.stop()

    def start(self) -> None:
        self.cache.start()

    async def stop(self) -> None:
        await self.cache.stop()

    # ---- analysis ----

    async def analyze(
        self, term: str, max_depth: int | None = None, max_results: int | None = None
    ) -> AnalysisResult:
        """Build the principle tree for ``term``.

        Raises:
            ValueError: negative bounds.
            AnalysisFailedError: the root term could not be fetched.
        """
        max_depth = self.config.default_max_depth if max_depth is None else max_depth
        max_results = self.config.default_max_results if max_results is None else max_results
        if max_depth < 0 or max_results < 0:
            raise ValueError("max_depth and max_results must be >= 0")

        started = time.perf_counter()
        log = logger.bind(term=term, max_depth=max_depth, max_results=max_results)
        key = ResultCache.analysis_key(term, max_depth, max_results)

        cached = self.cache.get_subtree(key)
        if cached is not None:
            log.info("analysis_cache_hit")
            return AnalysisResult(root_term=term, tree=cached, total_elapsed_ms=_elapsed_ms(started))

        log.info("analysis_started")
        visited: set[str] = set()
        try:
            root = await self._expand(term, 0, max_depth, max_results, visited)
        except Exception as e:
            log.error("analysis_failed", error=str(e))
            raise AnalysisFailedError(term, e) from e

        self.cache.put_subtree(key, root)
        result = AnalysisResult(root_term=term, tree=root, total_elapsed_ms=_elapsed_ms(started))
        log.info(
            "analysis_completed",
            total_principles=result.total_principles,
            max_depth_reached=result.max_depth_reached,
            elapsed_ms=result.total_elapsed_ms,
        )
        return result

    async def _expand(
        self, term: str, depth: int, max_depth: int, max_results: int, visited: set[str]
    ) -> AnalysisNode:
        started = time.perf_counter()
        if term in visited or depth >= max_depth:
            return AnalysisNode.leaf(term, depth, _elapsed_ms(started))

        visited.add(term)
        try:
            logger.debug("expanding", term=term, depth=depth)
            page = await self.get_page(term)
            if page is None or not page.text.strip():
                logger.warning("page_missing", term=term)
                return AnalysisNode.leaf(term, depth, _elapsed_ms(started))

            principles = self.principles_for(page)
            concepts = (
                self.classifier.extract_related_concepts(page.text)[:max_results]
                if depth < max_depth
                else []
            )

            children: dict[str, AnalysisNode] = {}
            for concept in concepts:
                if concept in visited or concept == term:
                    continue
                try:
                    children[concept] = await self._expand(
                        concept, depth + 1, max_depth, max_results, visited
                    )
                except Exception as e:
                    logger.warning("related_concept_failed", concept=concept, parent=term, error=str(e))

            return AnalysisNode(
                term=term,
                principles=principles,
                children=children,
                depth=depth,
                elapsed_ms=_elapsed_ms(started),
            )
        finally:
            visited.discard(term)

    async def get_page(self, term: str) -> SourcePage | None:
        page = self.cache.get_page(term)
        if page is not None:
            return page
        page = await self.provider.fetch_page(term)
        if page is not None:
            self.cache.put_page(term, page)
        return page

    def principles_for(self, page: SourcePage) -> list[Principle]:
        cached = self.cache.get_principles(page.title)
        if cached is not None:
            return cached
        decomposition = self.decomposer.decompose(
            page.title, self.config.decomposition_depth, source_text=page.text
        )
        derived = self.decomposer.decomposition_to_principles(decomposition, page.url)
        classified = self.classifier.classify(page.text, page.url)
        merged = merge_principles(
            derived, classified, self.config.merged_principle_limit, self.similarity
        )
        self.cache.put_principles(page.title, merged)
        return merged

    async def batch_analyze(self, terms: list[str], max_depth: int | None = None) -> list[AnalysisResult]:
        results = []
        for term in terms:
            try:
                results.append(await self.analyze(term, max_depth, self.config.batch_max_results))
            except PrincipiaError as e:
                logger.error("batch_analysis_failed", term=term, error=str(e))
        return results

    async def warm_up(self, terms: list[str] | None = None) -> int:
        """Prefetch pages into the cache; returns how many were cached."""
        terms = self.config.warm_up_terms if terms is None else terms
        logger.info("cache_warm_up", terms=len(terms))
        cached = 0
        for term in terms:
            try:
                if await self.get_page(term) is not None:
                    cached += 1
            except Exception as e:
                logger.warning("warm_up_failed", term=term, error=str(e))
        return cached

    # ---- suggestions & decomposition ----

    async def suggest(self, query: str, limit: int = 8) -> list[Suggestion]:
        titles = await self.provider.search_titles(query, limit)
        suggestions = [
            Suggestion(term=t, confidence=engineering_relevance(t), category=infer_category(t))
            for t in titles
        ]
        suggestions.sort(key=lambda s: s.confidence, reverse=True)
        return suggestions[:limit]

    def decompose_concept(self, concept: str, max_depth: int = 2) -> ConceptDecomposition:
        return self.decomposer.decompose(concept, max_depth)

    def analyze_concept(
        self, concept: str, max_depth: int = 2, source_url: str | None = None
    ) -> list[Principle]:
        return self.decomposer.analyze_concept(concept, max_depth, source_url)

    # ---- cache ----

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()
