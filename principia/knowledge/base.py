"""ConceptKnowledgeBase — static concept graph with runtime extension."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field

from ..types import ComponentRelation, PrincipleCategory
from . import defaults

logger = logging.getLogger(__name__)


@dataclass
class ConceptKnowledgeBase:
    """Concept → sub-concept lists, typed relations, category hints and synonyms.

    Keys are lower-case canonical concept names. ``synonyms`` maps a
    canonical key to its alternative spellings.
    """

    hierarchies: dict[str, list[str]] = field(default_factory=dict)
    relationships: dict[str, list[ComponentRelation]] = field(default_factory=dict)
    categories: dict[str, PrincipleCategory] = field(default_factory=dict)
    synonyms: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def default(cls) -> ConceptKnowledgeBase:
        return cls(
            hierarchies=copy.deepcopy(defaults.HIERARCHIES),
            relationships=copy.deepcopy(defaults.RELATIONSHIPS),
            categories=dict(defaults.CATEGORIES),
            synonyms=copy.deepcopy(defaults.SYNONYMS),
        )

    def __contains__(self, concept: str) -> bool:
        return self.normalize(concept) in self.hierarchies

    def lookup_synonym(self, term: str) -> str | None:
        """Canonical key for ``term`` if it is a known synonym or canonical name."""
        key = term.strip().lower()
        for canonical, alternatives in self.synonyms.items():
            if key == canonical or key in alternatives:
                return canonical
        return None

    def normalize(self, concept: str) -> str:
        key = concept.strip().lower()
        # a concept with its own hierarchy is never rewritten to a synonym
        if key in self.hierarchies:
            return key
        return self.lookup_synonym(key) or key

    def sub_concepts(self, concept: str) -> list[str] | None:
        subs = self.hierarchies.get(concept)
        return list(subs) if subs is not None else None

    def relations_for(self, concept: str) -> list[ComponentRelation]:
        return list(self.relationships.get(concept, []))

    def category_for(
        self, component: str, default: PrincipleCategory = PrincipleCategory.SYSTEM
    ) -> PrincipleCategory:
        return self.categories.get(component, default)

    def add_concept(
        self,
        concept: str,
        components: list[str],
        relationships: list[ComponentRelation] | None = None,
        category: PrincipleCategory | None = None,
        synonyms: list[str] | None = None,
    ) -> None:
        key = concept.strip().lower()
        self.hierarchies[key] = list(components)
        self.relationships[key] = list(relationships or [])
        if category is not None:
            self.categories[key] = category
        if synonyms:
            self.synonyms[key] = [s.lower() for s in synonyms]
        logger.info("added knowledge for concept %r (%d components)", key, len(components))
