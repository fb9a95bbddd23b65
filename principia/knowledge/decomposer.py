"""ConceptDecomposer — concept → scored foundational components."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ..patterns import compile_pattern
from ..types import (
    Category,
    ComponentRelation,
    ConceptDecomposition,
    FoundationalComponent,
    Principle,
    PrincipleCategory,
    RelationKind,
)
from .base import ConceptKnowledgeBase

logger = logging.getLogger(__name__)

KNOWLEDGE_BASE_CONFIDENCE = 0.95
BASE_IMPORTANCE = 0.5
RELATION_BOOSTS = {
    RelationKind.REQUIRES: 0.3,
    RelationKind.CONTROLS: 0.25,
    RelationKind.PART_OF: 0.2,
}
OTHER_RELATION_BOOST = 0.1
CRITICAL_BOOST = 0.2
CRITICAL_COMPONENTS = frozenset({"motor", "battery", "controller", "processor", "engine", "frame"})
EXTRACTED_IMPORTANCE_FACTOR = 0.8

_DESCRIPTIONS = {
    PrincipleCategory.MECHANICAL: "{} is a mechanical component that provides movement, force transmission, or mechanical advantage",
    PrincipleCategory.ELECTRICAL: "{} is an electrical component that manages power, control signals, or energy conversion",
    PrincipleCategory.STRUCTURAL: "{} is a structural component that provides support, stability, or load distribution",
    PrincipleCategory.SYSTEM: "{} is a system component that provides control, coordination, or integration functionality",
    PrincipleCategory.THERMAL: "{} is a thermal component that manages heat transfer, temperature control, or thermal regulation",
    PrincipleCategory.MATERIAL: "{} is a material component that provides specific material properties or characteristics",
}
_DEFAULT_DESCRIPTION = "{} is an engineering component with specialized functionality"

_TITLES = {
    PrincipleCategory.MECHANICAL: "{} Mechanism",
    PrincipleCategory.ELECTRICAL: "{} Circuit Principle",
    PrincipleCategory.STRUCTURAL: "{} Structural Design",
    PrincipleCategory.SYSTEM: "{} System Integration",
    PrincipleCategory.THERMAL: "{} Thermal Management",
}
_DEFAULT_TITLE = "{} Engineering Principle"


@dataclass
class ComponentExtractor:
    name: str
    patterns: list[re.Pattern[str]]
    category: PrincipleCategory
    weight: float


@dataclass
class RelationshipPattern:
    pattern: re.Pattern[str]
    kind: RelationKind
    confidence: float
    # capture group holding the related component's name
    component_group: int = 2


def default_extractors() -> list[ComponentExtractor]:
    def build(name: str, patterns: list[str], category: PrincipleCategory, weight: float):
        return ComponentExtractor(name, [compile_pattern(p, 0) for p in patterns], category, weight)

    return [
        build(
            "mechanical_components",
            [
                r"\b(motor|engine|gear|bearing|shaft|piston|turbine|pump|compressor|fan|propeller)\b",
                r"\b(actuator|servo|stepper|valve|clutch|brake|transmission|coupling)\b",
            ],
            PrincipleCategory.MECHANICAL,
            0.8,
        ),
        build(
            "electrical_components",
            [
                r"\b(battery|capacitor|resistor|transistor|diode|circuit|sensor|microcontroller)\b",
                r"\b(power supply|transformer|inverter|converter|relay|switch|connector)\b",
            ],
            PrincipleCategory.ELECTRICAL,
            0.85,
        ),
        build(
            "structural_components",
            [
                r"\b(frame|chassis|beam|column|foundation|support|bracket|mount|housing)\b",
                r"\b(panel|plate|shell|casing|structure|framework|skeleton)\b",
            ],
            PrincipleCategory.STRUCTURAL,
            0.75,
        ),
        build(
            "control_components",
            [
                r"\b(controller|processor|computer|ecu|flight controller|autopilot)\b",
                r"\b(sensor|gyroscope|accelerometer|gps|imu|barometer|compass)\b",
            ],
            PrincipleCategory.SYSTEM,
            0.9,
        ),
        build(
            "thermal_components",
            [
                r"\b(radiator|heat sink|cooling fan|thermal pad|heat exchanger)\b",
                r"\b(insulation|thermal barrier|coolant|refrigeration)\b",
            ],
            PrincipleCategory.THERMAL,
            0.7,
        ),
    ]


def default_relationship_patterns() -> list[RelationshipPattern]:
    def build(pattern: str, kind: RelationKind, confidence: float, group: int = 2):
        return RelationshipPattern(compile_pattern(pattern, 0), kind, confidence, group)

    return [
        build(r"(\w+)\s+(?:is|are)\s+(?:part of|component of|element of)\s+(\w+)", RelationKind.PART_OF, 0.9, 1),
        build(r"(\w+)\s+(?:requires|needs|depends on)\s+(\w+)", RelationKind.REQUIRES, 0.85),
        build(r"(\w+)\s+(?:controls|manages|regulates)\s+(\w+)", RelationKind.CONTROLS, 0.8),
        build(r"(\w+)\s+(?:connects to|links to|attached to)\s+(\w+)", RelationKind.CONNECTS, 0.75),
        build(r"(\w+)\s+(?:supports|holds|carries)\s+(\w+)", RelationKind.SUPPORTS, 0.8),
        build(r"(\w+)\s+(?:converts|transforms|changes)\s+.*(?:into|to)\s+(\w+)", RelationKind.CONVERTS, 0.7),
    ]


def capitalize_words(text: str) -> str:
    return " ".join(w[:1].upper() + w[1:] for w in text.split())


def describe_component(name: str, category: Category) -> str:
    template = _DESCRIPTIONS.get(category, _DEFAULT_DESCRIPTION)
    return template.format(name)


def principle_title(name: str, category: Category) -> str:
    template = _TITLES.get(category, _DEFAULT_TITLE)
    return template.format(capitalize_words(name))


class ConceptDecomposer:
    """Breaks a concept into foundational components.

    Known concepts are read from the knowledge base; anything else is
    decomposed by running component and relationship patterns over the
    concept's source text.
    """

    def __init__(
        self,
        knowledge: ConceptKnowledgeBase | None = None,
        extractors: list[ComponentExtractor] | None = None,
        relationship_patterns: list[RelationshipPattern] | None = None,
        max_components: int = 10,
    ) -> None:
        self.knowledge = knowledge if knowledge is not None else ConceptKnowledgeBase.default()
        self.extractors = extractors if extractors is not None else default_extractors()
        self.relationship_patterns = (
            relationship_patterns if relationship_patterns is not None else default_relationship_patterns()
        )
        self.max_components = max_components

    def decompose(
        self, concept: str, max_depth: int = 2, source_text: str | None = None
    ) -> ConceptDecomposition:
        """Decompose ``concept``.

        ``max_depth`` counts levels below the concept: 1 yields components
        only, 2 or more also attaches each component's sub-component names.
        """
        normalized = self.knowledge.normalize(concept)
        components = self.from_knowledge_base(normalized, with_sub_components=max_depth > 1)
        if components is not None:
            return ConceptDecomposition(
                concept=concept,
                components=components,
                relationships=self.knowledge.relations_for(normalized),
                confidence=KNOWLEDGE_BASE_CONFIDENCE,
            )
        if not source_text:
            logger.debug("no knowledge or source text for %r", concept)
            return ConceptDecomposition(concept=concept)
        return self.from_text(concept, source_text)

    def from_knowledge_base(
        self, concept: str, with_sub_components: bool = True
    ) -> list[FoundationalComponent] | None:
        sub_concepts = self.knowledge.sub_concepts(concept)
        if sub_concepts is None:
            return None
        components = []
        for name in sub_concepts:
            category = self.knowledge.category_for(name)
            nested = self.knowledge.sub_concepts(name) if with_sub_components else None
            components.append(
                FoundationalComponent(
                    name=name,
                    category=category,
                    description=describe_component(name, category),
                    importance=self.component_importance(name, concept),
                    sub_component_names=nested or [],
                )
            )
        components.sort(key=lambda c: c.importance, reverse=True)
        return components

    def component_importance(self, component: str, parent: str) -> float:
        importance = BASE_IMPORTANCE
        for relation in self.knowledge.relations_for(parent):
            if relation.component_name == component:
                importance += RELATION_BOOSTS.get(relation.relation_kind, OTHER_RELATION_BOOST)
                importance += relation.confidence * 0.2
        if component in CRITICAL_COMPONENTS:
            importance += CRITICAL_BOOST
        return max(0.0, min(importance, 1.0))

    def from_text(self, concept: str, text: str) -> ConceptDecomposition:
        lowered = text.lower()
        components: list[FoundationalComponent] = []
        seen: set[str] = set()
        for extractor in self.extractors:
            for pattern in extractor.patterns:
                for m in pattern.finditer(lowered):
                    name = m.group(1)
                    if name in seen:
                        continue
                    seen.add(name)
                    components.append(
                        FoundationalComponent(
                            name=name,
                            category=extractor.category,
                            description=describe_component(name, extractor.category),
                            importance=extractor.weight * EXTRACTED_IMPORTANCE_FACTOR,
                        )
                    )

        relationships = []
        for rp in self.relationship_patterns:
            for m in rp.pattern.finditer(lowered):
                relationships.append(ComponentRelation(m.group(rp.component_group), rp.kind, rp.confidence))

        components.sort(key=lambda c: c.importance, reverse=True)
        components = components[: self.max_components]
        confidence = sum(c.importance for c in components) / len(components) if components else 0.0
        return ConceptDecomposition(
            concept=concept,
            components=components,
            relationships=relationships,
            confidence=confidence,
        )

    def decomposition_to_principles(
        self, decomposition: ConceptDecomposition, source_reference: str = ""
    ) -> list[Principle]:
        principles = [
            Principle(
                title=principle_title(c.name, c.category),
                description=c.description,
                category=c.category,
                confidence=c.importance,
                source_reference=source_reference,
                related_terms=frozenset(c.sub_component_names),
            )
            for c in decomposition.components
        ]
        principles.sort(key=lambda p: p.confidence, reverse=True)
        return principles

    def analyze_concept(
        self, concept: str, max_depth: int = 2, source_url: str | None = None
    ) -> list[Principle]:
        decomposition = self.decompose(concept, max_depth)
        reference = source_url or f"https://en.wikipedia.org/wiki/{concept}"
        principles = self.decomposition_to_principles(decomposition, reference)
        logger.info(
            "analyzed concept %r: %d components, confidence %.2f",
            concept,
            len(principles),
            decomposition.confidence,
        )
        return principles

    def concept_tree(self, concept: str, max_depth: int = 2) -> dict[str, dict]:
        """Nested sub-concept names, re-querying the knowledge base per level."""

        def expand(name: str, depth: int, path: frozenset[str]) -> dict[str, dict]:
            if depth >= max_depth:
                return {}
            subs = self.knowledge.sub_concepts(self.knowledge.normalize(name)) or []
            return {s: expand(s, depth + 1, path | {s}) for s in subs if s not in path}

        root = self.knowledge.normalize(concept)
        return expand(root, 0, frozenset({root}))
