"""Concept decomposition types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .principle import Category, category_to_wire


class RelationKind(str, Enum):
    PART_OF = "PartOf"
    REQUIRES = "Requires"
    CONTROLS = "Controls"
    CONNECTS = "Connects"
    SUPPORTS = "Supports"
    CONVERTS = "Converts"


@dataclass(frozen=True)
class ComponentRelation:
    component_name: str
    relation_kind: RelationKind
    confidence: float = 0.5

    def to_dict(self) -> dict[str, Any]:
        return {
            "component": self.component_name,
            "relation_type": self.relation_kind.value,
            "confidence": self.confidence,
        }


@dataclass
class FoundationalComponent:
    name: str
    category: Category
    description: str
    importance: float
    sub_component_names: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "category": category_to_wire(self.category),
            "description": self.description,
            "importance": round(self.importance, 4),
            "sub_components": list(self.sub_component_names),
        }


@dataclass
class ConceptDecomposition:
    concept: str
    components: list[FoundationalComponent] = field(default_factory=list)
    relationships: list[ComponentRelation] = field(default_factory=list)
    confidence: float = 0.0

    def component(self, name: str) -> FoundationalComponent | None:
        for c in self.components:
            if c.name == name:
                return c
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "concept": self.concept,
            "components": [c.to_dict() for c in self.components],
            "relationships": [r.to_dict() for r in self.relationships],
            "confidence": round(self.confidence, 4),
        }
