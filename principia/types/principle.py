"""Principle and category types."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Union


class PrincipleCategory(str, Enum):
    STRUCTURAL = "Structural"
    MECHANICAL = "Mechanical"
    ELECTRICAL = "Electrical"
    THERMAL = "Thermal"
    CHEMICAL = "Chemical"
    MATERIAL = "Material"
    SYSTEM = "System"
    PROCESS = "Process"
    DESIGN = "Design"


@dataclass(frozen=True)
class OtherCategory:
    """Open category for text that matched none of the engineering groups."""

    label: str = "General"


Category = Union[PrincipleCategory, OtherCategory]

GENERAL = OtherCategory("General")


def category_name(category: Category) -> str:
    if isinstance(category, OtherCategory):
        return category.label
    return category.value


def category_to_wire(category: Category) -> str | dict[str, str]:
    # Other is tagged: {"Other": label}
    if isinstance(category, OtherCategory):
        return {"Other": category.label}
    return category.value


def category_from_wire(raw: Any) -> Category:
    if isinstance(raw, dict) and "Other" in raw:
        return OtherCategory(str(raw["Other"]))
    if isinstance(raw, PrincipleCategory):
        return raw
    try:
        return PrincipleCategory(raw)
    except ValueError:
        return OtherCategory(str(raw))


def new_principle_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Principle:
    title: str
    description: str
    category: Category
    confidence: float
    source_reference: str = ""
    related_terms: frozenset[str] = field(default_factory=frozenset)
    id: str = field(default_factory=new_principle_id)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence out of range: {self.confidence}")
        if not isinstance(self.related_terms, frozenset):
            object.__setattr__(self, "related_terms", frozenset(self.related_terms))

    def replaced(self, **changes: Any) -> Principle:
        """Full replacement; the copy gets a fresh id."""
        changes.setdefault("id", new_principle_id())
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": category_to_wire(self.category),
            "confidence": round(self.confidence, 4),
            "source_url": self.source_reference,
            "related_terms": sorted(self.related_terms),
        }
