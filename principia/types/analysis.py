"""Analysis tree types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .principle import Principle


@dataclass
class AnalysisNode:
    term: str
    principles: list[Principle] = field(default_factory=list)
    children: dict[str, AnalysisNode] = field(default_factory=dict)
    depth: int = 0
    elapsed_ms: int = 0

    @classmethod
    def leaf(cls, term: str, depth: int, elapsed_ms: int = 0) -> AnalysisNode:
        return cls(term=term, depth=depth, elapsed_ms=elapsed_ms)

    def count_principles(self) -> int:
        return len(self.principles) + sum(c.count_principles() for c in self.children.values())

    def deepest(self) -> int:
        return max([self.depth, *(c.deepest() for c in self.children.values())])

    def walk(self):
        """Yield every node, parent before children."""
        yield self
        for child in self.children.values():
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        return {
            "term": self.term,
            "principles": [p.to_dict() for p in self.principles],
            "children": {name: child.to_dict() for name, child in self.children.items()},
            "depth": self.depth,
            "processing_time_ms": self.elapsed_ms,
        }


@dataclass
class AnalysisResult:
    root_term: str
    tree: AnalysisNode
    total_elapsed_ms: int = 0
    total_principles: int = field(init=False)
    max_depth_reached: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_principles = self.tree.count_principles()
        self.max_depth_reached = self.tree.deepest()

    def to_dict(self) -> dict[str, Any]:
        return {
            "root_term": self.root_term,
            "tree": self.tree.to_dict(),
            "total_processing_time_ms": self.total_elapsed_ms,
            "total_principles": self.total_principles,
            "max_depth_reached": self.max_depth_reached,
        }


@dataclass
class Suggestion:
    term: str
    confidence: float
    category: str

    def to_dict(self) -> dict[str, Any]:
        return {"term": self.term, "confidence": round(self.confidence, 4), "category": self.category}
