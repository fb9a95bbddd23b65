"""Principia type definitions — re-exported from sub-modules."""

from .principle import (
    GENERAL, Category, OtherCategory, Principle, PrincipleCategory,
    category_from_wire, category_name, category_to_wire, new_principle_id,
)
from .analysis import AnalysisNode, AnalysisResult, Suggestion
from .decomposition import ComponentRelation, ConceptDecomposition, FoundationalComponent, RelationKind
from .content import ContentProvider, EmbeddingProvider, SourcePage

__all__ = [
    "GENERAL", "Category", "OtherCategory", "Principle", "PrincipleCategory",
    "category_from_wire", "category_name", "category_to_wire", "new_principle_id",
    "AnalysisNode", "AnalysisResult", "Suggestion",
    "ComponentRelation", "ConceptDecomposition", "FoundationalComponent", "RelationKind",
    "ContentProvider", "EmbeddingProvider", "SourcePage",
]
