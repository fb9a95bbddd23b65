"""Knowledge — concept graph and hierarchical decomposition."""

from .base import ConceptKnowledgeBase
from .decomposer import (
    CRITICAL_COMPONENTS,
    ComponentExtractor,
    ConceptDecomposer,
    RelationshipPattern,
    default_extractors,
    default_relationship_patterns,
)

__all__ = [
    "ConceptKnowledgeBase",
    "ConceptDecomposer",
    "ComponentExtractor",
    "RelationshipPattern",
    "CRITICAL_COMPONENTS",
    "default_extractors",
    "default_relationship_patterns",
]
