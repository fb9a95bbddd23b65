"""Engine — recursive principle-tree analysis."""

from .engine import RecursiveAnalysisEngine, engineering_relevance, infer_category
from .merge import is_duplicate, merge_principles

__all__ = [
    "RecursiveAnalysisEngine",
    "engineering_relevance",
    "infer_category",
    "is_duplicate",
    "merge_principles",
]
