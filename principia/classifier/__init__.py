"""Classifier — pattern-based principle extraction."""

from .classifier import PatternClassifier
from .patterns import CATEGORY_PATTERNS, PRINCIPLE_INDICATORS, RELATION_INDICATORS, STOP_WORDS

__all__ = [
    "PatternClassifier",
    "CATEGORY_PATTERNS",
    "PRINCIPLE_INDICATORS",
    "RELATION_INDICATORS",
    "STOP_WORDS",
]
