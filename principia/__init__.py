"""
Principia - recursive extraction of engineering principles
==========================================================

Seed a term, and the engine fetches its encyclopedic page, pulls out
engineering principles (regex classification plus knowledge-driven
decomposition), then recurses into related concepts up to a depth bound.

## Quick Start

```python
from principia import RecursiveAnalysisEngine, WikipediaClient

async with WikipediaClient() as wiki:
    async with RecursiveAnalysisEngine(wiki) as engine:
        result = await engine.analyze("bridge", max_depth=2, max_results=5)
        print(result.total_principles)
```
"""

from principia.cache import ResultCache
from principia.classifier import PatternClassifier
from principia.config import PrincipiaConfig, load_config
from principia.engine import RecursiveAnalysisEngine
from principia.errors import (
    AnalysisFailedError,
    ConfigError,
    ContentProviderError,
    PatternCompilationError,
    PrincipiaError,
)
from principia.knowledge import ConceptDecomposer, ConceptKnowledgeBase
from principia.providers import StaticContentProvider, WikipediaClient
from principia.types import (
    AnalysisNode,
    AnalysisResult,
    ConceptDecomposition,
    Principle,
    PrincipleCategory,
    SourcePage,
)

__version__ = "0.1.0"

__all__ = [
    "RecursiveAnalysisEngine",
    "PatternClassifier",
    "ConceptDecomposer",
    "ConceptKnowledgeBase",
    "ResultCache",
    "WikipediaClient",
    "StaticContentProvider",
    "PrincipiaConfig",
    "load_config",
    "AnalysisNode",
    "AnalysisResult",
    "ConceptDecomposition",
    "Principle",
    "PrincipleCategory",
    "SourcePage",
    "PrincipiaError",
    "ContentProviderError",
    "AnalysisFailedError",
    "PatternCompilationError",
    "ConfigError",
]
