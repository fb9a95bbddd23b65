"""Regex compilation helpers shared by the classifier and decomposer."""

from __future__ import annotations

import re

from .errors import PatternCompilationError


def compile_pattern(pattern: str, flags: int = re.IGNORECASE) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternCompilationError(pattern, e) from e


def compile_patterns(patterns: list[str], flags: int = re.IGNORECASE) -> list[re.Pattern[str]]:
    return [compile_pattern(p, flags) for p in patterns]


def count_matches(patterns: list[re.Pattern[str]], text: str) -> int:
    return sum(1 for p in patterns for _ in p.finditer(text))
