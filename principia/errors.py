"""Structured error hierarchy for principle analysis."""

from __future__ import annotations


class PrincipiaError(Exception):
    def __init__(self, code: str, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause

    @classmethod
    def wrap(cls, err: Exception) -> PrincipiaError:
        if isinstance(err, PrincipiaError):
            return err
        return PrincipiaError("UNKNOWN", str(err), err)


class ContentProviderError(PrincipiaError):
    def __init__(
        self,
        provider: str,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__("CONTENT_PROVIDER_ERROR", message, cause)
        self.provider = provider
        self.status_code = status_code


class AnalysisFailedError(PrincipiaError):
    def __init__(self, term: str, cause: Exception | None = None) -> None:
        detail = f": {cause}" if cause else ""
        super().__init__("ANALYSIS_FAILED", f'Analysis of "{term}" failed{detail}', cause)
        self.term = term


class PatternCompilationError(PrincipiaError):
    def __init__(self, pattern: str, cause: Exception | None = None) -> None:
        super().__init__("PATTERN_COMPILATION", f"Invalid pattern {pattern!r}: {cause}", cause)
        self.pattern = pattern


class ConfigError(PrincipiaError):
    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__("CONFIG_ERROR", message, cause)
