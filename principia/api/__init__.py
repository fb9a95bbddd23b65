"""HTTP API."""

from .app import AnalyzeRequest, ApiResponse, create_app

__all__ = ["AnalyzeRequest", "ApiResponse", "create_app"]
