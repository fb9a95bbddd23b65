"""
Principia HTTP API
FastAPI app exposing analysis, suggestions, decomposition and cache control.
"""

from __future__ import annotations

import asyncio
import contextlib
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..cache import ResultCache
from ..config import PrincipiaConfig
from ..engine import RecursiveAnalysisEngine
from ..errors import AnalysisFailedError, ContentProviderError, PrincipiaError
from ..infra.logging import get_logger
from ..providers import WikipediaClient
from ..types import ContentProvider

logger = get_logger(__name__)

# ============================================================================
# API Models
# ============================================================================


class AnalyzeRequest(BaseModel):
    term: str = Field(..., min_length=1, description="Seed concept")
    max_depth: Optional[int] = Field(None, ge=0, description="Recursion depth")
    max_results: Optional[int] = Field(None, ge=0, description="Children per node")


class ApiResponse(BaseModel):
    success: bool
    data: Any = None
    error: Optional[str] = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def ok(data: Any) -> dict[str, Any]:
    return ApiResponse(success=True, data=data).model_dump()


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse(success=False, error=message).model_dump(),
    )


# ============================================================================
# App factory
# ============================================================================


def create_app(
    config: PrincipiaConfig | None = None,
    provider: ContentProvider | None = None,
) -> FastAPI:
    config = config or PrincipiaConfig()
    owns_provider = provider is None
    if provider is None:
        provider = WikipediaClient(config.provider)

    engine = RecursiveAnalysisEngine(
        provider,
        cache=ResultCache(config.cache),
        config=config.engine,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine.start()
        warm_up = None
        if config.server.warm_up:
            warm_up = asyncio.create_task(engine.warm_up())
        logger.info("server_started", host=config.server.host, port=config.server.port)
        try:
            yield
        finally:
            if warm_up is not None and not warm_up.done():
                warm_up.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await warm_up
            await engine.stop()
            if owns_provider:
                await provider.close()
            logger.info("server_stopped")

    app = FastAPI(title="Principia", lifespan=lifespan)
    app.state.engine = engine
    app.state.config = config

    # ------------------------------------------------------------------
    # Error mapping
    # ------------------------------------------------------------------

    @app.exception_handler(RequestValidationError)
    async def on_validation_error(request: Request, exc: RequestValidationError):
        return failure(400, f"Invalid request: {exc.errors()}")

    @app.exception_handler(ValueError)
    async def on_value_error(request: Request, exc: ValueError):
        return failure(400, str(exc))

    @app.exception_handler(PrincipiaError)
    async def on_principia_error(request: Request, exc: PrincipiaError):
        if isinstance(exc, ContentProviderError):
            status = 502
        elif isinstance(exc, AnalysisFailedError) and isinstance(exc.cause, ContentProviderError):
            status = 502
        else:
            status = 500
        logger.error("request_failed", path=request.url.path, code=exc.code, error=str(exc))
        return failure(status, str(exc))

    # ------------------------------------------------------------------
    # Routes
    # ------------------------------------------------------------------

    @app.get("/health")
    async def health():
        return ok({"status": "ok"})

    @app.post("/analyze")
    async def analyze(body: AnalyzeRequest):
        result = await engine.analyze(body.term, body.max_depth, body.max_results)
        return ok(result.to_dict())

    @app.get("/analyze")
    async def analyze_query(
        term: str = Query(..., min_length=1),
        max_depth: Optional[int] = Query(None, ge=0),
        max_results: Optional[int] = Query(None, ge=0),
    ):
        result = await engine.analyze(term, max_depth, max_results)
        return ok(result.to_dict())

    @app.get("/suggest")
    async def suggest(query: str = Query(..., min_length=1), limit: Optional[int] = Query(None, ge=1)):
        suggestions = await engine.suggest(query, limit or config.server.suggest_limit)
        return ok([s.to_dict() for s in suggestions])

    @app.get("/decompose")
    async def decompose(concept: str = Query(..., min_length=1), max_depth: int = Query(2, ge=1)):
        return ok(engine.decompose_concept(concept, max_depth).to_dict())

    @app.get("/cache/stats")
    async def cache_stats():
        return ok(engine.cache_stats().to_dict())

    @app.post("/cache/clear")
    async def cache_clear():
        engine.clear_cache()
        return ok({"cleared": True})

    return app
