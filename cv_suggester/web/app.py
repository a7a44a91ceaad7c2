"""FastAPI app entrypoint for the CV suggestion API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import SuggesterConfig, load_config
from ..config_validator import Severity, has_errors, validate_config
from ..errors import SuggestError
from ..orchestrator import RequestOrchestrator
from ..providers import create_providers
from .api import api_router
from .errors import (
    http_error_handler,
    suggest_error_handler,
    unexpected_error_handler,
)

logger = logging.getLogger("cv_suggester.web.api")


def build_orchestrator(config: SuggesterConfig) -> Optional[RequestOrchestrator]:
    """Wire provider adapters from config, or return None when misconfigured."""
    issues = validate_config(config)
    for issue in issues:
        level = logging.ERROR if issue.severity == Severity.ERROR else logging.WARNING
        logger.log(level, "config_issue field=%s message=%s", issue.field, issue.message)
    if has_errors(issues):
        return None

    uploader, invoker = create_providers(config)
    return RequestOrchestrator(
        store=uploader,
        completion=invoker,
        allowed_media_types=config.allowed_media_types,
    )


def create_app(
    config: Optional[SuggesterConfig] = None,
    orchestrator: Optional[RequestOrchestrator] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or load_config()
    if orchestrator is None:
        orchestrator = build_orchestrator(config)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            if app.state.orchestrator is not None:
                await app.state.orchestrator.aclose()

    app = FastAPI(title="CV Suggester API", version="0.1.0", lifespan=lifespan)
    app.state.config = config
    app.state.orchestrator = orchestrator
    app.include_router(api_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                500,
                duration_ms,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok", "configured": app.state.orchestrator is not None}

    app.add_exception_handler(SuggestError, suggest_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
    return app


app = create_app()


def main() -> None:
    """Run development API server."""
    import uvicorn

    from ..observability import configure_logging

    configure_logging(verbose=True)
    uvicorn.run("cv_suggester.web.app:app", host="127.0.0.1", port=8000)
