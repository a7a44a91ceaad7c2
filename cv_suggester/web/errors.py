"""API exception handlers rendering ``{"error": message}`` bodies."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..errors import MethodNotAllowed, SuggestError

logger = logging.getLogger("cv_suggester.web.api")

METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def suggest_error_handler(_: Request, exc: SuggestError) -> JSONResponse:
    """Render pipeline errors with their mapped status."""
    logger.info("suggest_error category=%s status=%s details=%s", exc.category, exc.status_code, exc.details or "-")
    return error_response(exc.status_code, exc.message)


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == MethodNotAllowed.status_code:
        return error_response(exc.status_code, METHOD_NOT_ALLOWED_MESSAGE)
    return error_response(exc.status_code, str(exc.detail))


async def unexpected_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error type=%s", exc.__class__.__name__)
    return error_response(500, str(exc) or exc.__class__.__name__)
