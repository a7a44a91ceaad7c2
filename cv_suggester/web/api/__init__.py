"""HTTP API routers."""

from __future__ import annotations

from fastapi import APIRouter

from .suggest import router as suggest_router

api_router = APIRouter()
api_router.include_router(suggest_router)

__all__ = ["api_router"]
