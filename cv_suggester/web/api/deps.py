"""Dependency providers for the suggestion API."""

from __future__ import annotations

from fastapi import Request

from ...config import SuggesterConfig
from ...errors import ServiceMisconfigured
from ...orchestrator import RequestOrchestrator


def get_config(request: Request) -> SuggesterConfig:
    return request.app.state.config


def get_orchestrator(request: Request) -> RequestOrchestrator:
    """Access the shared orchestrator from app state."""
    orchestrator = getattr(request.app.state, "orchestrator", None)
    if orchestrator is None:
        raise ServiceMisconfigured("Provider credentials are not configured")
    return orchestrator
