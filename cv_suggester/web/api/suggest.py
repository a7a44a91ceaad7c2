"""CV suggestion endpoint."""

from __future__ import annotations

from typing import Any, Dict, Union

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from ...config import SuggesterConfig
from ...orchestrator import RequestOrchestrator
from ..upload import parse_submission
from .deps import get_config, get_orchestrator

router = APIRouter(prefix="/api", tags=["suggest"])


class SuggestResponse(BaseModel):
    suggestions: Union[str, Dict[str, Any]]
    file_id: str


@router.post("/suggest", response_model=SuggestResponse)
async def suggest(
    request: Request,
    config: SuggesterConfig = Depends(get_config),
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
) -> SuggestResponse:
    form = await request.form()
    try:
        submission = await parse_submission(form, max_bytes=config.max_upload_bytes)
        result = await orchestrator.run(submission)
    finally:
        await form.close()
    return SuggestResponse(**result.to_dict())
