"""Provider factory and adapters."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from openai import AsyncOpenAI

from ..config import SuggesterConfig
from .base import CompletionBackend, DocumentStore
from .decoder import classify_response, extract_text
from .openai_files import OpenAIDocumentUploader
from .openai_responses import OpenAICompletionInvoker
from .types import ConvenienceText, EmptyResponse, NestedContent, ResponseShape


def create_providers(
    config: SuggesterConfig,
    client: Optional[Any] = None,
) -> Tuple[OpenAIDocumentUploader, OpenAICompletionInvoker]:
    """Build the uploader and invoker sharing one client.

    Raises:
        ValueError: no API key is configured.
    """
    if client is None:
        if not config.api_key:
            raise ValueError("OPENAI_API_KEY not set. Please set the env var or add api_key to config/config.yaml")
        client = AsyncOpenAI(api_key=config.api_key, base_url=config.api_base or None)

    uploader = OpenAIDocumentUploader(
        api_key=config.api_key,
        api_base=config.api_base,
        purpose=config.file_purpose,
        client=client,
    )
    invoker = OpenAICompletionInvoker(
        api_key=config.api_key,
        model=config.model,
        api_base=config.api_base,
        client=client,
    )
    return uploader, invoker


__all__ = [
    "CompletionBackend",
    "ConvenienceText",
    "DocumentStore",
    "EmptyResponse",
    "NestedContent",
    "OpenAICompletionInvoker",
    "OpenAIDocumentUploader",
    "ResponseShape",
    "classify_response",
    "create_providers",
    "extract_text",
]
