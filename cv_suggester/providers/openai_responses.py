"""JSON-object completions through the OpenAI Responses API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
from openai import AsyncOpenAI, OpenAIError

from ..config import DEFAULT_MODEL
from ..domain.submission import UploadedDocumentRef
from ..errors import CompletionFailed, provider_message


class OpenAICompletionInvoker:
    """Single blocking round trip: prompt text plus one file reference."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        api_base: str = "",
        client: Optional[Any] = None,
    ) -> None:
        self.model = model or DEFAULT_MODEL
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=api_base or None)

    async def complete(self, prompt: str, document_ref: UploadedDocumentRef) -> Any:
        kwargs = self._build_request_kwargs(prompt, document_ref)
        try:
            return await self.client.responses.create(**kwargs)
        except (OpenAIError, httpx.HTTPError) as error:
            raise CompletionFailed(provider_message(error)) from error

    async def aclose(self) -> None:
        await self.client.close()

    def _build_request_kwargs(self, prompt: str, document_ref: UploadedDocumentRef) -> Dict[str, Any]:
        return {
            "model": self.model,
            "input": self._to_input(prompt, document_ref),
            "text": {"format": {"type": "json_object"}},
        }

    def _to_input(self, prompt: str, document_ref: UploadedDocumentRef) -> List[Dict[str, Any]]:
        return [
            {
                "role": "user",
                "content": [
                    {"type": "input_text", "text": prompt},
                    {"type": "input_file", "file_id": document_ref.id},
                ],
            }
        ]
