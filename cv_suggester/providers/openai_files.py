"""Document upload through the OpenAI files API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from openai import AsyncOpenAI, OpenAIError

from ..config import DEFAULT_FILE_PURPOSE
from ..domain.submission import DocumentBlob, UploadedDocumentRef
from ..errors import UploadFailed, provider_message

logger = logging.getLogger("cv_suggester.providers")


class OpenAIDocumentUploader:
    """Stores one document per call and returns its file id. Never retries."""

    def __init__(
        self,
        api_key: str,
        api_base: str = "",
        purpose: str = DEFAULT_FILE_PURPOSE,
        client: Optional[Any] = None,
    ) -> None:
        self.purpose = purpose or DEFAULT_FILE_PURPOSE
        self.client = client or AsyncOpenAI(api_key=api_key, base_url=api_base or None)

    async def upload(self, document: DocumentBlob) -> UploadedDocumentRef:
        try:
            if document.is_streamed:
                with open(document.path, "rb") as stream:
                    created = await self.client.files.create(
                        file=(document.filename, stream, document.media_type or "application/octet-stream"),
                        purpose=self.purpose,
                    )
            else:
                created = await self.client.files.create(
                    file=(document.filename, document.content or b"", document.media_type or "application/octet-stream"),
                    purpose=self.purpose,
                )
        except (OpenAIError, httpx.HTTPError, OSError) as error:
            raise UploadFailed(provider_message(error)) from error

        file_id = getattr(created, "id", None)
        if isinstance(created, dict):
            file_id = created.get("id")
        if not file_id:
            raise UploadFailed("File store returned no file id")

        logger.info("document_uploaded file_id=%s size=%s purpose=%s", file_id, document.size, self.purpose)
        return UploadedDocumentRef(id=str(file_id))

    async def aclose(self) -> None:
        await self.client.close()
