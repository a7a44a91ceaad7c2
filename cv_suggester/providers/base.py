"""Provider protocol definitions."""

from __future__ import annotations

from typing import Any, Protocol

from ..domain.submission import DocumentBlob, UploadedDocumentRef


class DocumentStore(Protocol):
    """Protocol for the provider's file store."""

    async def upload(self, document: DocumentBlob) -> UploadedDocumentRef: ...


class CompletionBackend(Protocol):
    """Protocol for a single JSON-object completion round trip."""

    async def complete(self, prompt: str, document_ref: UploadedDocumentRef) -> Any: ...
