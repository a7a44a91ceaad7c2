"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

import pytest

from cv_suggester.domain.submission import DocumentBlob
from stubs import PDF_BYTES, StubCompletion, StubDocumentStore


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "OPENAI_API_KEY",
        "CV_SUGGESTER_API_BASE",
        "CV_SUGGESTER_MODEL",
        "CV_SUGGESTER_FILE_PURPOSE",
        "CV_SUGGESTER_MAX_UPLOAD_BYTES",
        "CV_SUGGESTER_ALLOWED_MEDIA_TYPES",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def store() -> StubDocumentStore:
    return StubDocumentStore()


@pytest.fixture
def completion() -> StubCompletion:
    return StubCompletion()


@pytest.fixture
def pdf_document() -> DocumentBlob:
    return DocumentBlob.from_bytes(PDF_BYTES, filename="cv.pdf", media_type="application/pdf")
