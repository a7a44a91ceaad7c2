"""Provider doubles shared by pipeline and API tests."""

from __future__ import annotations

import json
from typing import Any, List, Optional

from cv_suggester.domain.submission import DocumentBlob, UploadedDocumentRef

PDF_BYTES = b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\n%%EOF\n"

VALID_SUGGESTIONS = {
    "summary_rewrite": "Graduate ML engineer shipping PyTorch models to production.",
    "skills_to_frontload": ["Python", "PyTorch", "AWS"],
    "section_order": ["Summary", "Skills", "Experience", "Projects", "Education"],
    "bullet_rewrites": [
        {
            "section": "Experience",
            "original": "Worked on data pipelines",
            "improved": "Built Airflow pipelines processing 2M rows/day, cutting latency by 35%",
            "rationale": "Verb + scale + metric",
            "evidence_to_add": "Airflow run logs",
        }
    ],
    "missing_keywords": ["Kubernetes"],
    "ats_notes": "Use month-year dates.",
    "red_flags": ["Six-month gap in 2023"],
    "final_checks": ["keep to 1-2 pages"],
}


class StubDocumentStore:
    """File store double that records every upload."""

    def __init__(self, file_id: str = "file-abc123", error: Optional[Exception] = None) -> None:
        self.file_id = file_id
        self.error = error
        self.calls: List[DocumentBlob] = []
        self.closed = False

    async def upload(self, document: DocumentBlob) -> UploadedDocumentRef:
        self.calls.append(document)
        if self.error is not None:
            raise self.error
        return UploadedDocumentRef(id=self.file_id)

    async def aclose(self) -> None:
        self.closed = True


class StubCompletion:
    """Completion double returning a fixed response object."""

    def __init__(self, response: Any = None, error: Optional[Exception] = None) -> None:
        self.response = response if response is not None else {"output_text": json.dumps(VALID_SUGGESTIONS)}
        self.error = error
        self.calls: List[tuple] = []
        self.closed = False

    async def complete(self, prompt: str, document_ref: UploadedDocumentRef) -> Any:
        self.calls.append((prompt, document_ref))
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self) -> None:
        self.closed = True
