"""Pipeline sequencing and error mapping tests."""

from __future__ import annotations

import asyncio
import json
import logging

import pytest

from cv_suggester.domain.prompt import compose_prompt
from cv_suggester.domain.submission import DocumentBlob, SubmissionRequest, UploadedDocumentRef
from cv_suggester.errors import CompletionFailed, MissingDocument, UnsupportedMediaType, UploadFailed
from cv_suggester.orchestrator import RequestOrchestrator
from stubs import PDF_BYTES, VALID_SUGGESTIONS, StubCompletion, StubDocumentStore


def _submission(document: DocumentBlob = None, **fields) -> SubmissionRequest:
    return SubmissionRequest(document=document, **fields)


@pytest.mark.asyncio
async def test_successful_run_returns_suggestions_and_file_id(store, completion, pdf_document) -> None:
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    result = await orchestrator.run(_submission(pdf_document, target_role="ML Engineer"))

    assert result.document_ref.id == store.file_id
    assert json.loads(result.suggestions) == VALID_SUGGESTIONS
    assert result.to_dict() == {"suggestions": result.suggestions, "file_id": "file-abc123"}


@pytest.mark.asyncio
async def test_completion_receives_composed_prompt_and_uploaded_ref(store, completion, pdf_document) -> None:
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    await orchestrator.run(_submission(pdf_document, target_role="SRE", job_context="Go, k8s", concerns="gap year"))

    assert store.calls == [pdf_document]
    prompt, ref = completion.calls[0]
    assert prompt == compose_prompt("SRE", "Go, k8s", "gap year")
    assert ref.id == store.file_id


@pytest.mark.asyncio
async def test_missing_document_touches_no_provider(store, completion) -> None:
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    with pytest.raises(MissingDocument):
        await orchestrator.run(_submission(None, target_role="ML Engineer"))

    assert store.calls == []
    assert completion.calls == []


@pytest.mark.asyncio
async def test_unsupported_media_type_touches_no_provider(store, completion) -> None:
    orchestrator = RequestOrchestrator(store=store, completion=completion)
    png = DocumentBlob.from_bytes(b"\x89PNG\r\n", filename="cv.png", media_type="image/png")

    with pytest.raises(UnsupportedMediaType):
        await orchestrator.run(_submission(png))

    assert store.calls == []
    assert completion.calls == []


@pytest.mark.asyncio
async def test_untyped_document_goes_through(store, completion) -> None:
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    result = await orchestrator.run(_submission(DocumentBlob.from_bytes(PDF_BYTES, filename="cv")))

    assert result.document_ref.id == store.file_id
    assert len(store.calls) == 1


@pytest.mark.asyncio
async def test_store_exception_becomes_upload_failed_and_skips_completion(completion, pdf_document, caplog) -> None:
    caplog.set_level(logging.INFO, logger="cv_suggester.pipeline")
    store = StubDocumentStore(error=RuntimeError("storage exploded"))
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    with pytest.raises(UploadFailed) as excinfo:
        await orchestrator.run(_submission(pdf_document))

    assert excinfo.value.message == "storage exploded"
    assert excinfo.value.to_dict() == {"message": "storage exploded", "category": "UploadFailed"}
    assert len(store.calls) == 1
    assert completion.calls == []
    assert "upload_failed" in caplog.text


@pytest.mark.asyncio
async def test_upload_failed_from_adapter_passes_through(completion, pdf_document) -> None:
    store = StubDocumentStore(error=UploadFailed("File too large for purpose"))
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    with pytest.raises(UploadFailed, match="File too large for purpose"):
        await orchestrator.run(_submission(pdf_document))


@pytest.mark.asyncio
async def test_completion_exception_becomes_completion_failed(store, pdf_document) -> None:
    completion = StubCompletion(error=TimeoutError("model timed out"))
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    with pytest.raises(CompletionFailed) as excinfo:
        await orchestrator.run(_submission(pdf_document))

    assert excinfo.value.message == "model timed out"
    assert len(store.calls) == 1
    assert len(completion.calls) == 1


@pytest.mark.asyncio
async def test_unparseable_text_is_returned_raw(store, pdf_document) -> None:
    completion = StubCompletion(response={"output_text": "Sorry, I cannot help with that."})
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    result = await orchestrator.run(_submission(pdf_document))

    assert result.suggestions == "Sorry, I cannot help with that."


@pytest.mark.asyncio
async def test_nested_response_shape_is_decoded(store, pdf_document) -> None:
    completion = StubCompletion(response={"output": [{"content": [{"type": "output_text", "text": "{}"}]}]})
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    result = await orchestrator.run(_submission(pdf_document))

    assert result.suggestions == "{}"


@pytest.mark.asyncio
async def test_retained_document_is_logged(store, completion, pdf_document, caplog) -> None:
    caplog.set_level(logging.INFO, logger="cv_suggester.pipeline")
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    await orchestrator.run(_submission(pdf_document, target_role="reach me at jane@example.com"))

    assert "document_retained=true" in caplog.text
    assert "jane@example.com" not in caplog.text


class PerDocumentStore(StubDocumentStore):
    """Hands out one file id per document and yields mid-upload."""

    async def upload(self, document: DocumentBlob) -> UploadedDocumentRef:
        self.calls.append(document)
        await asyncio.sleep(0)
        return UploadedDocumentRef(id=f"id-{document.filename}")


@pytest.mark.asyncio
async def test_concurrent_runs_stay_isolated(completion) -> None:
    store = PerDocumentStore()
    orchestrator = RequestOrchestrator(store=store, completion=completion)
    first = _submission(
        DocumentBlob.from_bytes(PDF_BYTES, filename="a.pdf", media_type="application/pdf"),
        target_role="Data Analyst",
    )
    second = _submission(
        DocumentBlob.from_bytes(PDF_BYTES + b"%b", filename="b.pdf", media_type="application/pdf"),
        target_role="Platform Engineer",
        concerns="visa sponsorship",
    )

    result_a, result_b = await asyncio.gather(orchestrator.run(first), orchestrator.run(second))

    assert result_a.to_dict()["file_id"] == "id-a.pdf"
    assert result_b.to_dict()["file_id"] == "id-b.pdf"
    pairs = {ref.id: prompt for prompt, ref in completion.calls}
    assert pairs == {
        "id-a.pdf": compose_prompt("Data Analyst"),
        "id-b.pdf": compose_prompt("Platform Engineer", concerns="visa sponsorship"),
    }


@pytest.mark.asyncio
async def test_aclose_closes_both_collaborators(store, completion) -> None:
    orchestrator = RequestOrchestrator(store=store, completion=completion)

    await orchestrator.aclose()

    assert store.closed and completion.closed


@pytest.mark.asyncio
async def test_aclose_skips_collaborators_without_close() -> None:
    class Bare:
        async def upload(self, document):
            raise AssertionError("not called")

        async def complete(self, prompt, document_ref):
            raise AssertionError("not called")

    await RequestOrchestrator(store=Bare(), completion=Bare()).aclose()
