"""Multipart decoding into a :class:`SubmissionRequest`.

The pipeline never sees form objects; this module is the only place that
knows field names and aliases.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from starlette.datastructures import FormData, UploadFile

from ..domain.submission import DocumentBlob, SubmissionRequest, coerce_text
from ..errors import DocumentTooLarge

DOCUMENT_FIELDS = ("cv", "cvFile")
TARGET_ROLE_FIELDS = ("targetRole",)
JOB_CONTEXT_FIELDS = ("topJobs", "jobContext")
CONCERNS_FIELDS = ("painPoints", "concerns")
CHUNK_SIZE = 64 * 1024


async def read_upload_with_limit(file: UploadFile, max_bytes: int) -> bytes:
    """Read an upload stream with hard byte limit.

    This prevents loading arbitrarily large payloads into memory before validation.
    """
    chunks: list[bytes] = []
    total = 0

    while True:
        chunk = await file.read(CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise DocumentTooLarge(
                f"Uploaded file exceeds size limit of {max_bytes} bytes",
                {"max_upload_bytes": max_bytes},
            )
        chunks.append(chunk)

    return b"".join(chunks)


async def parse_submission(form: FormData, max_bytes: int) -> SubmissionRequest:
    upload = _first_upload(form, DOCUMENT_FIELDS)
    document: Optional[DocumentBlob] = None
    if upload is not None:
        content = await read_upload_with_limit(upload, max_bytes)
        document = DocumentBlob.from_bytes(
            content,
            filename=upload.filename or "",
            media_type=upload.content_type,
        )

    return SubmissionRequest(
        document=document,
        target_role=_first_text(form, TARGET_ROLE_FIELDS),
        job_context=_first_text(form, JOB_CONTEXT_FIELDS),
        concerns=_first_text(form, CONCERNS_FIELDS),
    )


def _first_upload(form: FormData, names: Iterable[str]) -> Optional[UploadFile]:
    for name in names:
        for value in form.getlist(name):
            if isinstance(value, UploadFile):
                return value
    return None


def _first_text(form: FormData, names: Iterable[str]) -> str:
    for name in names:
        values: list[Any] = [value for value in form.getlist(name) if not isinstance(value, UploadFile)]
        if values:
            return coerce_text(values)
    return ""
