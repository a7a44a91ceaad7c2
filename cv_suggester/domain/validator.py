"""Submission checks that run before any provider call."""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import DEFAULT_ALLOWED_MEDIA_TYPES
from ..errors import MissingDocument, UnsupportedMediaType
from .submission import SubmissionRequest


def normalize_media_type(media_type: Optional[str]) -> str:
    """Lower-case a declared media type and drop parameters such as charset."""
    return (media_type or "").split(";", 1)[0].strip().lower()


def validate_submission(
    submission: SubmissionRequest,
    allowed_media_types: Iterable[str] = DEFAULT_ALLOWED_MEDIA_TYPES,
) -> None:
    """Reject submissions without a document or with a disallowed type.

    A document that declares no media type is accepted; some upload paths
    never send one.
    """
    document = submission.document
    if document is None or document.size == 0:
        raise MissingDocument("No CV file uploaded")

    declared = normalize_media_type(document.media_type)
    allowed = {normalize_media_type(item) for item in allowed_media_types}
    if declared and declared not in allowed:
        raise UnsupportedMediaType(
            f"Unsupported file type: {document.media_type}",
            {"media_type": declared, "allowed": sorted(allowed)},
        )
