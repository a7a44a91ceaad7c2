"""Request types, validation, prompt and critique schema."""

from .prompt import CV_EDITOR_PROMPT, compose_for, compose_prompt
from .submission import (
    DocumentBlob,
    SubmissionRequest,
    SuggestionResponse,
    UploadedDocumentRef,
    coerce_text,
)
from .suggestions import BulletRewrite, Suggestions, parse_suggestions
from .validator import normalize_media_type, validate_submission

__all__ = [
    "BulletRewrite",
    "CV_EDITOR_PROMPT",
    "DocumentBlob",
    "SubmissionRequest",
    "SuggestionResponse",
    "Suggestions",
    "UploadedDocumentRef",
    "coerce_text",
    "compose_for",
    "compose_prompt",
    "normalize_media_type",
    "parse_suggestions",
    "validate_submission",
]
