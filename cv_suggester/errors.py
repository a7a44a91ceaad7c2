"""Error taxonomy for the suggestion pipeline."""

from __future__ import annotations

from typing import Any, Dict, Optional


class SuggestError(Exception):
    """Pipeline error with a stable category and HTTP status mapping."""

    category = "InternalError"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "category": self.category}


class MissingDocument(SuggestError):
    category = "MissingDocument"
    status_code = 400


class UnsupportedMediaType(SuggestError):
    category = "UnsupportedMediaType"
    status_code = 400


class DocumentTooLarge(SuggestError):
    category = "DocumentTooLarge"
    status_code = 413


class MethodNotAllowed(SuggestError):
    category = "MethodNotAllowed"
    status_code = 405


class UploadFailed(SuggestError):
    """The file store rejected the document or could not be reached."""

    category = "UploadFailed"
    status_code = 500


class CompletionFailed(SuggestError):
    """The completion request failed (quota, invalid document, transport)."""

    category = "CompletionFailed"
    status_code = 500


class SuggestionParseError(SuggestError):
    """The model answered, but its answer is not a readable JSON object.

    Raised only on the consumer side, after a successful completion.
    """

    category = "SuggestionParseError"
    status_code = 502


class ServiceMisconfigured(SuggestError):
    """The service was started without usable provider credentials."""

    category = "ServiceMisconfigured"
    status_code = 500


def provider_message(error: BaseException) -> str:
    """Best-effort human message from an SDK or transport exception."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error) or error.__class__.__name__
