"""CV Suggester - résumé critique through a language-model provider."""

from .config import SuggesterConfig, load_config
from .domain import (
    DocumentBlob,
    SubmissionRequest,
    SuggestionResponse,
    Suggestions,
    UploadedDocumentRef,
    compose_prompt,
    parse_suggestions,
    validate_submission,
)
from .errors import (
    CompletionFailed,
    DocumentTooLarge,
    MethodNotAllowed,
    MissingDocument,
    SuggestError,
    SuggestionParseError,
    UnsupportedMediaType,
    UploadFailed,
)
from .orchestrator import RequestOrchestrator

__version__ = "0.1.0"

__all__ = [
    "CompletionFailed",
    "DocumentBlob",
    "DocumentTooLarge",
    "MethodNotAllowed",
    "MissingDocument",
    "RequestOrchestrator",
    "SubmissionRequest",
    "SuggestError",
    "SuggesterConfig",
    "SuggestionParseError",
    "SuggestionResponse",
    "Suggestions",
    "UnsupportedMediaType",
    "UploadFailed",
    "UploadedDocumentRef",
    "compose_prompt",
    "load_config",
    "parse_suggestions",
    "validate_submission",
]
