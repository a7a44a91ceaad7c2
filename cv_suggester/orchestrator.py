"""Request pipeline: validate, compose, upload, complete, decode."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Callable, Iterable

from .config import DEFAULT_ALLOWED_MEDIA_TYPES
from .domain.prompt import compose_for
from .domain.submission import SubmissionRequest, SuggestionResponse, UploadedDocumentRef
from .domain.validator import validate_submission
from .errors import CompletionFailed, SuggestError, UploadFailed, provider_message
from .observability import redact_text
from .providers.base import CompletionBackend, DocumentStore
from .providers.decoder import extract_text

logger = logging.getLogger("cv_suggester.pipeline")


class RequestOrchestrator:
    """Runs one submission start to finish.

    Holds only its collaborators, so one instance serves concurrent requests.
    Failures short-circuit and surface as :class:`SuggestError` subclasses.
    """

    def __init__(
        self,
        store: DocumentStore,
        completion: CompletionBackend,
        allowed_media_types: Iterable[str] = DEFAULT_ALLOWED_MEDIA_TYPES,
        decoder: Callable[[Any], str] = extract_text,
    ) -> None:
        self.store = store
        self.completion = completion
        self.allowed_media_types = tuple(allowed_media_types)
        self.decoder = decoder

    async def run(self, submission: SubmissionRequest) -> SuggestionResponse:
        start = perf_counter()
        try:
            validate_submission(submission, self.allowed_media_types)
        except SuggestError as error:
            logger.info("submission_rejected category=%s message=%s", error.category, error.message)
            raise

        prompt = compose_for(submission)
        logger.info(
            "submission_accepted media_type=%s size=%s target_role=%s",
            submission.document.media_type or "-",
            submission.document.size,
            redact_text(submission.target_role, max_length=80) or "-",
        )

        document_ref = await self._upload(submission)
        raw = await self._complete(prompt, document_ref)
        suggestions = self.decoder(raw)

        # The stored document is not deleted once the request ends.
        logger.info(
            "suggestions_ready file_id=%s chars=%s duration_ms=%.2f document_retained=true",
            document_ref.id,
            len(suggestions),
            (perf_counter() - start) * 1000,
        )
        return SuggestionResponse(suggestions=suggestions, document_ref=document_ref)

    async def _upload(self, submission: SubmissionRequest) -> UploadedDocumentRef:
        try:
            return await self.store.upload(submission.document)
        except SuggestError as error:
            logger.error("upload_failed category=%s message=%s", error.category, error.message)
            raise
        except Exception as error:
            logger.exception("upload_failed category=%s", UploadFailed.category)
            raise UploadFailed(provider_message(error)) from error

    async def _complete(self, prompt: str, document_ref: UploadedDocumentRef) -> Any:
        try:
            return await self.completion.complete(prompt, document_ref)
        except SuggestError as error:
            logger.error(
                "completion_failed category=%s file_id=%s message=%s",
                error.category,
                document_ref.id,
                error.message,
            )
            raise
        except Exception as error:
            logger.exception("completion_failed category=%s file_id=%s", CompletionFailed.category, document_ref.id)
            raise CompletionFailed(provider_message(error)) from error

    async def aclose(self) -> None:
        """Release provider connections held by the collaborators."""
        for component in (self.store, self.completion):
            close = getattr(component, "aclose", None)
            if close is not None:
                await close()
