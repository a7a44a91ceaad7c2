"""Request-scoped data types for a single suggestion request."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union


def coerce_text(value: Any) -> str:
    """Collapse arbitrary form input to a string without raising.

    Sequences collapse to their first element, ``None`` to ``""``.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return coerce_text(value[0]) if value else ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    try:
        return str(value)
    except Exception:
        return ""


@dataclass(frozen=True)
class DocumentBlob:
    """An uploaded document held in memory or on disk."""

    filename: str
    media_type: Optional[str] = None
    content: Optional[bytes] = field(default=None, repr=False)
    path: Optional[Path] = None

    @classmethod
    def from_bytes(cls, content: bytes, filename: str = "", media_type: Optional[str] = None) -> "DocumentBlob":
        return cls(filename=filename or "cv", media_type=media_type or None, content=content)

    @classmethod
    def from_path(cls, path: Union[str, Path], media_type: Optional[str] = None) -> "DocumentBlob":
        resolved = Path(path)
        return cls(filename=resolved.name, media_type=media_type or None, path=resolved)

    @property
    def size(self) -> int:
        if self.content is not None:
            return len(self.content)
        if self.path is not None and self.path.is_file():
            return self.path.stat().st_size
        return 0

    @property
    def is_streamed(self) -> bool:
        return self.content is None and self.path is not None


@dataclass(frozen=True)
class SubmissionRequest:
    """One candidate submission: the document plus three free-text answers."""

    document: Optional[DocumentBlob]
    target_role: str = ""
    job_context: str = ""
    concerns: str = ""

    def __post_init__(self) -> None:
        # Text fields are always str by the time the composer sees them.
        object.__setattr__(self, "target_role", coerce_text(self.target_role))
        object.__setattr__(self, "job_context", coerce_text(self.job_context))
        object.__setattr__(self, "concerns", coerce_text(self.concerns))


@dataclass(frozen=True)
class UploadedDocumentRef:
    """Opaque handle issued by the provider's file store."""

    id: str


@dataclass(frozen=True)
class SuggestionResponse:
    suggestions: Union[str, Dict[str, Any]]
    document_ref: UploadedDocumentRef

    def to_dict(self) -> Dict[str, Any]:
        return {"suggestions": self.suggestions, "file_id": self.document_ref.id}
