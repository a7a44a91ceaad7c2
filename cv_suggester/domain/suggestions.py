"""Critique schema as read by consumers of the raw suggestion text.

The provider is asked to honour this shape but nothing upstream enforces it,
so every field is optional and tolerates being absent or null.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import SuggestionParseError

UNREADABLE_MESSAGE = "The model's answer was unreadable."


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return "; ".join(str(item) for item in value if item is not None)
    return str(value)


def _as_text_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item is not None and str(item).strip()]
    return [str(value)]


class BulletRewrite(BaseModel):
    model_config = ConfigDict(extra="ignore")

    section: str = ""
    original: str = ""
    improved: str = ""
    rationale: str = ""
    evidence_to_add: str = ""

    @field_validator("section", "original", "improved", "rationale", "evidence_to_add", mode="before")
    @classmethod
    def coerce_text_field(cls, value: Any) -> str:
        return _as_text(value)

    @property
    def is_net_new(self) -> bool:
        return not self.original.strip()


class Suggestions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    summary_rewrite: str = ""
    skills_to_frontload: List[str] = Field(default_factory=list)
    section_order: List[str] = Field(default_factory=list)
    bullet_rewrites: List[BulletRewrite] = Field(default_factory=list)
    missing_keywords: List[str] = Field(default_factory=list)
    ats_notes: str = ""
    red_flags: List[str] = Field(default_factory=list)
    final_checks: List[str] = Field(default_factory=list)
    clarifications_needed: List[str] = Field(default_factory=list)

    @field_validator("summary_rewrite", "ats_notes", mode="before")
    @classmethod
    def coerce_text_field(cls, value: Any) -> str:
        return _as_text(value)

    @field_validator(
        "skills_to_frontload",
        "section_order",
        "missing_keywords",
        "red_flags",
        "final_checks",
        "clarifications_needed",
        mode="before",
    )
    @classmethod
    def coerce_text_list(cls, value: Any) -> List[str]:
        return _as_text_list(value)

    @field_validator("bullet_rewrites", mode="before")
    @classmethod
    def keep_rewrite_records(cls, value: Any) -> List[Any]:
        if value is None:
            return []
        if isinstance(value, dict):
            return [value]
        if isinstance(value, list):
            return [item for item in value if isinstance(item, dict)]
        return []

    @property
    def needs_clarification(self) -> bool:
        return bool(self.clarifications_needed)


def parse_suggestions(raw: Union[str, bytes, Dict[str, Any]]) -> Suggestions:
    """Decode the raw critique into :class:`Suggestions`.

    Raises:
        SuggestionParseError: the text is not a JSON object.
    """
    if isinstance(raw, dict):
        data: Any = raw
    else:
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise SuggestionParseError(UNREADABLE_MESSAGE, {"reason": str(exc)}) from exc

    if not isinstance(data, dict):
        raise SuggestionParseError(UNREADABLE_MESSAGE, {"reason": f"expected a JSON object, got {type(data).__name__}"})

    try:
        return Suggestions.model_validate(data)
    except ValidationError as exc:
        raise SuggestionParseError(UNREADABLE_MESSAGE, {"reason": str(exc)}) from exc
