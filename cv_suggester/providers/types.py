"""Observed shapes of a completion response."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ConvenienceText:
    """Response carrying a top-level ``output_text`` field."""

    text: str


@dataclass(frozen=True)
class NestedContent:
    """Response carrying text only at ``output[0].content[0].text``."""

    text: str


@dataclass(frozen=True)
class EmptyResponse:
    """Response with no recognisable text payload."""

    text: str = ""


ResponseShape = Union[ConvenienceText, NestedContent, EmptyResponse]
