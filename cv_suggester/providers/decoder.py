"""Text extraction from completion responses.

Responses arrive either as SDK objects or as plain dicts, and the text lives
in different places depending on the response shape. Precedence:

1. top-level ``output_text``
2. ``output[0].content[0].text``
3. empty string

The text is returned as-is; JSON parsing belongs to the consumer.
"""

from __future__ import annotations

from typing import Any

from .types import ConvenienceText, EmptyResponse, NestedContent, ResponseShape


def classify_response(response: Any) -> ResponseShape:
    convenience = _field(response, "output_text")
    if isinstance(convenience, str) and convenience:
        return ConvenienceText(convenience)

    nested = _field(_first(_field(_first(_field(response, "output")), "content")), "text")
    if isinstance(nested, str):
        return NestedContent(nested)
    # Some SDK versions wrap text in an object with a ``value`` attribute.
    value = _field(nested, "value")
    if isinstance(value, str):
        return NestedContent(value)

    return EmptyResponse()


def extract_text(response: Any) -> str:
    return classify_response(response).text


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def _first(items: Any) -> Any:
    if isinstance(items, (list, tuple)) and items:
        return items[0]
    return None
