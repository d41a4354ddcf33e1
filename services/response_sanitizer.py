"""
Response Sanitizer - Turns raw model text into decoded JSON
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional, Union

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```$")


@dataclass(frozen=True)
class ParseFailure:
    """Signals that the model text could not be decoded."""
    reason: str


def _reject_constant(name: str):
    raise ValueError(f"Out of range float value '{name}' is not valid JSON")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` fence and outer whitespace."""
    text = text.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def sanitize(raw_text: Optional[str]) -> Union[Any, ParseFailure]:
    """Decode model output, returning ParseFailure instead of raising."""
    if not raw_text or not raw_text.strip():
        return ParseFailure("empty response")

    cleaned = strip_code_fences(raw_text)
    try:
        return json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:
        return ParseFailure(str(e))
