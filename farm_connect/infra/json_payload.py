"""Extract JSON from model replies that may be wrapped in prose or code fences."""

from __future__ import annotations

import json
import re
from typing import Any, Iterator, Optional

from ..domain.errors import ResponseParseError


_FENCE_RE = re.compile(r"^```(?:json)?", flags=re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_RE.sub("", cleaned).strip()
        if cleaned.endswith("```"):
            cleaned = cleaned[:-3].strip()
    return cleaned


def extract_json_block(text: str, opener: str, closer: str) -> Optional[str]:
    start = text.find(opener)
    end = text.rfind(closer)
    if start == -1 or end == -1 or end <= start:
        return None
    return text[start : end + 1]


def _candidates(text: str) -> Iterator[str]:
    cleaned = strip_code_fence(text)
    yield cleaned
    for opener, closer in (("{", "}"), ("[", "]")):
        block = extract_json_block(cleaned, opener, closer)
        if block and block != cleaned:
            yield block


def load_json_payload(text: str) -> Any:
    """
    Decode the first well-formed JSON document found in ``text``.

    Raises:
        ResponseParseError: when the reply is empty or holds no JSON.
    """
    if not text or not text.strip():
        raise ResponseParseError("empty reply", raw=text or "")
    for candidate in _candidates(text):
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
    raise ResponseParseError("reply is not valid JSON", raw=text)
