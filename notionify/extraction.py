"""Recover a template object from free-form model output."""

from __future__ import annotations

import json
import logging
from typing import Any

from notionify.validation import SCRIPT_BLOCK_RE

logger = logging.getLogger(__name__)

FALLBACK_TITLE = "Template Generation Error"
FALLBACK_NOTES = "Failed to parse AI response. Please try again."


def fallback_template() -> dict[str, Any]:
    """Placeholder used whenever the reply holds no parseable JSON object."""

    return {
        "title": FALLBACK_TITLE,
        "sections": [],
        "properties": [],
        "notes": FALLBACK_NOTES,
    }


def find_json_span(text: str) -> str | None:
    """Return the text between the first ``{`` and the last ``}``, inclusive."""

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return None
    return text[start : end + 1]


def extract_template_candidate(raw: str) -> Any:
    """Parse the JSON object embedded in ``raw`` or return the fallback template.

    The reply may wrap the object in prose or markdown fences; only the
    outermost brace span is considered.
    """

    cleaned = SCRIPT_BLOCK_RE.sub("", raw)
    span = find_json_span(cleaned)
    if span is None:
        logger.warning("No JSON object found in model reply", extra={"reply_length": len(raw)})
        return fallback_template()

    try:
        return json.loads(span)
    except (ValueError, RecursionError) as exc:
        logger.warning(
            "Model reply is not valid JSON",
            extra={"error": str(exc), "reply_length": len(raw)},
        )
        return fallback_template()
