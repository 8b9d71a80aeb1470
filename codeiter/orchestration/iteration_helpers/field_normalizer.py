# -*- coding: utf-8 -*-
"""
field_normalizer
================

Why this helper exists:
- json_parser gives back *some* dict, but the model may have dropped a key,
  returned an empty string, or put a list where text was expected.
- Callers must always receive an IterationResult with both fields populated.

What it does:
- `ensure_complete(parsed, raw_text)` fills missing/empty fields with the raw
  text (code) or a fixed message (explanation).
- `normalize_response(raw_text)` runs json_parser + ensure_complete and never
  raises.
"""

from __future__ import annotations

import json
from typing import Any, Dict

from codeiter.orchestration.iteration_types import (
    EXPLANATION_KEY,
    MODIFIED_CODE_KEY,
    IterationResult,
)
from codeiter.orchestration.iteration_helpers.json_parser import safe_json_parse
from codeiter.utils.logging import SimpleLogger

NO_CODE_PLACEHOLDER = "// Error: No code was generated"
INCOMPLETE_EXPLANATION = "The AI response was incomplete. Please try again."


def _to_text(value: Any) -> str:
    """Render a field value as text; falsy values become ''."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, indent=2)
    return str(value)


def ensure_complete(parsed: Dict[str, Any], raw_text: str) -> IterationResult:
    """
    Turn a parsed dict into an IterationResult with both fields non-empty.
    """
    code = _to_text(parsed.get(MODIFIED_CODE_KEY))
    explanation = _to_text(parsed.get(EXPLANATION_KEY))

    if code and explanation:
        return IterationResult(modified_code=code, explanation=explanation)

    SimpleLogger.error(
        f"field_normalizer: parsed response is missing required fields: {sorted(parsed.keys())!r}"
    )
    return IterationResult(
        modified_code=code or raw_text or NO_CODE_PLACEHOLDER,
        explanation=explanation or INCOMPLETE_EXPLANATION,
    )


def normalize_response(raw_text: Any) -> IterationResult:
    """Raw model text in, complete IterationResult out."""
    text = raw_text if isinstance(raw_text, str) else ("" if raw_text is None else str(raw_text))
    parsed = safe_json_parse(text)
    return ensure_complete(parsed, text)
