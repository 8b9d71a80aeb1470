# -*- coding: utf-8 -*-
"""
json_parser
===========

Why this helper exists:
- The model is told to answer with one JSON object, but it often wraps the
  object in prose ("Sure! {...} Hope this helps!") or breaks it entirely.
- CodeIterator should not be cluttered with low-level parsing details.

What it does:
- `extract_json_object(raw_output)` tries, in order:
    1. the whole text as JSON,
    2. the greedy span from the first '{' to the last '}',
    3. a balanced-brace scan for the first embedded object that parses,
  and returns the dict, or None when nothing usable was found.
- `safe_json_parse(raw_output)` never fails: when extraction finds nothing it
  builds a synthetic result that shows the raw text instead.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Iterator, List, Optional, Tuple

from codeiter.orchestration.iteration_types import EXPLANATION_KEY, MODIFIED_CODE_KEY
from codeiter.utils.logging import SimpleLogger

UNPARSEABLE_EXPLANATION = (
    "The AI response couldn't be parsed as JSON. Showing raw response instead."
)

_BRACE_SPAN_RE = re.compile(r"\{[\s\S]*\}")


def _as_text(raw_output: Any) -> str:
    if isinstance(raw_output, str):
        return raw_output
    return "" if raw_output is None else str(raw_output)


def _loads_object(text: str) -> Optional[Dict[str, Any]]:
    """json.loads that only accepts a top-level object."""
    try:
        value = json.loads(text)
    except (ValueError, TypeError, RecursionError):
        return None
    return value if isinstance(value, dict) else None


def _balanced_candidates(text: str) -> Iterator[str]:
    """
    Yield every balanced '{ ... }' substring, ordered by where it starts.

    One pass with a stack of open-brace positions. Braces inside JSON string
    literals (including escaped quotes) do not count; quotes outside any
    brace are ignored.
    """
    open_positions: List[int] = []
    spans: List[Tuple[int, int]] = []
    in_string = False
    escaped = False
    for pos, c in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif c == "\\":
                escaped = True
            elif c == '"':
                in_string = False
            continue
        if c == '"':
            in_string = bool(open_positions)
        elif c == "{":
            open_positions.append(pos)
        elif c == "}" and open_positions:
            spans.append((open_positions.pop(), pos))

    spans.sort()
    for start, end in spans:
        yield text[start : end + 1]


def extract_json_object(raw_output: Any) -> Optional[Dict[str, Any]]:
    """
    Best-effort extraction of a JSON object from the raw LLM output.

    Returns None if no attempt produced a JSON object.
    """
    if isinstance(raw_output, dict):
        return raw_output

    text = _as_text(raw_output)

    # First attempt: direct JSON
    parsed = _loads_object(text)
    if parsed is not None:
        return parsed

    # Second attempt: greedy brace span
    match = _BRACE_SPAN_RE.search(text)
    if match is None:
        return None
    parsed = _loads_object(match.group(0))
    if parsed is not None:
        return parsed
    SimpleLogger.error("json_parser: failed to parse greedy brace span; trying balanced scan")

    # Third attempt: first balanced object that parses
    for candidate in _balanced_candidates(text):
        parsed = _loads_object(candidate)
        if parsed is not None:
            return parsed

    SimpleLogger.error("json_parser: no parseable JSON object found in response")
    return None


def safe_json_parse(raw_output: Any) -> Dict[str, Any]:
    """
    Like extract_json_object, but always returns a dict.

    When nothing parses, the raw text becomes the code field and the
    explanation says the response could not be parsed.
    """
    parsed = extract_json_object(raw_output)
    if parsed is not None:
        return parsed
    text = _as_text(raw_output)
    return {
        MODIFIED_CODE_KEY: text,
        EXPLANATION_KEY: UNPARSEABLE_EXPLANATION,
    }
