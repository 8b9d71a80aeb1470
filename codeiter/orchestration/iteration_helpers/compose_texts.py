# -*- coding: utf-8 -*-
"""
compose_texts
=============

Why this helper exists:
- The SYSTEM instruction is a long fixed text and easy to clutter the
  CodeIterator class with.
- We want CodeIterator to read like a high-level story, and all text
  formatting to live here.

What it does:
- `build_system_text()` for the SYSTEM message (strict two-field JSON).
- `build_user_text(code, prompt)` for the USER message.
- `build_retry_prompt(prompt)` appends the JSON-format reminder used by "Try Again".
- `build_messages(code, prompt)` returns both as chat messages.
"""

from __future__ import annotations

from typing import Dict, List

SYSTEM_TEXT = """You are a code improvement assistant. A user provides code and a prompt to improve it.

You MUST respond with a valid JSON object containing exactly these two fields:
1. "modifiedCode": The improved code as a string
2. "explanation": Your explanation of the changes

Example of the expected response format:
{
  "modifiedCode": "function example() { console.log('Hello world'); }",
  "explanation": "Added a console.log statement to the function."
}

Do not include any text outside of the JSON object. Do not include markdown formatting, code blocks, or any other text."""

RETRY_HINT = (
    "IMPORTANT: Please ensure your response is in valid JSON format "
    "with 'modifiedCode' and 'explanation' fields."
)


def build_system_text() -> str:
    """
    Build the SYSTEM message content for the LLM.
    """
    return SYSTEM_TEXT


def build_user_text(code: str, prompt: str) -> str:
    """
    Build the USER message content: the code and the change request, verbatim.
    """
    lines: List[str] = [
        "Code:",
        code,
        "",
        "Change Request:",
        prompt,
    ]
    return "\n".join(lines)


def build_retry_prompt(prompt: str) -> str:
    return f"{prompt}\n\n{RETRY_HINT}"


def build_messages(code: str, prompt: str) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": build_system_text()},
        {"role": "user", "content": build_user_text(code, prompt)},
    ]
