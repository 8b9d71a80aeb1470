# -*- coding: utf-8 -*-
"""
Iteration types
===============
Pure data containers for one code-iteration round trip.

- IterationRequest: what the user sends (code + change request).
- IterationResult:  what comes back (suggested code + explanation).

Wire names follow the JSON contract the model is asked for:
`modifiedCode` and `explanation`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict

MODIFIED_CODE_KEY = "modifiedCode"
EXPLANATION_KEY = "explanation"


class IterationError(Exception):
    """Base class for every failure a code iteration can surface."""


class IterationRequestError(IterationError):
    """Raised when code or prompt is missing; no external call is made."""


@dataclass(frozen=True, slots=True)
class IterationRequest:
    code: str
    prompt: str

    def validate(self) -> "IterationRequest":
        if not (self.code or "").strip() or not (self.prompt or "").strip():
            raise IterationRequestError("Code and prompt are required")
        return self


@dataclass(frozen=True, slots=True)
class IterationResult:
    modified_code: str
    explanation: str

    def to_dict(self) -> Dict[str, str]:
        return {
            MODIFIED_CODE_KEY: self.modified_code,
            EXPLANATION_KEY: self.explanation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IterationResult":
        return cls(
            modified_code=str(data.get(MODIFIED_CODE_KEY, "")),
            explanation=str(data.get(EXPLANATION_KEY, "")),
        )
