# -*- coding: utf-8 -*-
"""
codeiter — send code plus a change request to an LLM, get back suggested code
and an explanation, even when the model's JSON is broken.
"""

from codeiter.orchestration.code_iterator import (
    CodeIterator,
    ConfigurationError,
    GenerationError,
    iterate_code,
)
from codeiter.orchestration.iteration_helpers.field_normalizer import normalize_response
from codeiter.orchestration.iteration_types import (
    IterationError,
    IterationRequest,
    IterationRequestError,
    IterationResult,
)

__version__ = "0.1.0"

__all__ = [
    "CodeIterator",
    "ConfigurationError",
    "GenerationError",
    "IterationError",
    "IterationRequest",
    "IterationRequestError",
    "IterationResult",
    "iterate_code",
    "normalize_response",
]
