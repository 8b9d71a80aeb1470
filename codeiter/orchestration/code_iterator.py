# -*- coding: utf-8 -*-
"""
CodeIterator — one code-change round trip.

Job:
- Take code + change request from the caller.
- Reject empty input before anything leaves the process.
- Fail fast if no OpenAI credential is configured.
- Compose SYSTEM + USER messages (compose_texts).
- Call LLMClient once, with a low temperature so the JSON shape stays stable.
- Hand the raw text to the normalizer and return a complete IterationResult.

There is no internal retry. "Try again" is an ordinary second call; see retry().
"""

from __future__ import annotations

import json
from typing import Optional

from codeiter.config.settings import Settings
from codeiter.orchestration.iteration_helpers.compose_texts import (
    build_messages,
    build_retry_prompt,
)
from codeiter.orchestration.iteration_helpers.field_normalizer import normalize_response
from codeiter.orchestration.iteration_types import (
    IterationError,
    IterationRequest,
    IterationResult,
)
from codeiter.orchestration.llm_client import LLMClient
from codeiter.utils.logging import SimpleLogger

CONFIGURATION_ERROR_MESSAGE = (
    "OpenAI API key is not configured. Please contact the administrator."
)
GENERATION_ERROR_MESSAGE = (
    "Failed to process your request. Please check your inputs and try again."
)
RAW_LOG_CHARS = 200


class ConfigurationError(IterationError):
    """Raised when the OpenAI credential is missing."""

    def __init__(self, message: str = CONFIGURATION_ERROR_MESSAGE) -> None:
        super().__init__(message)


class GenerationError(IterationError):
    """Raised when the text-generation call itself fails."""

    def __init__(self, message: str = GENERATION_ERROR_MESSAGE) -> None:
        super().__init__(message)


class CodeIterator:
    """
    Orchestrates a single iteration.

    This class stays thin:
    - It does NOT know prompt wording (compose_texts does that).
    - It does NOT know how to repair model output (field_normalizer does that).
    - It only validates, composes, calls LLMClient and normalizes.
    """

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        *,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ) -> None:
        self._llm_client = llm_client if llm_client is not None else LLMClient()
        self.model_name: str = model_name or Settings.model_name()
        self.temperature: float = Settings.temperature() if temperature is None else temperature
        self.max_output_tokens: int = max_output_tokens or Settings.max_tokens()

    @property
    def is_configured(self) -> bool:
        return bool(getattr(self._llm_client, "is_configured", False))

    def iterate(self, code: str, prompt: str) -> IterationResult:
        """
        Ask the model to apply `prompt` to `code`.

        Raises:
          - IterationRequestError if code or prompt is empty.
          - ConfigurationError if no API key is configured.
          - GenerationError if the external call fails.
        """
        request = IterationRequest(code=code, prompt=prompt).validate()

        if not self.is_configured:
            SimpleLogger.error("CodeIterator: refusing to call the LLM, API key is missing")
            raise ConfigurationError()

        messages = build_messages(request.code, request.prompt)
        SimpleLogger.debug(f"CodeIterator → LLM messages:\n{json.dumps(messages, ensure_ascii=False, indent=2)}")
        SimpleLogger.info(
            f"CodeIterator → LLM model={self.model_name} temperature={self.temperature} "
            f"code_chars={len(request.code)} prompt_chars={len(request.prompt)}"
        )

        try:
            raw_text = self._llm_client.chat(
                messages=messages,
                model_name=self.model_name,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
            )
        except Exception as exc:
            SimpleLogger.error(f"CodeIterator: LLM call failed: {exc!r}")
            raise GenerationError() from exc

        SimpleLogger.info(f"Raw AI response: {raw_text[:RAW_LOG_CHARS]}...")
        return normalize_response(raw_text)

    def retry(self, code: str, prompt: str) -> IterationResult:
        """
        Re-send the same request with a reminder about the JSON format appended.
        """
        request = IterationRequest(code=code, prompt=prompt).validate()
        SimpleLogger.info("CodeIterator: retrying with JSON-format reminder")
        return self.iterate(request.code, build_retry_prompt(request.prompt))


def iterate_code(code: str, prompt: str) -> IterationResult:
    """
    In-process entry point: a fresh CodeIterator from Settings, one call.
    """
    return CodeIterator().iterate(code, prompt)
