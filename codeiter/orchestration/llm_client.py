# codeiter/orchestration/llm_client.py
# -*- coding: utf-8 -*-
"""
LLMClient — thin wrapper around the text-generation provider.

Current implementation:
- Uses OpenAI Python client v1 (OpenAI() + client.chat.completions.create).
- Reads OPENAI_API_KEY via Settings (environment or .env), or an explicit
  api_key passed to __init__.
- Returns the raw text content; parsing is the caller's job.
"""

from __future__ import annotations
from typing import Dict, List, Optional

from openai import OpenAI

from codeiter.config.settings import Settings
from codeiter.utils.logging import SimpleLogger


class LLMClient:
    """
    Neutral LLM gateway.

    You give it:
      - messages: [{"role": "system", "content": "..."}, {"role": "user", "content": "..."}]
      - model_name, temperature, max_output_tokens

    It returns:
      - the generated text (string, possibly empty)
    """

    def __init__(self, api_key: Optional[str] = None) -> None:
        key = api_key or Settings.api_key()
        self._client: Optional[OpenAI] = None

        if not key:
            SimpleLogger.info(
                "LLMClient: OPENAI_API_KEY not set. Any LLM call will fail until you set it."
            )
            return

        # v1 client: hold a single instance
        self._client = OpenAI(api_key=key)
        SimpleLogger.info("LLMClient: OpenAI client initialised (v1 API).")

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    def chat(
            self,
            *,
            messages: List[Dict[str, str]],
            model_name: str,
            temperature: Optional[float],
            max_output_tokens: int,
    ) -> str:
        """
        Thin wrapper over OpenAI chat.completions.

        - Uses max_completion_tokens (new API) instead of max_tokens.
        - For gpt-5* reasoning models, we do NOT send temperature (it is unsupported).
        """
        if self._client is None:
            raise RuntimeError("LLMClient: OpenAI client is not initialised")

        kwargs: dict = {
            "model": model_name,
            "messages": messages,
            "max_completion_tokens": max_output_tokens,
        }

        # temperature is illegal for gpt-5* reasoning models, allowed for others
        if temperature is not None and not model_name.startswith("gpt-5"):
            kwargs["temperature"] = temperature

        resp = self._client.chat.completions.create(**kwargs)
        content = resp.choices[0].message.content
        return content if isinstance(content, str) else str(content or "")
