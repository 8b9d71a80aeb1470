# -*- coding: utf-8 -*-
"""
Shared fixtures: a fake LLM client and a clean configuration per test.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pytest

from codeiter.config.settings import Settings
from codeiter.utils.logging import SimpleLogger

_ENV_KEYS = (
    "OPENAI_API_KEY",
    "CODEITER_MODEL",
    "CODEITER_TEMPERATURE",
    "CODEITER_MAX_TOKENS",
    "CODEITER_LOG_ENABLED",
    "CODEITER_LOG_LEVEL",
)


class FakeLLMClient:
    """Stands in for LLMClient; records every chat() call."""

    def __init__(
        self,
        response: str = "",
        *,
        error: Optional[Exception] = None,
        configured: bool = True,
    ) -> None:
        self.response = response
        self.error = error
        self.is_configured = configured
        self.calls: List[Dict[str, Any]] = []

    def chat(self, **kwargs: Any) -> str:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    # .env must not leak into tests
    monkeypatch.setattr(Settings, "_DOTENV_LOADED", True)
    Settings.clear()
    enabled, min_level = SimpleLogger._enabled, SimpleLogger._min_level
    yield
    Settings.clear()
    SimpleLogger._enabled, SimpleLogger._min_level = enabled, min_level


@pytest.fixture
def fake_client():
    return FakeLLMClient()
