"""
Settings
========
Centralised, cached access to environment configuration.

Values come from the process environment; a `.env` file in the working
directory is loaded once on first access (it never overrides variables that
are already set).
"""
import os
from typing import Any, Dict

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_TOKENS = 4096


class Settings:
    _CACHE: Dict[str, Any] = {}
    _DOTENV_LOADED: bool = False

    @classmethod
    def _ensure_dotenv(cls) -> None:
        if not cls._DOTENV_LOADED:
            load_dotenv()
            cls._DOTENV_LOADED = True

    @classmethod
    def get(cls, key: str, default: Any | None = None) -> Any:
        cls._ensure_dotenv()
        if key not in cls._CACHE:
            cls._CACHE[key] = os.getenv(key, default)
        return cls._CACHE[key]

    @classmethod
    def clear(cls) -> None:
        cls._CACHE.clear()

    # Typed accessors

    @classmethod
    def api_key(cls) -> str:
        return (cls.get("OPENAI_API_KEY") or "").strip()

    @classmethod
    def model_name(cls) -> str:
        return cls.get("CODEITER_MODEL") or DEFAULT_MODEL

    @classmethod
    def temperature(cls) -> float:
        raw = cls.get("CODEITER_TEMPERATURE")
        try:
            return float(raw) if raw not in (None, "") else DEFAULT_TEMPERATURE
        except ValueError:
            return DEFAULT_TEMPERATURE

    @classmethod
    def max_tokens(cls) -> int:
        raw = cls.get("CODEITER_MAX_TOKENS")
        try:
            return int(raw) if raw not in (None, "") else DEFAULT_MAX_TOKENS
        except ValueError:
            return DEFAULT_MAX_TOKENS

    @classmethod
    def log_enabled(cls) -> bool:
        return str(cls.get("CODEITER_LOG_ENABLED", "true")).lower() == "true"

    @classmethod
    def log_level(cls) -> str:
        return cls.get("CODEITER_LOG_LEVEL") or "INFO"
