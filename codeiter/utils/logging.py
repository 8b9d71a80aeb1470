# -*- coding: utf-8 -*-
"""
SimpleLogger — tiny logging facade for codeiter.

- One class with classmethods; any module can call SimpleLogger.info(...)
  without wiring handlers first.
- Lines go to stderr, because the CLI prints its JSON result on stdout.
- A minimum level hides DEBUG noise unless asked for (CODEITER_LOG_LEVEL).
"""

from __future__ import annotations
import sys
import datetime
from typing import ClassVar, Dict

_LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class SimpleLogger:
    """
    Usage:
        SimpleLogger.configure(enabled=True, level="DEBUG")
        SimpleLogger.info("message")
    """

    _enabled: ClassVar[bool] = True
    _min_level: ClassVar[int] = _LEVELS["INFO"]
    _prefix: ClassVar[str] = "codeiter"

    @classmethod
    def _log(cls, level: str, msg: str) -> None:
        if not cls._enabled or _LEVELS[level] < cls._min_level:
            return
        now = datetime.datetime.now().strftime("%H:%M:%S")
        print(f"{cls._prefix} | {level:5s} | {now} | {msg}", file=sys.stderr, flush=True)

    @classmethod
    def debug(cls, msg: str) -> None:
        cls._log("DEBUG", msg)

    @classmethod
    def info(cls, msg: str) -> None:
        cls._log("INFO", msg)

    @classmethod
    def warning(cls, msg: str) -> None:
        cls._log("WARN", msg)

    @classmethod
    def error(cls, msg: str) -> None:
        cls._log("ERROR", msg)

    @classmethod
    def configure(cls, *, enabled: bool = True, level: str = "INFO") -> None:
        cls._enabled = enabled
        name = (level or "INFO").upper()
        if name == "WARNING":
            name = "WARN"
        cls._min_level = _LEVELS.get(name, _LEVELS["INFO"])

    @classmethod
    def set_enabled(cls, enabled: bool) -> None:
        cls._enabled = enabled

    @classmethod
    def is_enabled(cls) -> bool:
        return cls._enabled
