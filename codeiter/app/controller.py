# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Optional

from codeiter.config.settings import Settings
from codeiter.orchestration.code_iterator import CodeIterator
from codeiter.orchestration.iteration_types import IterationResult
from codeiter.orchestration.llm_client import LLMClient
from codeiter.utils.logging import SimpleLogger


class AppController:
    def __init__(self, code_iterator: Optional[CodeIterator] = None) -> None:
        """
        Central app controller, one per UI session.

        - Creates a shared LLMClient + CodeIterator (unless one is injected).
        - Remembers the last suggestion and the integrated "final" code for the
          page to render. Nothing is persisted beyond the session.
        """
        SimpleLogger.configure(enabled=Settings.log_enabled(), level=Settings.log_level())
        self.code_iterator = code_iterator or CodeIterator(llm_client=LLMClient())
        self.last_result: Optional[IterationResult] = None
        self.final_code: str = ""

    @property
    def is_configured(self) -> bool:
        return self.code_iterator.is_configured

    def iterate(self, code: str, prompt: str) -> IterationResult:
        """
        Run one iteration. On failure the previous suggestion is cleared and
        the error propagates to the page.
        """
        self.last_result = None
        self.last_result = self.code_iterator.iterate(code, prompt)
        return self.last_result

    def retry(self, code: str, prompt: str) -> IterationResult:
        self.last_result = None
        self.last_result = self.code_iterator.retry(code, prompt)
        return self.last_result

    def integrate(self) -> str:
        """
        Accept the current suggestion as the final code.
        Does nothing when there is no suggestion yet.
        """
        if self.last_result is not None:
            self.final_code = self.last_result.modified_code
        return self.final_code
