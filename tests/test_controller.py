# -*- coding: utf-8 -*-
from __future__ import annotations

import json

import pytest

from codeiter.app.controller import AppController
from codeiter.orchestration.code_iterator import CodeIterator, GenerationError
from codeiter.orchestration.iteration_helpers.compose_texts import RETRY_HINT
from tests.conftest import FakeLLMClient

OK = json.dumps({"modifiedCode": "new code", "explanation": "why"})


def test_integrate_copies_last_suggestion():
    ctrl = AppController(CodeIterator(FakeLLMClient(OK)))
    assert ctrl.integrate() == ""

    ctrl.iterate("old code", "change")
    assert ctrl.last_result.modified_code == "new code"
    assert ctrl.integrate() == "new code"
    assert ctrl.final_code == "new code"


def test_failure_clears_last_result_but_keeps_final_code():
    llm = FakeLLMClient(OK)
    ctrl = AppController(CodeIterator(llm))
    ctrl.iterate("old", "change")
    ctrl.integrate()

    llm.error = RuntimeError("boom")
    with pytest.raises(GenerationError):
        ctrl.iterate("old", "change again")
    assert ctrl.last_result is None
    assert ctrl.final_code == "new code"


def test_retry_uses_format_hint():
    llm = FakeLLMClient(OK)
    ctrl = AppController(CodeIterator(llm))
    ctrl.retry("old", "change")
    assert llm.calls[0]["messages"][1]["content"].endswith(RETRY_HINT)
    assert ctrl.last_result is not None


def test_is_configured_follows_client():
    assert AppController(CodeIterator(FakeLLMClient(configured=False))).is_configured is False
