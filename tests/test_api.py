# -*- coding: utf-8 -*-
"""
Tests for the HTTP surface (POST /api/iterate, GET /health).
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from codeiter.app.api import (
    REQUIRED_FIELDS_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    create_app,
    get_code_iterator,
)
from codeiter.config.settings import Settings
from codeiter.orchestration.code_iterator import CONFIGURATION_ERROR_MESSAGE, CodeIterator
from tests.conftest import FakeLLMClient


def _client_for(llm: FakeLLMClient) -> TestClient:
    app = create_app()
    app.dependency_overrides[get_code_iterator] = lambda: CodeIterator(llm)
    return TestClient(app)


def test_iterate_success():
    llm = FakeLLMClient('Sure! {"modifiedCode":"x=1","explanation":"set x"} Hope this helps!')
    resp = _client_for(llm).post("/api/iterate", json={"code": "x=0", "prompt": "set x"})
    assert resp.status_code == 200
    assert resp.json() == {"modifiedCode": "x=1", "explanation": "set x"}


@pytest.mark.parametrize("body", [{}, {"code": "x"}, {"prompt": "p"}, {"code": "", "prompt": "p"}])
def test_missing_fields_are_400(body):
    llm = FakeLLMClient("{}")
    resp = _client_for(llm).post("/api/iterate", json=body)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Code and prompt are required"}
    assert llm.calls == []


def test_whitespace_only_input_is_400():
    llm = FakeLLMClient("{}")
    resp = _client_for(llm).post("/api/iterate", json={"code": "  ", "prompt": "p"})
    assert resp.status_code == 400
    assert llm.calls == []


def test_missing_credential_is_500_with_configuration_message():
    llm = FakeLLMClient("{}", configured=False)
    resp = _client_for(llm).post("/api/iterate", json={"code": "c", "prompt": "p"})
    assert resp.status_code == 500
    assert resp.json() == {"error": CONFIGURATION_ERROR_MESSAGE}


def test_generation_failure_is_500_with_generic_message():
    llm = FakeLLMClient(error=ConnectionError("network down"))
    resp = _client_for(llm).post("/api/iterate", json={"code": "c", "prompt": "p"})
    assert resp.status_code == 500
    assert resp.json() == {"error": UNEXPECTED_ERROR_MESSAGE}


def test_health_reports_configuration(monkeypatch):
    llm = FakeLLMClient()
    client = _client_for(llm)
    assert client.get("/health").json() == {"status": "ok", "configured": False}

    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    Settings.clear()
    assert client.get("/health").json() == {"status": "ok", "configured": True}


def test_health_does_not_build_an_iterator():
    app = create_app()
    built = []
    app.dependency_overrides[get_code_iterator] = lambda: built.append(1)
    assert TestClient(app).get("/health").status_code == 200
    assert built == []


@pytest.mark.parametrize(
    "payload",
    [
        {"json": {"code": 123, "prompt": "p"}},
        {"json": {"code": "c", "prompt": ["p"]}},
        {"json": ["c", "p"]},
        {"content": b"not json", "headers": {"Content-Type": "application/json"}},
    ],
)
def test_unusable_bodies_are_400_with_error_shape(payload):
    llm = FakeLLMClient("{}")
    resp = _client_for(llm).post("/api/iterate", **payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": REQUIRED_FIELDS_MESSAGE}
    assert llm.calls == []
