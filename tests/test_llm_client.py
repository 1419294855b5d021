"""Tests for the OpenAI Responses API wrapper."""

import asyncio
from types import SimpleNamespace

import pytest
from openai import OpenAIError

from backend.app.core.llm_client import LLMClient, MissingAPIKeyError, UpstreamModelError


def test_missing_key_fails_fast():
    with pytest.raises(MissingAPIKeyError, match="Missing OPENAI_API_KEY"):
        LLMClient(api_key=None)


def test_client_has_no_automatic_retries():
    llm = LLMClient(api_key="sk-test", timeout=12.0)
    assert llm.async_client.max_retries == 0
    assert llm.async_client.timeout == 12.0


def test_respond_returns_output_text(monkeypatch):
    llm = LLMClient(api_key="sk-test", model="gpt-test")
    seen = {}

    async def fake_create(**kwargs):
        seen.update(kwargs)
        return SimpleNamespace(output_text='{"reply": "Hola"}')

    monkeypatch.setattr(llm.async_client.responses, "create", fake_create)
    segments = [{"role": "system", "content": "ctx"}]

    assert asyncio.run(llm.respond(segments)) == '{"reply": "Hola"}'
    assert seen == {"model": "gpt-test", "input": segments}


def test_respond_treats_missing_text_as_empty(monkeypatch):
    llm = LLMClient(api_key="sk-test")

    async def fake_create(**kwargs):
        return SimpleNamespace(output_text=None)

    monkeypatch.setattr(llm.async_client.responses, "create", fake_create)
    assert asyncio.run(llm.respond([])) == ""


def test_provider_error_is_reraised_verbatim(monkeypatch):
    llm = LLMClient(api_key="sk-test")

    async def fake_create(**kwargs):
        raise OpenAIError("Incorrect API key provided")

    monkeypatch.setattr(llm.async_client.responses, "create", fake_create)
    with pytest.raises(UpstreamModelError, match="^Incorrect API key provided$"):
        asyncio.run(llm.respond([]))
