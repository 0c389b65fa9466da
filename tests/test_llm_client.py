import json

import httpx
import pytest

from recipease.app.core.config import get_settings
from recipease.app.services import llm_client


def chat_response(content: str) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


@pytest.mark.asyncio
async def test_complete_sends_chat_payload(mock_http, settings):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return chat_response("```json\n{}\n```")

    mock_http(handler)
    content = await llm_client.complete("prompt text", system_prompt="system text")

    assert content == "```json\n{}\n```"
    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == "https://llm.test/v1/chat/completions"
    assert request.headers["authorization"] == "Bearer test-key"
    body = json.loads(request.content)
    assert body["model"] == "primary-model"
    assert body["temperature"] == settings.llm_temperature
    assert body["max_tokens"] == settings.llm_max_tokens
    assert [m["role"] for m in body["messages"]] == ["system", "user"]
    assert body["messages"][1]["content"] == "prompt text"


@pytest.mark.asyncio
async def test_rate_limit_falls_back_to_next_model(mock_http):
    models = []

    def handler(request):
        model = json.loads(request.content)["model"]
        models.append(model)
        if model == "primary-model":
            return httpx.Response(429, json={"error": {"message": "slow down"}})
        return chat_response("from backup")

    mock_http(handler)
    assert await llm_client.complete("p", system_prompt="s") == "from backup"
    assert models == ["primary-model", "backup-model"]


@pytest.mark.asyncio
async def test_all_models_rate_limited(mock_http):
    mock_http(lambda request: httpx.Response(429))
    with pytest.raises(llm_client.AllModelsExhaustedError) as excinfo:
        await llm_client.complete("p", system_prompt="s")
    assert excinfo.value.models == ["primary-model", "backup-model"]


@pytest.mark.asyncio
async def test_auth_failure_is_not_retried(mock_http):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(401, json={"error": {"message": "bad key"}})

    mock_http(handler)
    with pytest.raises(llm_client.LLMAuthError):
        await llm_client.complete("p", system_prompt="s")
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_server_error_is_fatal(mock_http):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, text="boom")

    mock_http(handler)
    with pytest.raises(llm_client.LLMUnavailableError):
        await llm_client.complete("p", system_prompt="s")
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_missing_content_is_unavailable(mock_http):
    mock_http(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(llm_client.LLMUnavailableError):
        await llm_client.complete("p", system_prompt="s")


@pytest.mark.asyncio
async def test_missing_api_key_fails_before_network(mock_http, monkeypatch):
    monkeypatch.delenv("LLM_API_KEY")
    get_settings.cache_clear()
    calls = []
    mock_http(lambda request: calls.append(request) or chat_response("x"))

    with pytest.raises(llm_client.LLMConfigurationError):
        await llm_client.complete("p", system_prompt="s")
    assert calls == []


def test_should_fallback_only_for_rate_limits():
    assert llm_client.should_fallback(llm_client.LLMRateLimitError("429"))
    assert not llm_client.should_fallback(llm_client.LLMAuthError("401"))
    assert not llm_client.should_fallback(llm_client.LLMUnavailableError("500"))
    assert not llm_client.should_fallback(ValueError("other"))
