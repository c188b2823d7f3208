"""Tests for LLMClientManager capability selection and the LLM client payloads."""

import json

import httpx
import pytest

from shared.clients.llm.LLMCapability import FallbackMode, RemoteLLM
from shared.clients.llm.LLMClientManager import LLMClientManager
from shared.clients.llm.gemini.LLMClientGemini import LLMClientGemini
from shared.clients.llm.ollama.LLMClientOllama import LLMClientOllama
from shared.helper.HelperConfig import HelperConfig
from shared.models.search import MATCH_IDS_SCHEMA


def test_no_engine_means_fallback(helper_config: HelperConfig) -> None:
    capability = LLMClientManager(helper_config=helper_config).get_capability()
    assert isinstance(capability, FallbackMode)
    assert "LLM_ENGINE" in capability.reason
    assert capability.get_mode() == "fallback"


def test_missing_credential_means_fallback(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_ENGINE", "gemini")
    capability = LLMClientManager(helper_config=helper_config).get_capability()
    assert isinstance(capability, FallbackMode)
    assert "LLM_GEMINI_API_KEY" in capability.reason


def test_unsupported_engine_means_fallback(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_ENGINE", "doesnotexist")
    capability = LLMClientManager(helper_config=helper_config).get_capability()
    assert isinstance(capability, FallbackMode)
    assert "Unsupported LLM engine" in capability.reason


def test_configured_gemini_is_remote(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_ENGINE", "Gemini")
    monkeypatch.setenv("LLM_GEMINI_API_KEY", "secret")
    monkeypatch.setenv("LLM_SEARCH_MODEL", "gemini-custom")
    capability = LLMClientManager(helper_config=helper_config).get_capability()
    assert isinstance(capability, RemoteLLM)
    assert isinstance(capability.client, LLMClientGemini)
    assert capability.client.search_model == "gemini-custom"
    assert capability.client.translate_model == "gemini-3-flash-preview"


async def test_unreachable_service_at_boot_means_fallback(
    helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LLM_ENGINE", "gemini")
    monkeypatch.setenv("LLM_GEMINI_API_KEY", "secret")

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    manager = LLMClientManager(helper_config=helper_config)
    capability = await manager.do_boot(healthcheck=True, transport=httpx.MockTransport(handler))
    assert isinstance(capability, FallbackMode)
    assert "not reachable" in capability.reason
    await manager.close()


async def test_reachable_service_at_boot_stays_remote(
    helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("LLM_ENGINE", "gemini")
    monkeypatch.setenv("LLM_GEMINI_API_KEY", "secret")
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        return httpx.Response(200, json={"models": []})

    manager = LLMClientManager(helper_config=helper_config)
    capability = await manager.do_boot(healthcheck=True, transport=httpx.MockTransport(handler))
    assert isinstance(capability, RemoteLLM)
    assert paths == ["/v1beta/models"]
    await manager.close()


async def test_ollama_chat_payload_and_reply(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_OLLAMA_BASE_URL", "http://ollama.local:11434")
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"message": {"role": "assistant", "content": '{"matchIds": ["2"]}'}})

    client = LLMClientOllama(helper_config=helper_config)
    await client.boot(transport=httpx.MockTransport(handler))
    reply = await client.do_generate("find awards", model=client.search_model, response_schema=MATCH_IDS_SCHEMA)
    await client.close()

    assert reply == '{"matchIds": ["2"]}'
    assert str(seen[0].url) == "http://ollama.local:11434/api/chat"
    body = json.loads(seen[0].content)
    assert body["stream"] is False
    assert body["format"] == MATCH_IDS_SCHEMA
    assert body["messages"] == [{"role": "user", "content": "find awards"}]
    assert "Authorization" not in seen[0].headers


async def test_request_before_boot_fails(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_GEMINI_API_KEY", "secret")
    client = LLMClientGemini(helper_config=helper_config)
    with pytest.raises(Exception, match="not initialised"):
        await client.do_generate("hello", model=client.translate_model)
