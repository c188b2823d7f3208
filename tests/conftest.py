"""Pytest configuration and fixtures for archive_ai_bridge.

The remote gateway is wired to an httpx.MockTransport, so no test ever
reaches a real AI service.
"""

import logging
from collections.abc import Callable

import httpx
import pytest

from services.archive.gateway.ArchiveGateway import ArchiveGateway
from shared.clients.llm.LLMCapability import FallbackMode
from shared.clients.llm.LLMClientManager import LLMClientManager
from shared.corpus.ArchiveCorpus import ArchiveCorpus
from shared.helper.HelperConfig import HelperConfig
from shared.logging.logging_setup import ColorLogger

_AI_ENV_KEYS = (
    "LLM_ENGINE",
    "LLM_GEMINI_API_KEY",
    "LLM_GEMINI_BASE_URL",
    "LLM_OLLAMA_BASE_URL",
    "LLM_OLLAMA_API_KEY",
    "LLM_SEARCH_MODEL",
    "LLM_TRANSLATE_MODEL",
    "ARCHIVE_CORPUS_PATH",
    "ARCHIVE_OWNER_NAME",
)


@pytest.fixture(autouse=True)
def clean_ai_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without AI configuration, whatever the developer's shell exports."""
    for key in _AI_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def helper_config() -> HelperConfig:
    return HelperConfig(logger=ColorLogger(logging.getLogger("archive_ai_bridge.tests")))


@pytest.fixture
def corpus() -> ArchiveCorpus:
    """The bundled 8-document sample catalog."""
    return ArchiveCorpus.from_json_file()


@pytest.fixture
def fallback_gateway(helper_config: HelperConfig) -> ArchiveGateway:
    return ArchiveGateway(helper_config=helper_config, capability=FallbackMode(reason="tests"))


@pytest.fixture
async def make_remote_gateway(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch):
    """Factory: a Gemini-backed gateway whose HTTP traffic goes to the given handler."""
    managers: list[LLMClientManager] = []

    async def _make(handler: Callable[[httpx.Request], httpx.Response]) -> ArchiveGateway:
        monkeypatch.setenv("LLM_ENGINE", "gemini")
        monkeypatch.setenv("LLM_GEMINI_API_KEY", "test-key")
        manager = LLMClientManager(helper_config=helper_config)
        managers.append(manager)
        capability = await manager.do_boot(healthcheck=False, transport=httpx.MockTransport(handler))
        return ArchiveGateway(helper_config=helper_config, capability=capability)

    yield _make

    for manager in managers:
        await manager.close()
