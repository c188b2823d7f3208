from collections.abc import Sequence

from services.archive.gateway.ArchiveStrategyInterface import ArchiveStrategyInterface
from services.archive.gateway.LocalArchiveStrategy import LocalArchiveStrategy
from services.archive.gateway.RemoteArchiveStrategy import RemoteArchiveStrategy
from shared.clients.llm.LLMCapability import FallbackMode, LLMCapability, RemoteLLM
from shared.helper.HelperConfig import HelperConfig
from shared.models.document import ArchiveDocument, Language


class ArchiveGateway:
    """Single entry point for semantic search and translation.

    The strategy is chosen once, from the injected capability: a RemoteLLM
    gets the remote strategy, a FallbackMode the local one. The gateway holds
    no state across calls.
    """

    def __init__(self, helper_config: HelperConfig, capability: LLMCapability):
        self.logging = helper_config.get_logger()
        self._strategy = self._select_strategy(helper_config, capability)
        self.logging.info("Archive gateway running in '%s' mode.", self._strategy.get_mode())

    @staticmethod
    def _select_strategy(helper_config: HelperConfig, capability: LLMCapability) -> ArchiveStrategyInterface:
        if isinstance(capability, RemoteLLM):
            return RemoteArchiveStrategy(helper_config=helper_config, llm_client=capability.client)
        if isinstance(capability, FallbackMode):
            return LocalArchiveStrategy(helper_config=helper_config)
        raise ValueError(f"Unknown LLM capability: {capability!r}")

    def get_mode(self) -> str:
        return self._strategy.get_mode()

    async def search(self, query: str, corpus: Sequence[ArchiveDocument]) -> list[str] | None:
        """Run a semantic (or fallback) search.

        Args:
            query (str): The user query. Callers must not pass a blank query.
            corpus (Sequence[ArchiveDocument]): The documents to search.

        Returns:
            list[str] | None: Ranked ids, or None ("no AI constraint") for a blank query.
        """
        query = query.strip()
        if not query:
            self.logging.warning("search() called with a blank query; treating as no search.")
            return None
        return await self._strategy.do_search(query, corpus)

    async def translate(self, text: str, target_language: Language) -> str:
        """Translate text, returning TRANSLATION_UNAVAILABLE or TRANSLATION_ERROR instead of raising."""
        return await self._strategy.do_translate(text, target_language)
