from abc import ABC, abstractmethod
from collections.abc import Sequence

from shared.helper.HelperConfig import HelperConfig
from shared.models.document import ArchiveDocument, Language

# Fixed replies of translate(); never empty so callers can tell them apart from real text.
TRANSLATION_UNAVAILABLE = "API Key missing. Cannot translate."
TRANSLATION_ERROR = "Error during translation."


def is_translation_sentinel(text: str) -> bool:
    """True if text is one of the fixed "no translation" replies."""
    return text in (TRANSLATION_UNAVAILABLE, TRANSLATION_ERROR)


class ArchiveStrategyInterface(ABC):
    """How semantic search and translation are carried out. Implementations must never raise."""

    def __init__(self, helper_config: HelperConfig):
        self.logging = helper_config.get_logger()
        self._helper_config = helper_config

    @abstractmethod
    def get_mode(self) -> str:
        """Returns "remote" or "fallback"."""
        pass

    @abstractmethod
    async def do_search(self, query: str, corpus: Sequence[ArchiveDocument]) -> list[str]:
        """Return the ids of the documents relevant to query, most relevant first.

        Args:
            query (str): A non-empty, trimmed query.
            corpus (Sequence[ArchiveDocument]): The documents to search.

        Returns:
            list[str]: Matching ids (possibly empty).
        """
        pass

    @abstractmethod
    async def do_translate(self, text: str, target_language: Language) -> str:
        """Return text translated to target_language, or one of the translation sentinels."""
        pass
