from collections.abc import Sequence

from services.archive.gateway.ArchiveStrategyInterface import ArchiveStrategyInterface, TRANSLATION_UNAVAILABLE
from shared.models.document import ArchiveDocument, Language


def _matches_literally(doc: ArchiveDocument, needle: str) -> bool:
    return (
        needle in doc.title.lower()
        or needle in doc.description.lower()
        or any(needle in tag.lower() for tag in doc.tags)
    )


class LocalArchiveStrategy(ArchiveStrategyInterface):
    """Used when no AI service is available.

    Search is a case-insensitive substring match over title, description and
    tags, returned in corpus order. Translation is not possible.
    """

    def get_mode(self) -> str:
        return "fallback"

    async def do_search(self, query: str, corpus: Sequence[ArchiveDocument]) -> list[str]:
        needle = query.lower()
        match_ids = [doc.id for doc in corpus if _matches_literally(doc, needle)]
        self.logging.debug("Local search for %r matched %d document(s).", query, len(match_ids))
        return match_ids

    async def do_translate(self, text: str, target_language: Language) -> str:
        return TRANSLATION_UNAVAILABLE
