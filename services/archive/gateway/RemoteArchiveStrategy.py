"""Semantic search and translation delegated to the configured LLM.

Both operations swallow every failure at this boundary: a failed or
malformed search reply becomes "no matches", a failed translation becomes
TRANSLATION_ERROR.
"""

import json
from collections.abc import Sequence

from pydantic import ValidationError

from services.archive.gateway.ArchiveStrategyInterface import ArchiveStrategyInterface, TRANSLATION_ERROR
from shared.clients.llm.LLMClientInterface import LLMClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.document import ArchiveDocument, Language
from shared.models.search import DocumentSummary, MATCH_IDS_SCHEMA, MatchIdsResponse

SEARCH_PROMPT = """
You are an intelligent archivist for {owner}'s CV.
User Query: "{query}"

Here is the document database:
{summaries}

Return a JSON object containing an array called "matchIds".
Include IDs of documents that are semantically relevant to the query.
If the user asks for "awards from the 90s", find items with category "Awards" and dates in the 1990s.
Be smart about synonyms (e.g., "school" matches "Education").
"""

TRANSLATE_PROMPT = """Translate the following text to {language}.
Maintain professional tone suitable for a CV/Academic Archive.

Text: "{text}"
"""


def _strip_code_fence(raw: str) -> str:
    """Remove a surrounding ```json ... ``` fence some models add to JSON replies."""
    text = raw.strip()
    if text.startswith("```") and text.endswith("```"):
        text = text[3:-3].strip()
        if text.lower().startswith("json"):
            text = text[4:]
    return text.strip()


def parse_match_ids(raw: str | None) -> list[str]:
    """Parse a {"matchIds": [...]} reply.

    Args:
        raw (str | None): The model's reply text.

    Returns:
        list[str]: The ids in reply order, or [] if the reply is missing or malformed.
    """
    if not raw or not raw.strip():
        return []
    try:
        return MatchIdsResponse.model_validate_json(_strip_code_fence(raw)).match_ids
    except ValidationError:
        return []


class RemoteArchiveStrategy(ArchiveStrategyInterface):
    def __init__(self, helper_config: HelperConfig, llm_client: LLMClientInterface):
        super().__init__(helper_config=helper_config)
        self._llm_client = llm_client
        self.owner_name = helper_config.get_string_val("ARCHIVE_OWNER_NAME", default="Alicia Chacalo Hilú")

    def get_mode(self) -> str:
        return "remote"

    ##########################################
    ############### PROMPTS ##################
    ##########################################

    def build_search_prompt(self, query: str, corpus: Sequence[ArchiveDocument]) -> str:
        summaries = [DocumentSummary(id=doc.id, txt=doc.get_summary_text()).model_dump() for doc in corpus]
        return SEARCH_PROMPT.format(
            owner=self.owner_name,
            query=query,
            summaries=json.dumps(summaries, ensure_ascii=False),
        )

    def build_translate_prompt(self, text: str, target_language: Language) -> str:
        return TRANSLATE_PROMPT.format(language=target_language.display_name(), text=text)

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def do_search(self, query: str, corpus: Sequence[ArchiveDocument]) -> list[str]:
        prompt = self.build_search_prompt(query, corpus)
        try:
            raw = await self._llm_client.do_generate(
                prompt=prompt,
                model=self._llm_client.search_model,
                response_schema=MATCH_IDS_SCHEMA,
            )
        except Exception as e:
            self.logging.error("AI search for %r failed: %s", query, e)
            return []

        match_ids = parse_match_ids(raw)
        if not match_ids and raw and raw.strip():
            self.logging.debug("AI search reply yielded no ids: %s", raw[:200])
        self.logging.info("AI search for %r returned %d id(s).", query, len(match_ids))
        return match_ids

    async def do_translate(self, text: str, target_language: Language) -> str:
        prompt = self.build_translate_prompt(text, target_language)
        try:
            translated = await self._llm_client.do_generate(prompt=prompt, model=self._llm_client.translate_model)
        except Exception as e:
            self.logging.error("Translation to %s failed: %s", target_language.value, e)
            return TRANSLATION_ERROR

        if not translated or not translated.strip():
            self.logging.error("Translation to %s returned an empty reply.", target_language.value)
            return TRANSLATION_ERROR
        return translated.strip()
