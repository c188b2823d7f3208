"""Per-session state: filters, query and AI search phase, UI language, open document.

The query text and the AI match list only ever change together through the
search transitions below, so a stale match list can never outlive the query
that produced it:

    BROWSING          --submit(q)-->  AI_SEARCH_PENDING
    AI_SEARCH_PENDING --result----->  AI_SEARCH_ACTIVE
    AI_SEARCH_ACTIVE  --submit(q)-->  AI_SEARCH_PENDING
    AI_SEARCH_ACTIVE  --clear------>  BROWSING
    any               --submit("")->  BROWSING

Filters and the open document are orthogonal to the search phase.
"""

import asyncio

from services.archive.FilterComposer import compose
from services.archive.gateway.ArchiveGateway import ArchiveGateway
from services.archive.gateway.ArchiveStrategyInterface import is_translation_sentinel
from shared.corpus.ArchiveCorpus import ArchiveCorpus
from shared.helper.HelperConfig import HelperConfig
from shared.models.document import ArchiveDocument, CATEGORY_ALL, Category, Language
from shared.models.search import DocumentView, FilterSelection, SearchPhase, SessionSnapshot, TranslationView


class SessionStateHolder:
    """Owns one user's browsing session and mediates between user actions, the gateway and the composer."""

    def __init__(
        self,
        helper_config: HelperConfig,
        corpus: ArchiveCorpus,
        gateway: ArchiveGateway,
        session_id: str = "default",
    ) -> None:
        self.logging = helper_config.get_logger()
        self.session_id = session_id
        self._corpus = corpus
        self._gateway = gateway

        # search
        self._phase = SearchPhase.BROWSING
        self._query = ""
        self._ai_match_ids: list[str] | None = None
        self._search_generation = 0

        # filters and display
        self._filters = FilterSelection()
        self._language = Language.EN

        # detail view
        self._open_document: ArchiveDocument | None = None
        self._translation = TranslationView()
        self._document_generation = 0

    ##########################################
    ################ GETTER ##################
    ##########################################

    @property
    def phase(self) -> SearchPhase:
        return self._phase

    @property
    def query(self) -> str:
        return self._query

    @property
    def ai_match_ids(self) -> list[str] | None:
        return list(self._ai_match_ids) if self._ai_match_ids is not None else None

    @property
    def filters(self) -> FilterSelection:
        return self._filters

    @property
    def language(self) -> Language:
        return self._language

    @property
    def is_searching(self) -> bool:
        return self._phase is SearchPhase.AI_SEARCH_PENDING

    @property
    def open_document(self) -> ArchiveDocument | None:
        return self._open_document

    def has_active_constraints(self) -> bool:
        """True if any filter chip or an AI search currently narrows the results."""
        return not self._filters.is_empty() or self._ai_match_ids is not None

    def get_results(self) -> list[ArchiveDocument]:
        """The visible, ordered result list for the current state."""
        return compose(self._corpus, self._ai_match_ids, self._filters)

    def get_snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self._phase,
            query=self._query,
            ai_match_ids=self.ai_match_ids,
            filters=self._filters,
            language=self._language,
            is_searching=self.is_searching,
            has_active_constraints=self.has_active_constraints(),
            open_document_id=self._open_document.id if self._open_document else None,
        )

    ##########################################
    ################ SEARCH ##################
    ##########################################

    async def submit_search(self, query: str) -> bool:
        """Submit a query.

        A blank query returns the session to BROWSING without calling the
        gateway. A submission while another search is pending is rejected.
        The query text is stored only together with the search it starts.

        Args:
            query (str): The query to submit.

        Returns:
            bool: False if the submission was rejected because a search is pending.
        """
        text = query.strip()
        if not text:
            self._enter_browsing()
            return True

        if self._phase is SearchPhase.AI_SEARCH_PENDING:
            self.logging.warning("Session %s: search already in progress, submission ignored.", self.session_id)
            return False

        previous = (self._phase, self._query, self._ai_match_ids)
        self._phase = SearchPhase.AI_SEARCH_PENDING
        self._query = text
        self._search_generation += 1
        generation = self._search_generation

        try:
            match_ids = await self._gateway.search(text, self._corpus)
        except Exception:
            if generation == self._search_generation:
                self._phase, self._query, self._ai_match_ids = previous
            raise

        if generation != self._search_generation:
            # cleared while in flight
            self.logging.debug("Session %s: discarding result of a cleared search.", self.session_id)
            return True

        if match_ids is None:
            self._enter_browsing()
            return True

        self._ai_match_ids = list(match_ids)
        self._phase = SearchPhase.AI_SEARCH_ACTIVE
        self.logging.info(
            "Session %s: search %r active with %d match id(s).",
            self.session_id,
            self._query,
            len(self._ai_match_ids),
        )
        return True

    def clear_search(self) -> None:
        """Drop the AI match list and the query text together."""
        self._enter_browsing()

    def _enter_browsing(self) -> None:
        if self._phase is SearchPhase.AI_SEARCH_PENDING:
            self._search_generation += 1
        self._phase = SearchPhase.BROWSING
        self._query = ""
        self._ai_match_ids = None

    ##########################################
    ################ FILTERS #################
    ##########################################

    def set_filters(self, filters: FilterSelection) -> None:
        self._filters = filters

    def select_category(self, category: Category | str | None) -> None:
        """Pick a category chip; "All" (or None) clears the category filter."""
        if category is None or category == CATEGORY_ALL:
            self._filters = self._filters.model_copy(update={"category": None})
            return
        self._filters = self._filters.model_copy(update={"category": Category(category)})

    def toggle_year(self, year: int) -> None:
        """Pick a year chip; picking the selected year again clears it."""
        new_year = None if self._filters.year == year else year
        self._filters = self._filters.model_copy(update={"year": new_year})

    def toggle_tag(self, tag: str) -> None:
        """Pick a tag chip; picking the selected tag again clears it."""
        new_tag = None if self._filters.tag == tag else tag
        self._filters = self._filters.model_copy(update={"tag": new_tag})

    def clear_filters(self) -> None:
        self._filters = FilterSelection()

    def clear_all(self) -> None:
        """Clear every filter and the AI search; results return to corpus order."""
        self.clear_filters()
        self.clear_search()

    def set_language(self, language: Language) -> None:
        self._language = language

    ##########################################
    ############# DETAIL VIEW ################
    ##########################################

    def open_document(self, doc_id: str) -> ArchiveDocument | None:
        """Open a document; any translation of the previously open document is discarded.

        Returns:
            ArchiveDocument | None: The opened document, or None if the id is unknown.
        """
        document = self._corpus.get_document(doc_id)
        if document is None:
            return None
        self._open_document = document
        self._reset_translation()
        return document

    def close_document(self) -> None:
        self._open_document = None
        self._reset_translation()

    def _reset_translation(self) -> None:
        self._translation = TranslationView()
        self._document_generation += 1

    def get_document_view(self) -> DocumentView | None:
        document = self._open_document
        if document is None:
            return None
        view = self._translation
        show_translated = view.is_translated() and not view.show_original
        return DocumentView(
            document=document,
            language=self._language,
            description=view.translated_description if show_translated else document.description,
            content=view.translated_content if show_translated else document.content,
            show_original=not show_translated,
            is_translated=view.is_translated(),
            is_translating=view.is_translating,
            error=view.error,
        )

    async def translate_open_document(self) -> DocumentView | None:
        """Translate the open document's description and body into the session language.

        Both texts are translated concurrently and published together: if
        either comes back as a sentinel, nothing is published and the original
        view stays, with the sentinel reported as the error. Once translated,
        further calls flip between the original and the translation.

        Returns:
            DocumentView | None: The resulting view, or None if no document is open.
        """
        document = self._open_document
        if document is None:
            return None

        view = self._translation
        if view.is_translating:
            return self.get_document_view()
        if view.is_translated():
            self._translation = view.model_copy(update={"show_original": not view.show_original})
            return self.get_document_view()

        self._translation = view.model_copy(update={"is_translating": True, "error": None})
        generation = self._document_generation
        language = self._language

        try:
            description, content = await asyncio.gather(
                self._gateway.translate(document.description, language),
                self._gateway.translate(document.content, language),
            )
        except Exception:
            if generation == self._document_generation:
                self._translation = TranslationView()
            raise

        if generation != self._document_generation:
            # document switched or closed while translating
            return self.get_document_view()

        failures = [text for text in (description, content) if is_translation_sentinel(text)]
        if failures:
            self.logging.warning(
                "Session %s: translation of document %s failed: %s", self.session_id, document.id, failures[0]
            )
            self._translation = TranslationView(error=failures[0])
        else:
            self._translation = TranslationView(
                translated_description=description,
                translated_content=content,
                show_original=False,
            )
        return self.get_document_view()
