"""Pydantic models for filters, AI search payloads and session views."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from shared.models.document import ArchiveDocument, Category, Language


class FilterSelection(BaseModel):
    """Independent categorical filters. None means "no constraint"."""

    model_config = ConfigDict(frozen=True)

    category: Category | None = None
    year: int | None = None
    tag: str | None = None

    def is_empty(self) -> bool:
        return self.category is None and self.year is None and self.tag is None


class SearchPhase(str, Enum):
    BROWSING = "browsing"
    AI_SEARCH_PENDING = "ai_search_pending"
    AI_SEARCH_ACTIVE = "ai_search_active"


class DocumentSummary(BaseModel):
    """Lightweight per-document entry sent to the AI service to bound payload size."""

    id: str
    txt: str


class MatchIdsResponse(BaseModel):
    """Structured reply expected from the semantic search model."""

    model_config = ConfigDict(populate_by_name=True)

    match_ids: list[str] = Field(default_factory=list, alias="matchIds")


# JSON schema handed to the model to constrain its output to MatchIdsResponse
MATCH_IDS_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "matchIds": {
            "type": "array",
            "items": {"type": "string"},
        },
    },
    "required": ["matchIds"],
}


class TranslationView(BaseModel):
    """Translation state of the currently open document."""

    translated_description: str | None = None
    translated_content: str | None = None
    show_original: bool = True
    is_translating: bool = False
    error: str | None = None

    def is_translated(self) -> bool:
        return self.translated_description is not None and self.translated_content is not None


class DocumentView(BaseModel):
    """What the detail view displays for the open document."""

    document: ArchiveDocument
    language: Language
    description: str
    content: str
    show_original: bool
    is_translated: bool
    is_translating: bool
    error: str | None = None


class SessionSnapshot(BaseModel):
    """Read-only view of a session for the presentation layer."""

    phase: SearchPhase
    query: str
    ai_match_ids: list[str] | None
    filters: FilterSelection
    language: Language
    is_searching: bool
    has_active_constraints: bool
    open_document_id: str | None = None
