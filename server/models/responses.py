from pydantic import BaseModel

from shared.models.document import ArchiveDocument
from shared.models.search import SessionSnapshot


class DocumentListResponse(BaseModel):
    results: list[ArchiveDocument]
    total: int
    session: SessionSnapshot


class FacetsResponse(BaseModel):
    categories: list[str]
    years: list[int]
    tags: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    ai_mode: str
    documents: int
