"""Catalog router — health, facet options and the session's visible document list."""

import os

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from server.dependencies.session import get_session
from server.models.responses import DocumentListResponse, FacetsResponse, HealthResponse
from services.archive.SessionStateHolder import SessionStateHolder
from shared.models.document import CATEGORY_ALL, Category

router = APIRouter(tags=["Archive"])


def render_documents(session: SessionStateHolder) -> JSONResponse:
    """Serialise the session's current results (camelCase document keys, as in the catalog)."""
    results = session.get_results()
    payload = DocumentListResponse(results=results, total=len(results), session=session.get_snapshot())
    return JSONResponse(content=payload.model_dump(mode="json", by_alias=True))


@router.get("/health")
async def health(request: Request) -> JSONResponse:
    """Report version, AI mode ("remote" or "fallback") and corpus size."""
    payload = HealthResponse(
        status="ok",
        version=os.getenv("APP_VERSION", "unknown"),
        ai_mode=request.app.state.gateway.get_mode(),
        documents=len(request.app.state.corpus),
    )
    return JSONResponse(content=payload.model_dump())


@router.get("/facets")
async def facets(request: Request) -> JSONResponse:
    """Chip options: every category (prefixed with "All"), observed years and tags."""
    corpus = request.app.state.corpus
    payload = FacetsResponse(
        categories=[CATEGORY_ALL, *[category.value for category in Category]],
        years=corpus.get_years(),
        tags=corpus.get_tags(),
    )
    return JSONResponse(content=payload.model_dump())


@router.get("/documents")
async def list_documents(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    """Return the filtered, ordered document list for the caller's session."""
    return render_documents(session)
