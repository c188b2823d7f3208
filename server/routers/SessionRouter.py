"""Session router — user actions that mutate one browsing session.

Every mutation answers with the resulting state so the front-end can render
without a second round trip.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from server.dependencies.session import get_session, get_session_id, get_session_registry
from server.models.requests import FilterToggleRequest, FilterUpdateRequest, LanguageRequest, SearchSubmitRequest
from server.routers.ArchiveRouter import render_documents
from services.archive.SessionRegistry import SessionRegistry
from services.archive.SessionStateHolder import SessionStateHolder
from shared.models.document import CATEGORY_ALL, Category
from shared.models.search import FilterSelection

router = APIRouter(prefix="/session", tags=["Session"])


def render_document_view(session: SessionStateHolder) -> JSONResponse:
    view = session.get_document_view()
    if view is None:
        raise HTTPException(status_code=404, detail="No document is open.")
    return JSONResponse(content=view.model_dump(mode="json", by_alias=True))


@router.get("")
async def get_state(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    return JSONResponse(content=session.get_snapshot().model_dump(mode="json"))


@router.delete("")
async def end_session(
    session_id: str = Depends(get_session_id),
    registry: SessionRegistry = Depends(get_session_registry),
) -> JSONResponse:
    """End the session and discard its state; the next request with this id starts fresh."""
    ended = registry.end_session(session_id)
    return JSONResponse(content={"session_id": session_id, "ended": ended})


@router.post("/clear")
async def clear_all(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    """Clear every filter and the AI search."""
    session.clear_all()
    return render_documents(session)


################ FILTERS ##################

@router.put("/filters")
async def set_filters(body: FilterUpdateRequest, session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    session.set_filters(FilterSelection(category=body.category, year=body.year, tag=body.tag))
    return render_documents(session)


@router.post("/filters/toggle")
async def toggle_filter(body: FilterToggleRequest, session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    """Apply one chip click: category (or "All"), year or tag.

    Raises:
        HTTPException: 422 if not exactly one chip is given or the category is unknown.
    """
    given = [name for name in ("category", "year", "tag") if getattr(body, name) is not None]
    if len(given) != 1:
        raise HTTPException(status_code=422, detail="Exactly one of category, year or tag must be given.")

    if body.category is not None:
        if body.category != CATEGORY_ALL and body.category not in {c.value for c in Category}:
            raise HTTPException(status_code=422, detail=f"Unknown category '{body.category}'.")
        session.select_category(body.category)
    elif body.year is not None:
        session.toggle_year(body.year)
    else:
        session.toggle_tag(body.tag)
    return render_documents(session)


@router.delete("/filters")
async def clear_filters(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    session.clear_filters()
    return render_documents(session)


################ SEARCH ##################

@router.post("/search")
async def submit_search(body: SearchSubmitRequest, session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    """Submit a query; a blank query clears the AI search.

    Raises:
        HTTPException: 409 if a search is already pending for this session.
    """
    accepted = await session.submit_search(body.query)
    if not accepted:
        raise HTTPException(status_code=409, detail="A search is already in progress.")
    return render_documents(session)


@router.delete("/search")
async def clear_search(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    session.clear_search()
    return render_documents(session)


################ LANGUAGE ##################

@router.put("/language")
async def set_language(body: LanguageRequest, session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    session.set_language(body.language)
    return JSONResponse(content=session.get_snapshot().model_dump(mode="json"))


################ DETAIL VIEW ##################

@router.get("/document")
async def get_document_view(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    return render_document_view(session)


@router.put("/document/{doc_id}")
async def open_document(doc_id: str, session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    if session.open_document(doc_id) is None:
        raise HTTPException(status_code=404, detail=f"Document '{doc_id}' not found.")
    return render_document_view(session)


@router.delete("/document")
async def close_document(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    session.close_document()
    return JSONResponse(content=session.get_snapshot().model_dump(mode="json"))


@router.post("/document/translate")
async def translate_document(session: SessionStateHolder = Depends(get_session)) -> JSONResponse:
    """Translate the open document into the session language, or flip between original and translation."""
    if await session.translate_open_document() is None:
        raise HTTPException(status_code=404, detail="No document is open.")
    return render_document_view(session)
