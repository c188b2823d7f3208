"""HTTP tests for the archive API running in fallback mode (no LLM configured)."""

import pytest
from fastapi.testclient import TestClient

from services.archive.gateway.ArchiveStrategyInterface import TRANSLATION_UNAVAILABLE
from server.api_server import app


@pytest.fixture
def client() -> TestClient:
    """TestClient with the lifespan run; no LLM_ENGINE means fallback mode."""
    with TestClient(app) as test_client:
        yield test_client


def _ids(response) -> list[str]:
    return [doc["id"] for doc in response.json()["results"]]


def test_health_reports_fallback_mode(client: TestClient) -> None:
    body = client.get("/health").json()
    assert body["status"] == "ok"
    assert body["ai_mode"] == "fallback"
    assert body["documents"] == 8


def test_facets(client: TestClient) -> None:
    body = client.get("/facets").json()
    assert body["categories"][0] == "All"
    assert "Professional Experience" in body["categories"]
    assert body["years"][0] == 2012
    assert body["tags"] == sorted(body["tags"])


def test_documents_use_catalog_keys(client: TestClient) -> None:
    response = client.get("/documents")
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 8
    first = body["results"][0]
    assert first["originalTitle"] == "Título de Doctorado en Biología"
    assert first["thumbnailUrl"].startswith("https://")
    assert first["date"] == "1995-06-15"
    assert body["session"]["phase"] == "browsing"


def test_category_filter(client: TestClient) -> None:
    response = client.put("/session/filters", json={"category": "Education"})
    assert _ids(response) == ["1", "6"]
    assert client.put("/session/filters", json={"category": "education"}).status_code == 422


def test_chip_toggle(client: TestClient) -> None:
    assert _ids(client.post("/session/filters/toggle", json={"tag": "degree"})) == ["1", "6"]
    assert _ids(client.post("/session/filters/toggle", json={"year": 1988})) == ["6"]
    assert len(_ids(client.post("/session/filters/toggle", json={"tag": "degree"}))) == 1
    assert client.post("/session/filters/toggle", json={"category": "Cooking"}).status_code == 422
    assert client.post("/session/filters/toggle", json={"tag": "a", "year": 1990}).status_code == 422
    assert client.post("/session/filters/toggle", json={"tag": ""}).status_code == 422
    assert client.post("/session/filters/toggle", json={"tag": "   "}).status_code == 422
    assert client.put("/session/filters", json={"tag": ""}).status_code == 422
    assert len(_ids(client.delete("/session/filters"))) == 8


def test_fallback_search_and_clear(client: TestClient) -> None:
    response = client.post("/session/search", json={"query": "Arborist"})
    assert _ids(response) == ["8"]
    assert response.json()["session"]["phase"] == "ai_search_active"

    assert client.post("/session/search", json={"query": "school"}).json()["results"] == []

    response = client.delete("/session/search")
    assert len(_ids(response)) == 8
    assert response.json()["session"]["query"] == ""


def test_sessions_are_isolated(client: TestClient) -> None:
    client.post("/session/search", json={"query": "arborist"}, headers={"X-Session-Id": "alice"})
    assert _ids(client.get("/documents", headers={"X-Session-Id": "alice"})) == ["8"]
    assert len(_ids(client.get("/documents", headers={"X-Session-Id": "bob"}))) == 8


def test_clear_all(client: TestClient) -> None:
    client.post("/session/search", json={"query": "university"})
    client.put("/session/filters", json={"year": 1995})
    response = client.post("/session/clear")
    assert _ids(response) == ["1", "2", "3", "4", "5", "6", "7", "8"]
    assert response.json()["session"]["has_active_constraints"] is False


def test_ending_sessions_releases_them(client: TestClient) -> None:
    registry = client.app.state.session_registry
    for n in range(20):
        headers = {"X-Session-Id": f"visitor-{n}"}
        client.post("/session/search", json={"query": "arborist"}, headers=headers)
        assert client.delete("/session", headers=headers).json() == {"session_id": f"visitor-{n}", "ended": True}
    assert len(registry) == 0

    assert client.delete("/session", headers={"X-Session-Id": "visitor-0"}).json()["ended"] is False
    body = client.get("/documents", headers={"X-Session-Id": "visitor-0"}).json()
    assert body["total"] == 8
    assert body["session"]["query"] == ""


def test_document_view_and_unavailable_translation(client: TestClient) -> None:
    assert client.get("/session/document").status_code == 404
    assert client.put("/session/document/999").status_code == 404

    response = client.put("/session/document/2")
    assert response.status_code == 200
    assert response.json()["document"]["id"] == "2"

    client.put("/session/language", json={"language": "ES"})
    view = client.post("/session/document/translate").json()
    assert view["error"] == TRANSLATION_UNAVAILABLE
    assert view["is_translated"] is False
    assert view["show_original"] is True
    assert view["language"] == "ES"

    snapshot = client.delete("/session/document").json()
    assert snapshot["open_document_id"] is None
    assert client.post("/session/document/translate").status_code == 404
