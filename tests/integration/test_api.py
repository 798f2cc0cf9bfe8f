"""
API tests against the in-memory backend.
"""

from catalog_search.api.dependencies import get_search_backend
from catalog_search.search import SearchBackendError
from catalog_search.search.backends import InMemorySearchBackend


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_status_reports_catalog_and_backend(client):
    data = client.get("/status").json()
    assert data["status"] == "healthy"
    assert data["components"]["search_backend"]["name"] == "memory"
    assert data["components"]["synonym_catalog"]["groups"] > 0


def test_search(client):
    response = client.post("/api/v1/search", json={"query": "leche", "limit": 2})
    assert response.status_code == 200

    data = response.json()
    assert len(data["ids"]) == 2
    assert data["total"] >= 4
    assert data["page"] == 1
    assert data["expression"] == "(leche:* | milk:* | lacteo:* | lactea:*)"
    assert response.headers["X-Request-ID"]


def test_search_pages_are_consistent(client):
    both = client.post("/api/v1/search", json={"query": "leche", "limit": 2}).json()
    first = client.post("/api/v1/search", json={"query": "leche", "limit": 1}).json()
    second = client.post("/api/v1/search", json={"query": "leche", "limit": 1, "offset": 1}).json()

    assert first["ids"] + second["ids"] == both["ids"]
    assert second["page"] == 2


def test_search_default_limit(client):
    data = client.post("/api/v1/search", json={"query": "queso"}).json()
    assert data["limit"] == 20


def test_search_limit_above_maximum(client):
    response = client.post("/api/v1/search", json={"query": "leche", "limit": 1000})
    assert response.status_code == 400
    assert response.json()["error"]["type"] == "InvalidRequestError"


def test_search_validation_error(client):
    response = client.post("/api/v1/search", json={"query": "leche", "offset": -1})
    assert response.status_code == 422
    assert response.json()["error"]["type"] == "ValidationError"


def test_search_backend_failure(app):
    """Test that a failing arm surfaces as a 502 error envelope."""
    from fastapi.testclient import TestClient

    class FailingBackend(InMemorySearchBackend):
        async def fuzzy_match(self, raw_query, visibility):
            raise SearchBackendError("database is down", arm="fuzzy")

    app.dependency_overrides[get_search_backend] = lambda: FailingBackend([])
    with TestClient(app) as client:
        response = client.post("/api/v1/search", json={"query": "leche"})

    assert response.status_code == 502
    error = response.json()["error"]
    assert error["type"] == "SearchError"
    assert error["details"]["arm"] == "fuzzy"


def test_compile(client):
    data = client.get("/api/v1/search/compile", params={"query": "con leche s/lactosa"}).json()
    assert data["tokens"] == ["con", "leche", "sin", "lactosa"]
    assert [b["kind"] for b in data["buckets"]] == ["synonym", "composed"]
    assert data["expression"].startswith("(leche:*")


def test_search_units(client):
    response = client.get("/api/v1/search/units", params={"value": "queso"})
    assert response.status_code == 200
    facets = response.json()
    assert facets == [{"label": "16 OZ", "value": "16 OZ/1 LB", "count": 2}]


def test_search_units_requires_value(client):
    response = client.get("/api/v1/search/units", params={"value": "  "})
    assert response.status_code == 400
    assert client.get("/api/v1/search/units").status_code == 400


def test_search_groups(client):
    response = client.get("/api/v1/search/groups", params={"value": "queso"})
    assert response.status_code == 200

    groups = response.json()
    assert [g["human_id"] for g in groups] == ["quesos", "lacteos"]
    assert groups[0]["group_id"] == 11
    assert groups[0]["similarity"] > groups[1]["similarity"]


def test_search_groups_requires_value(client):
    response = client.get("/api/v1/search/groups", params={"value": ""})
    assert response.status_code == 400
    assert response.json()["error"]["type"] == "InvalidRequestError"


def test_expand_unit(client):
    data = client.get("/api/v1/units/expand", params={"unit": "1 LB"}).json()
    expansion = data["expansions"][0]
    assert expansion["parsed"]["measurement"] == "weight"
    assert expansion["variants"][0] == "1 LB"
    assert "16 OZ" in data["values"]
    assert data["param"] == "1%20LB"


def test_expand_units_param(client):
    data = client.get("/api/v1/units/expand", params={"units": "16 OZ/1 LB,caja"}).json()
    assert [e["unit"] for e in data["expansions"]] == ["16 OZ", "1 LB", "caja"]
    assert data["expansions"][2]["parsed"] is None
    assert data["values"].count("16 OZ") == 1


def test_expand_requires_unit(client):
    assert client.get("/api/v1/units/expand").status_code == 400


def test_unit_target(client):
    data = client.get("/api/v1/units/target", params={"text": "arroz 5 libras"}).json()
    assert data["parsed"]["display"] == "5 LB"
    assert data["cleaned_search_text"] == "arroz"

    none = client.get("/api/v1/units/target", params={"text": "Pan Integral"}).json()
    assert none["parsed"] is None
    assert none["cleaned_search_text"] == "pan integral"
