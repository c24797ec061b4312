"""
API tests for the resource endpoints.
"""

from fastapi.testclient import TestClient


def test_create_and_get(client: TestClient, resource_payload) -> None:
    response = client.post("/api/resources", json={**resource_payload, "id": 9})
    assert response.status_code == 201
    resource = response.json()
    assert resource["id"] == 1
    assert resource["publishedAt"]
    assert client.get("/api/resources/1").json() == resource


def test_explicit_published_at_is_kept(client: TestClient, resource_payload) -> None:
    resource = client.post(
        "/api/resources", json={**resource_payload, "publishedAt": "2023-08-15T00:00:00Z"}
    ).json()
    assert resource["publishedAt"].startswith("2023-08-15")


def test_category_is_free_text_and_matched_exactly(client: TestClient, resource_payload) -> None:
    client.post("/api/resources", json=resource_payload)
    client.post("/api/resources", json={**resource_payload, "category": "Options Greeks"})

    response = client.get("/api/resources/category/Options Greeks")
    assert [r["category"] for r in response.json()] == ["Options Greeks"]
    assert client.get("/api/resources/category/risk management").json() == []

    filtered = client.get("/api/resources", params={"category": "Risk Management"}).json()
    assert len(filtered) == 1


def test_search(client: TestClient, resource_payload) -> None:
    client.post("/api/resources", json=resource_payload)
    client.post("/api/resources", json={**resource_payload, "title": "Scaling plans", "summary": "How scaling works"})
    found = client.get("/api/resources", params={"search": "SCALING"}).json()
    assert [r["title"] for r in found] == ["Scaling plans"]


def test_update_and_delete(client: TestClient, resource_payload) -> None:
    client.post("/api/resources", json=resource_payload)
    updated = client.put("/api/resources/1", json={"readTime": 20}).json()
    assert updated["readTime"] == 20
    assert updated["title"] == resource_payload["title"]

    assert client.delete("/api/resources/1").status_code == 204
    assert client.delete("/api/resources/1").status_code == 404


def test_missing_resource(client: TestClient) -> None:
    for response in (
        client.get("/api/resources/5"),
        client.put("/api/resources/5", json={"title": "x"}),
        client.delete("/api/resources/5"),
    ):
        assert response.status_code == 404
        assert response.json() == {"message": "Resource not found"}


def test_missing_required_field(client: TestClient, resource_payload) -> None:
    del resource_payload["summary"]
    response = client.post("/api/resources", json=resource_payload)
    assert response.status_code == 400
    assert '"summary"' in response.json()["message"]


def test_non_numeric_id(client: TestClient) -> None:
    for response in (
        client.get("/api/resources/latest"),
        client.put("/api/resources/latest", json={"title": "x"}),
        client.delete("/api/resources/latest"),
    ):
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid resource ID"}
