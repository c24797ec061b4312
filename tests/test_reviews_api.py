"""
API tests for reviews and the rating side effect.
"""

from fastapi.testclient import TestClient


def test_rating_scenario(client: TestClient, firm_payload, review_payload) -> None:
    firm = client.post("/api/firms", json=firm_payload).json()
    assert (firm["avgRating"], firm["ratingCount"]) == (0, 0)

    response = client.post("/api/reviews", json={**review_payload, "firmId": firm["id"], "rating": 5})
    assert response.status_code == 201
    firm = client.get(f"/api/firms/{firm['id']}").json()
    assert (firm["avgRating"], firm["ratingCount"]) == (5, 1)

    client.post("/api/reviews", json={**review_payload, "firmId": firm["id"], "rating": 3})
    firm = client.get(f"/api/firms/{firm['id']}").json()
    assert (firm["avgRating"], firm["ratingCount"]) == (4, 2)


def test_created_review_has_server_fields(client: TestClient, review_payload) -> None:
    review_payload.update(id=77, createdAt="1999-01-01T00:00:00Z")
    review = client.post("/api/reviews", json=review_payload).json()
    assert review["id"] == 1
    assert review["createdAt"] != "1999-01-01T00:00:00Z"
    assert review["firmId"] == 1
    assert review["tradingExperience"] is None


def test_review_for_unknown_firm_is_accepted(client: TestClient, review_payload) -> None:
    response = client.post("/api/reviews", json={**review_payload, "firmId": 404})
    assert response.status_code == 201
    assert client.get("/api/firms/404").status_code == 404


def test_invalid_rating_is_400(client: TestClient, review_payload, store) -> None:
    response = client.post("/api/reviews", json={**review_payload, "rating": 6})
    assert response.status_code == 400
    assert '"rating"' in response.json()["message"]
    assert store.reviews == {}


def test_firm_reviews_and_filters(client: TestClient, firm_payload, review_payload) -> None:
    client.post("/api/firms", json=firm_payload)
    client.post("/api/firms", json={**firm_payload, "name": "Topstep"})
    client.post("/api/reviews", json={**review_payload, "firmId": 1, "rating": 5})
    client.post("/api/reviews", json={**review_payload, "firmId": 2, "rating": 2, "title": "Slow support"})
    client.post("/api/reviews", json={**review_payload, "firmId": 2, "rating": 5})

    assert len(client.get("/api/reviews").json()) == 3
    assert [r["rating"] for r in client.get("/api/firms/2/reviews").json()] == [2, 5]
    assert client.get("/api/firms/9/reviews").json() == []

    by_rating = client.get("/api/reviews", params={"firmId": 2, "rating": 5}).json()
    assert len(by_rating) == 1
    by_text = client.get("/api/reviews", params={"search": "slow"}).json()
    assert [r["title"] for r in by_text] == ["Slow support"]


def test_get_reviews_does_not_mutate(client: TestClient, firm_payload, review_payload) -> None:
    client.post("/api/firms", json=firm_payload)
    client.post("/api/reviews", json=review_payload)
    first = client.get("/api/reviews").json()
    assert client.get("/api/reviews").json() == first
    assert client.get("/api/firms/1").json()["ratingCount"] == 1
