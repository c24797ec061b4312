"""
Tests for the seeded store built at startup.
"""

from dataclasses import replace

from fastapi.testclient import TestClient

from prop_directory_api.app.core.config import settings
from prop_directory_api.app.core.seed import SAMPLE_FIRMS, SAMPLE_RESOURCES, SAMPLE_REVIEWS
from prop_directory_api.app.main import create_app


def _seeded_client() -> TestClient:
    return TestClient(create_app(replace(settings, seed_sample_data=True)))


def test_sample_data_is_loaded() -> None:
    client = _seeded_client()
    assert len(client.get("/api/firms").json()) == len(SAMPLE_FIRMS)
    assert len(client.get("/api/resources").json()) == len(SAMPLE_RESOURCES)
    assert len(client.get("/api/reviews").json()) == len(SAMPLE_REVIEWS)


def test_seeded_ratings_match_reviews() -> None:
    client = _seeded_client()
    reviews = client.get("/api/reviews").json()
    for firm in client.get("/api/firms").json():
        ratings = [r["rating"] for r in reviews if r["firmId"] == firm["id"]]
        assert firm["ratingCount"] == len(ratings)
        expected = sum(ratings) / len(ratings) if ratings else 0
        assert firm["avgRating"] == expected


def test_seeded_account_prices_are_derived() -> None:
    client = _seeded_client()
    ftmo = client.get("/api/firms/1").json()
    assert ftmo["accountTypes"][0]["discountedPrice"] == 486.0
    funded_next = client.get("/api/firms/2").json()
    assert funded_next["accountTypes"][0]["discountedPrice"] == 279.2


def test_each_app_has_its_own_store() -> None:
    first = _seeded_client()
    second = _seeded_client()
    first.delete("/api/firms/1")
    assert first.get("/api/firms/1").status_code == 404
    assert second.get("/api/firms/1").status_code == 200
