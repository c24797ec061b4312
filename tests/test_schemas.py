"""
Unit tests for firm, review and resource schemas.
"""

import pytest
from pydantic import ValidationError

from prop_directory_api.app.schemas.firm import FirmCreate, FirmRead, FirmUpdate
from prop_directory_api.app.schemas.review import ReviewCreate


def test_firm_create_ignores_derived_and_identity_fields(firm_payload) -> None:
    firm_payload.update(id=99, avgRating=4.9, ratingCount=1000)
    firm = FirmCreate.model_validate(firm_payload)
    dumped = firm.model_dump(by_alias=True)
    assert "id" not in dumped
    assert "avgRating" not in dumped
    assert "ratingCount" not in dumped


def test_firm_name_too_short() -> None:
    with pytest.raises(ValidationError):
        FirmCreate.model_validate({"name": "A", "description": "desc"})


def test_firm_accepts_snake_case_names() -> None:
    firm = FirmCreate(name="Topstep", description="Futures", website_url="https://topstep.com")
    assert firm.model_dump(by_alias=True)["websiteUrl"] == "https://topstep.com"


def test_extra_keeps_order_of_pairs() -> None:
    firm = FirmCreate.model_validate(
        {
            "name": "Topstep",
            "description": "Futures",
            "extra": [{"key": "b", "value": "2"}, {"key": "a", "value": "1"}],
        }
    )
    assert [(e.key, e.value) for e in firm.extra] == [("b", "2"), ("a", "1")]


def test_extra_mapping_is_converted_to_pairs() -> None:
    firm = FirmUpdate.model_validate({"extra": {"Max lots": 20, "Weekend": "no"}})
    assert [(e.key, e.value) for e in firm.extra] == [("Max lots", "20"), ("Weekend", "no")]


def test_extra_rejects_empty_key() -> None:
    with pytest.raises(ValidationError):
        FirmCreate.model_validate(
            {"name": "Topstep", "description": "Futures", "extra": [{"key": "", "value": "x"}]}
        )


def test_firm_read_serializes_camel_case() -> None:
    firm = FirmRead(id=1, name="Topstep", description="Futures", dca_allowed=True)
    data = firm.model_dump(by_alias=True)
    assert data["avgRating"] == 0
    assert data["ratingCount"] == 0
    assert data["DCAAllowed"] is True
    assert data["tradableAssets"] == []


class TestReviewCreate:
    """Tests for ReviewCreate validation."""

    def test_rating_bounds(self, review_payload) -> None:
        for rating in (0, 6):
            review_payload["rating"] = rating
            with pytest.raises(ValidationError):
                ReviewCreate.model_validate(review_payload)

    def test_text_is_stripped(self, review_payload) -> None:
        review_payload["title"] = "  Fast payouts  "
        assert ReviewCreate.model_validate(review_payload).title == "Fast payouts"

    def test_blank_content_is_rejected(self, review_payload) -> None:
        review_payload["content"] = "   "
        with pytest.raises(ValidationError):
            ReviewCreate.model_validate(review_payload)
