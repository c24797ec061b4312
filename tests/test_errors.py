"""
Tests for the error response shape.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from prop_directory_api.app.core.errors import format_validation_errors


def test_format_joins_issues_with_field_paths() -> None:
    message = format_validation_errors(
        [
            {"loc": ("body", "name"), "msg": "String should have at least 2 characters"},
            {"loc": ("body", "accountTypes", 0, "price"), "msg": "Field required"},
        ]
    )
    assert message == (
        'Validation error: String should have at least 2 characters at "name"; '
        'Field required at "accountTypes.0.price"'
    )


def test_format_without_location() -> None:
    assert format_validation_errors([{"loc": ("body",), "msg": "Field required"}]) == (
        "Validation error: Field required"
    )


def test_format_caps_number_of_issues() -> None:
    errors = [{"loc": ("body", f"f{i}"), "msg": "bad"} for i in range(10)]
    message = format_validation_errors(errors)
    assert message.count("bad") == 5


def test_unknown_route_uses_message_body(client: TestClient) -> None:
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_missing_body_is_400(client: TestClient) -> None:
    response = client.post("/api/reviews")
    assert response.status_code == 400
    assert response.json()["message"].startswith("Validation error")


def test_unhandled_error_is_generic_500(app: FastAPI) -> None:
    @app.get("/api/explode")
    async def explode() -> None:
        raise RuntimeError("database password is hunter2")

    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/api/explode")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
