"""
API tests for registration and admin login.
"""

from fastapi.testclient import TestClient


def test_register_hides_password(client: TestClient, store) -> None:
    response = client.post("/api/auth/register", json={"username": "trader42", "password": "s3cret"})
    assert response.status_code == 201
    assert response.json() == {"id": 1, "username": "trader42", "isAdmin": False}
    assert store.users[1].password_hash != "s3cret"


def test_duplicate_username(client: TestClient) -> None:
    client.post("/api/auth/register", json={"username": "trader42", "password": "a"})
    response = client.post("/api/auth/register", json={"username": "trader42", "password": "b"})
    assert response.status_code == 400
    assert response.json() == {"message": "Username already exists"}


def test_register_requires_password(client: TestClient) -> None:
    response = client.post("/api/auth/register", json={"username": "trader42"})
    assert response.status_code == 400
    assert '"password"' in response.json()["message"]


def test_admin_login_with_default_credentials(client: TestClient) -> None:
    response = client.post("/api/auth/admin/login", json={"username": "admin", "password": "admin123"})
    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_admin_login_rejects_bad_password(client: TestClient) -> None:
    response = client.post("/api/auth/admin/login", json={"username": "admin", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_registered_user_is_not_admin(client: TestClient) -> None:
    client.post("/api/auth/register", json={"username": "trader42", "password": "pw"})
    response = client.post("/api/auth/admin/login", json={"username": "trader42", "password": "pw"})
    assert response.status_code == 401
