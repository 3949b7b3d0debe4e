"""Integration tests for user profile endpoints."""
from __future__ import annotations

from fastapi.testclient import TestClient


def test_create_user(test_client: TestClient, api_user: dict):
    """Test creating a user returns the stored profile."""
    assert api_user["id"] > 0
    assert api_user["email"] == "ana@example.com"
    assert api_user["goal"] == "weight_loss"
    assert api_user["role"] == "user"


def test_create_user_duplicate_email(test_client: TestClient, api_user: dict):
    """Test duplicate emails are rejected case-insensitively."""
    response = test_client.post("/api/users", json={"name": "Copy", "email": "ANA@example.com"})

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "EMAIL_EXISTS"


def test_create_user_validation(test_client: TestClient):
    """Test malformed payloads are rejected before reaching storage."""
    response = test_client.post("/api/users", json={"name": "X", "email": "not-an-email"})
    assert response.status_code == 422

    response = test_client.post("/api/users", json={"name": "X", "email": "x@example.com", "goal": "bulking"})
    assert response.status_code == 422


def test_get_user(test_client: TestClient, api_user: dict):
    response = test_client.get(f"/api/users/{api_user['id']}")

    assert response.status_code == 200
    assert response.json()["name"] == "Ana"


def test_get_missing_user(test_client: TestClient):
    """Test unknown users map to 404 with a stable error code."""
    response = test_client.get("/api/users/999")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "PROFILE_NOT_FOUND"


def test_update_user(test_client: TestClient, api_user: dict):
    """Test partial profile updates leave other fields alone."""
    response = test_client.put(f"/api/users/{api_user['id']}", json={"weight": 58})

    assert response.status_code == 200
    data = response.json()
    assert data["weight"] == 58
    assert data["height"] == 165


def test_update_goal(test_client: TestClient, api_user: dict):
    response = test_client.put(f"/api/users/{api_user['id']}/goal", json={"goal": "muscle_gain"})

    assert response.status_code == 200
    assert response.json()["goal"] == "muscle_gain"


def test_update_goal_invalid(test_client: TestClient, api_user: dict):
    """Test an unknown goal is reported as INVALID_GOAL."""
    response = test_client.put(f"/api/users/{api_user['id']}/goal", json={"goal": "bulking"})

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_GOAL"


def test_delete_user_removes_plans(test_client: TestClient, api_user: dict):
    """Test deleting a user also removes their plans."""
    user_id = api_user["id"]
    assert test_client.post(f"/api/users/{user_id}/plans/generate").status_code == 201

    response = test_client.delete(f"/api/users/{user_id}")
    assert response.status_code == 204

    assert test_client.get(f"/api/users/{user_id}").status_code == 404
    assert test_client.get("/api/health/db").json()["day_plans"] == 0
