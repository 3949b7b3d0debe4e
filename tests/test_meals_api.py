"""Integration tests for meal and nutrition endpoints."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def week(test_client: TestClient, api_user: dict) -> list[dict]:
    response = test_client.post(f"/api/users/{api_user['id']}/plans/generate")
    assert response.status_code == 201
    return response.json()


def test_generate_meal_plan_without_existing_week(test_client: TestClient, api_user: dict):
    """Test meal generation creates the week when none exists."""
    response = test_client.post(f"/api/users/{api_user['id']}/meals/generate")

    assert response.status_code == 201
    plans = response.json()
    assert len(plans) == 7
    assert all(len(plan["meals"]) == 4 for plan in plans)


def test_nutrition_goals(test_client: TestClient, api_user: dict):
    response = test_client.get(f"/api/users/{api_user['id']}/meals/nutrition-goals")

    assert response.status_code == 200
    assert response.json() == {"calories": 1386, "protein": 104, "carbs": 121, "fat": 54}


def test_consume_meal(test_client: TestClient, api_user: dict, week: list[dict]):
    meal_id = week[0]["meals"][0]["id"]

    response = test_client.post(f"/api/users/{api_user['id']}/meals/Monday/consume", json={"meal_id": meal_id})

    assert response.status_code == 200
    assert response.json()["completed_status"]["meals"] == {meal_id: True}


def test_consume_unknown_meal(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.post(f"/api/users/{api_user['id']}/meals/Monday/consume", json={"meal_id": "nope"})

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "MEAL_NOT_FOUND"


def test_meal_progress(test_client: TestClient, api_user: dict, week: list[dict]):
    user_id = api_user["id"]
    meal_id = week[0]["meals"][0]["id"]
    test_client.post(f"/api/users/{user_id}/meals/Monday/consume", json={"meal_id": meal_id})

    response = test_client.get(f"/api/users/{user_id}/meals/progress")

    assert response.status_code == 200
    data = response.json()
    assert data["total_meals"] == 28
    assert data["consumed_meals"] == 1
    assert data["daily_stats"]["Monday"]["consumed_calories"] == 347


def test_meal_statistics(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/meals/statistics")

    assert response.status_code == 200
    data = response.json()
    assert data["nutrition_goals"]["calories"] == 1386
    assert data["deficits"]["calories"] == 1386
    assert data["adherence_score"] == 0


def test_meal_recommendations(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/meals/monday/recommendations")

    assert response.status_code == 200
    data = response.json()
    assert data["day"] == "Monday"
    assert data["recommendations"][0]["calories"] == 200
    assert data["recommendations"][0]["protein"] == 20


def test_meal_recommendations_invalid_day(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/meals/Someday/recommendations")
    assert response.status_code == 400


def test_add_update_delete_meal(test_client: TestClient, api_user: dict, week: list[dict]):
    """Test the custom meal lifecycle on one day."""
    user_id = api_user["id"]

    response = test_client.post(
        f"/api/users/{user_id}/meals/Monday",
        json={"name": "Protein Shake", "type": "snack", "calories": 180, "protein": 30},
    )
    assert response.status_code == 201
    added = response.json()["meals"][-1]
    assert added["id"] == "monday-snack-custom-5"

    response = test_client.put(f"/api/users/{user_id}/meals/Monday/{added['id']}", json={"calories": 220})
    assert response.status_code == 200
    assert response.json()["meals"][-1]["calories"] == 220
    assert response.json()["meals"][-1]["protein"] == 30

    response = test_client.delete(f"/api/users/{user_id}/meals/Monday/{added['id']}")
    assert response.status_code == 200
    assert len(response.json()["meals"]) == 4


def test_update_missing_meal(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.put(f"/api/users/{api_user['id']}/meals/Monday/nope", json={"calories": 10})

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "MEAL_NOT_FOUND"
