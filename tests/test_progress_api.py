"""Integration tests for progress analytics endpoints."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def week(test_client: TestClient, api_user: dict) -> list[dict]:
    response = test_client.post(f"/api/users/{api_user['id']}/plans/generate")
    assert response.status_code == 201
    return response.json()


def _complete_day(test_client: TestClient, user_id: int, plan: dict) -> None:
    for exercise in plan["exercises"]:
        response = test_client.post(
            f"/api/users/{user_id}/workouts/{plan['day']}/complete-exercise",
            json={"exercise_id": exercise["id"]},
        )
        assert response.status_code == 200


def test_weekly_progress(test_client: TestClient, api_user: dict, week: list[dict]):
    user_id = api_user["id"]
    _complete_day(test_client, user_id, week[0])

    response = test_client.get(f"/api/users/{user_id}/progress/weekly")

    assert response.status_code == 200
    data = response.json()
    assert data["total_days"] == 7
    assert data["completed_exercises"] == 6
    # Meals are still open so the day is not fully completed
    assert data["completed_days"] == 0


def test_exercise_progress(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/progress/exercises")

    assert response.status_code == 200
    data = response.json()
    assert data["completion_rate"] == 0
    assert "cardiovascular" in data["muscle_group_progress"]


def test_streaks(test_client: TestClient, api_user: dict, week: list[dict]):
    """Test the current streak counts back from Sunday."""
    user_id = api_user["id"]
    _complete_day(test_client, user_id, week[5])
    _complete_day(test_client, user_id, week[6])

    response = test_client.get(f"/api/users/{user_id}/progress/streaks")

    assert response.status_code == 200
    assert response.json() == {"current_streak": 2, "longest_streak": 2}


def test_goal_progress(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/progress/goal")

    assert response.status_code == 200
    data = response.json()
    assert data["goal_type"] == "weight_loss"
    assert data["progress_towards_goal"] == 0
    assert data["estimated_time_to_goal"] == 12
    assert "Increase cardio workout frequency" in data["recommendations"]


def test_time_progress(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/progress/time")

    assert response.status_code == 200
    data = response.json()
    assert data["total_workout_time"] > 0
    assert data["workout_frequency"] == 0


def test_progress_metrics(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/progress/metrics")

    assert response.status_code == 200
    assert set(response.json()) == {"workout_progress", "exercise_progress", "time_progress", "goal_progress"}


def test_weekly_report(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(
        f"/api/users/{api_user['id']}/progress/weekly-report",
        params={"reference_date": "2026-10-21"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["week_start_date"] == "2026-10-19"
    assert data["week_end_date"] == "2026-10-25"
    assert data["achievements"] == ["Keep going! Every step counts towards your goal"]
    assert data["next_week_goals"][0] == "Achieve 20% workout completion rate"


def test_progress_for_unknown_user(test_client: TestClient):
    response = test_client.get("/api/users/999/progress/weekly")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "PROFILE_NOT_FOUND"


def test_progress_without_plans(test_client: TestClient, api_user: dict):
    """Test analytics over an empty week return zeroes."""
    response = test_client.get(f"/api/users/{api_user['id']}/progress/weekly")

    assert response.status_code == 200
    assert response.json()["total_days"] == 0
    assert response.json()["exercise_completion_rate"] == 0
