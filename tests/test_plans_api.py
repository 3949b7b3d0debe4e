"""Integration tests for plan and workout endpoints."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def week(test_client: TestClient, api_user: dict) -> list[dict]:
    response = test_client.post(f"/api/users/{api_user['id']}/plans/generate")
    assert response.status_code == 201
    return response.json()


def test_generate_week(week: list[dict]):
    """Test generating a week returns seven days, Monday first."""
    assert [plan["day"] for plan in week] == [
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
        "Friday",
        "Saturday",
        "Sunday",
    ]
    monday = week[0]
    assert len(monday["meals"]) == 4
    assert [meal["calories"] for meal in monday["meals"]] == [347, 485, 416, 139]
    assert monday["completed_status"]["exercises"] == {}


def test_generate_week_for_extreme_profile(test_client: TestClient):
    """Test a profile whose calorie estimate is negative still gets a week."""
    user = test_client.post(
        "/api/users",
        json={
            "name": "Edge",
            "email": "edge@example.com",
            "gender": "female",
            "age": 120,
            "height": 1,
            "weight": 1,
            "goal": "weight_loss",
        },
    ).json()

    response = test_client.post(f"/api/users/{user['id']}/plans/generate")

    assert response.status_code == 201
    assert [meal["calories"] for meal in response.json()[0]["meals"]] == [0, 0, 0, 0]


def test_generate_week_unknown_user(test_client: TestClient):
    response = test_client.post("/api/users/999/plans/generate")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "PROFILE_NOT_FOUND"


def test_list_plans(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/plans")

    assert response.status_code == 200
    assert len(response.json()) == 7


def test_get_plan_any_case(test_client: TestClient, api_user: dict, week: list[dict]):
    """Test weekday names are accepted in any capitalisation."""
    response = test_client.get(f"/api/users/{api_user['id']}/plans/wednesday")

    assert response.status_code == 200
    assert response.json()["day"] == "Wednesday"


def test_get_plan_invalid_day(test_client: TestClient, api_user: dict):
    response = test_client.get(f"/api/users/{api_user['id']}/plans/Someday")

    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "INVALID_DAY"


def test_get_plan_missing_day(test_client: TestClient, api_user: dict):
    response = test_client.get(f"/api/users/{api_user['id']}/plans/Monday")

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "PLAN_NOT_FOUND"


def test_upsert_plan(test_client: TestClient, api_user: dict):
    """Test writing a day by hand."""
    payload = {
        "exercises": [{"id": "e1", "name": "Squats", "sets": 3, "reps": 12, "muscle_group": "legs"}],
        "meals": [{"id": "m1", "name": "Oats", "type": "breakfast", "calories": 350}],
    }

    response = test_client.put(f"/api/users/{api_user['id']}/plans/Friday", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["day"] == "Friday"
    assert data["exercises"][0]["name"] == "Squats"
    assert data["completed_status"]["date_completed"] is None


def test_upsert_plan_duplicate_ids(test_client: TestClient, api_user: dict):
    """Test duplicate exercise ids within a day are rejected."""
    exercise = {"id": "e1", "name": "Squats", "sets": 3, "reps": 12}

    response = test_client.put(
        f"/api/users/{api_user['id']}/plans/Friday",
        json={"exercises": [exercise, exercise], "meals": []},
    )

    assert response.status_code == 422


def test_delete_plan(test_client: TestClient, api_user: dict, week: list[dict]):
    user_id = api_user["id"]

    assert test_client.delete(f"/api/users/{user_id}/plans/Sunday").status_code == 204
    assert test_client.get(f"/api/users/{user_id}/plans/Sunday").status_code == 404


def test_update_completion(test_client: TestClient, api_user: dict, week: list[dict]):
    """Test toggling an exercise through the generic completion endpoint."""
    exercise_id = week[0]["exercises"][0]["id"]

    response = test_client.put(
        f"/api/users/{api_user['id']}/plans/Monday/completed",
        json={"exercise_id": exercise_id, "completed": True},
    )

    assert response.status_code == 200
    assert response.json()["completed_status"]["exercises"] == {exercise_id: True}


def test_update_completion_requires_one_target(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.put(
        f"/api/users/{api_user['id']}/plans/Monday/completed",
        json={"completed": True},
    )
    assert response.status_code == 422


def test_update_completion_unknown_exercise(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.put(
        f"/api/users/{api_user['id']}/plans/Monday/completed",
        json={"exercise_id": "nope", "completed": True},
    )

    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "EXERCISE_NOT_FOUND"


def test_complete_exercise(test_client: TestClient, api_user: dict, week: list[dict]):
    exercise_id = week[1]["exercises"][0]["id"]

    response = test_client.post(
        f"/api/users/{api_user['id']}/workouts/Tuesday/complete-exercise",
        json={"exercise_id": exercise_id},
    )

    assert response.status_code == 200
    assert response.json()["completed_status"]["exercises"][exercise_id] is True


def test_replace_exercises_keeps_remaining_flags(test_client: TestClient, api_user: dict, week: list[dict]):
    """Test replacing exercises keeps flags for exercises that stay."""
    user_id = api_user["id"]
    kept = week[0]["exercises"][0]
    test_client.post(f"/api/users/{user_id}/workouts/Monday/complete-exercise", json={"exercise_id": kept["id"]})

    response = test_client.put(f"/api/users/{user_id}/workouts/Monday", json={"exercises": [kept]})

    assert response.status_code == 200
    data = response.json()
    assert len(data["exercises"]) == 1
    assert data["completed_status"]["exercises"] == {kept["id"]: True}


def test_adjust_intensity(test_client: TestClient, api_user: dict, week: list[dict]):
    """Test untouched days get easier after regeneration."""
    response = test_client.post(f"/api/users/{api_user['id']}/workouts/adjust-intensity")

    assert response.status_code == 200
    tuesday = {ex["name"]: ex for ex in response.json()[1]["exercises"]}
    assert tuesday["Planks"]["duration"] == 45
    assert tuesday["Crunches"]["reps"] == 18


def test_reset_progress(test_client: TestClient, api_user: dict, week: list[dict]):
    user_id = api_user["id"]
    exercise_id = week[0]["exercises"][0]["id"]
    test_client.post(f"/api/users/{user_id}/workouts/Monday/complete-exercise", json={"exercise_id": exercise_id})

    response = test_client.post(f"/api/users/{user_id}/workouts/reset-progress")

    assert response.status_code == 200
    assert all(plan["completed_status"]["exercises"] == {} for plan in response.json())


def test_workout_progress(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/workouts/progress")

    assert response.status_code == 200
    data = response.json()
    assert data["total_workouts"] == 7
    assert data["completion_rate"] == 0
    assert data["daily_stats"]["Monday"]["total_exercises"] == 6


def test_exercise_recommendations(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/workouts/recommendations")

    assert response.status_code == 200
    data = response.json()
    assert data["difficulty"] == "beginner"
    assert data["exercises"][0]["id"] == "rec-beginner-jumping-jacks"


def test_workout_statistics(test_client: TestClient, api_user: dict, week: list[dict]):
    response = test_client.get(f"/api/users/{api_user['id']}/workouts/statistics")

    assert response.status_code == 200
    data = response.json()
    assert sum(data["muscle_group_distribution"].values()) == sum(len(plan["exercises"]) for plan in week)
    assert data["total_workouts"] == 7
    assert data["workout_frequency"] == 0


def test_workout_statistics_unknown_user(test_client: TestClient):
    response = test_client.get("/api/users/999/workouts/statistics")

    assert response.status_code == 404
