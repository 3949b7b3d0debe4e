"""Builders for domain objects used across the test suite."""
from __future__ import annotations

from typing import Iterable

from app.models.plan import CompletedStatus, DayPlan, Exercise, Meal


def make_exercise(exercise_id: str, muscle_group: str | None = "core", **overrides) -> Exercise:
    fields = {"id": exercise_id, "name": exercise_id.title(), "sets": 3, "reps": 10, "muscle_group": muscle_group}
    fields.update(overrides)
    return Exercise(**fields)


def make_meal(meal_id: str, calories: float = 400, **overrides) -> Meal:
    fields = {"id": meal_id, "name": meal_id.title(), "type": "lunch", "calories": calories}
    fields.update(overrides)
    return Meal(**fields)


def make_plan(
    day: str,
    exercises: list[Exercise] | None = None,
    meals: list[Meal] | None = None,
    done_exercises: Iterable[str] = (),
    done_meals: Iterable[str] = (),
    user_id: int = 1,
) -> DayPlan:
    """Build a DayPlan with the given items marked as done."""
    plan = DayPlan(
        user_id=user_id,
        day=day,
        exercises=exercises or [],
        meals=meals or [],
        completed_status=CompletedStatus(
            exercises={ex_id: True for ex_id in done_exercises},
            meals={meal_id: True for meal_id in done_meals},
        ),
    )
    plan.refresh_completion()
    return plan
