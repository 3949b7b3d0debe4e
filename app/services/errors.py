"""Typed error taxonomy shared by the planning and analytics services."""
from __future__ import annotations


class PlannerError(Exception):
    """Base class; ``code`` is a stable identifier callers can switch on."""

    code = "PLANNER_ERROR"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class NotFoundError(PlannerError):
    code = "NOT_FOUND"


class ProfileNotFound(NotFoundError):
    code = "PROFILE_NOT_FOUND"


class PlanNotFound(NotFoundError):
    code = "PLAN_NOT_FOUND"


class ExerciseNotFound(NotFoundError):
    code = "EXERCISE_NOT_FOUND"


class MealNotFound(NotFoundError):
    code = "MEAL_NOT_FOUND"


class InvalidDay(PlannerError):
    code = "INVALID_DAY"


class InvalidGoal(PlannerError):
    code = "INVALID_GOAL"


UnsupportedGoal = InvalidGoal


class EmailAlreadyExists(PlannerError):
    code = "EMAIL_EXISTS"


class MalformedStoredData(PlannerError):
    """A persisted JSON blob could not be decoded; recovered by the row mapper."""

    code = "MALFORMED_STORED_DATA"
