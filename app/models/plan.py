"""Domain models for users, day plans and their completion state."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from app.services.errors import ExerciseNotFound, InvalidDay, InvalidGoal, MealNotFound


logger = logging.getLogger(__name__)


WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
GOALS: tuple[str, ...] = ("weight_loss", "muscle_gain", "maintenance")
MEAL_TYPES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "snack")

Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
Goal = Literal["weight_loss", "muscle_gain", "maintenance"]
Gender = Literal["male", "female", "other"]
Role = Literal["user", "trainer", "admin"]
MealType = Literal["breakfast", "lunch", "dinner", "snack"]


def parse_day(value: str) -> str:
    """Return the canonical weekday name, accepting any capitalisation."""
    for day in WEEKDAYS:
        if value.strip().lower() == day.lower():
            return day
    raise InvalidDay(f"Invalid day '{value}'. Must be one of: {', '.join(WEEKDAYS)}")


def parse_goal(value: str) -> str:
    """Strictly validate a goal supplied by a caller."""
    goal = value.strip().lower()
    if goal not in GOALS:
        raise InvalidGoal(f"Invalid goal '{value}'. Must be one of: {', '.join(GOALS)}")
    return goal


def resolve_goal(value: str | None) -> str:
    """Goal used for planning: missing means maintenance, unknown falls back with a warning."""
    if not value:
        return "maintenance"
    try:
        return parse_goal(value)
    except InvalidGoal:
        logger.warning("Unrecognised goal %r; falling back to maintenance", value)
        return "maintenance"


class Food(BaseModel):
    """A single food item inside a meal."""

    name: str
    quantity: float = Field(ge=0)
    unit: str
    calories: float = Field(ge=0)
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None


class Exercise(BaseModel):
    """A prescribed exercise; duration is in seconds."""

    id: str
    name: str
    sets: int = Field(ge=1)
    reps: int = Field(ge=1)
    weight: float | None = None
    duration: int | None = Field(default=None, ge=0)
    instructions: str = ""
    muscle_group: str | None = None


class Meal(BaseModel):
    """A planned meal with its macro totals and food breakdown."""

    id: str
    name: str
    type: MealType
    calories: float = Field(ge=0)
    protein: float | None = None
    carbs: float | None = None
    fat: float | None = None
    foods: list[Food] = Field(default_factory=list)


class CompletedStatus(BaseModel):
    """Completion flags for a day's exercises and meals."""

    exercises: dict[str, bool] = Field(default_factory=dict)
    meals: dict[str, bool] = Field(default_factory=dict)
    date_completed: datetime | None = None


class DayPlan(BaseModel):
    """One user's exercises and meals for a single weekday."""

    id: int | None = None
    user_id: int
    day: Weekday
    exercises: list[Exercise] = Field(default_factory=list)
    meals: list[Meal] = Field(default_factory=list)
    completed_status: CompletedStatus = Field(default_factory=CompletedStatus)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def exercise_done(self, exercise_id: str) -> bool:
        return bool(self.completed_status.exercises.get(exercise_id))

    def meal_done(self, meal_id: str) -> bool:
        return bool(self.completed_status.meals.get(meal_id))

    def is_fully_completed(self) -> bool:
        """True when every listed exercise and meal is marked done."""
        return all(self.exercise_done(ex.id) for ex in self.exercises) and all(
            self.meal_done(meal.id) for meal in self.meals
        )

    def refresh_completion(self, now: datetime | None = None) -> None:
        """Recompute the completion timestamp from the current flags.

        Must run after every change to the flags or to the item lists.
        Upserts reset completion without calling this, so a day stored with
        no exercises and no meals is fully completed but keeps
        ``date_completed`` unset until its next mutation.
        """
        if self.is_fully_completed():
            if self.completed_status.date_completed is None:
                self.completed_status.date_completed = now or datetime.utcnow()
        else:
            self.completed_status.date_completed = None

    def reset_completion(self) -> None:
        self.completed_status = CompletedStatus()

    def set_exercise_completed(self, exercise_id: str, completed: bool) -> None:
        if not any(ex.id == exercise_id for ex in self.exercises):
            raise ExerciseNotFound(f"Exercise {exercise_id} not found on {self.day}")
        self.completed_status.exercises[exercise_id] = completed
        self.refresh_completion()

    def set_meal_completed(self, meal_id: str, completed: bool) -> None:
        if not any(meal.id == meal_id for meal in self.meals):
            raise MealNotFound(f"Meal {meal_id} not found on {self.day}")
        self.completed_status.meals[meal_id] = completed
        self.refresh_completion()

    def prune_completion(self) -> None:
        """Drop flags for items no longer on the plan, then recompute."""
        exercise_ids = {ex.id for ex in self.exercises}
        meal_ids = {meal.id for meal in self.meals}
        status = self.completed_status
        status.exercises = {k: v for k, v in status.exercises.items() if k in exercise_ids}
        status.meals = {k: v for k, v in status.meals.items() if k in meal_ids}
        self.refresh_completion()


class UserProfile(BaseModel):
    """Read-only view of a user as consumed by planning and analytics.

    ``goal`` stays a plain string so that legacy or hand-edited values can be
    loaded and resolved to a fallback instead of failing validation.
    """

    id: int
    name: str
    email: str
    age: int | None = None
    gender: Gender | None = None
    height: float | None = None
    weight: float | None = None
    goal: str | None = None
    role: Role = "user"
    created_at: datetime | None = None


class ProfileCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=3, max_length=255)
    age: int | None = Field(default=None, ge=1, le=120)
    gender: Gender | None = None
    height: float | None = Field(default=None, gt=0, le=300)
    weight: float | None = Field(default=None, gt=0, le=500)
    goal: Goal | None = None
    role: Literal["user", "trainer"] = "user"

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value


class ProfileUpdate(BaseModel):
    """Explicit partial update of profile fields; unset fields are left alone."""

    name: str | None = Field(default=None, min_length=1, max_length=100)
    age: int | None = Field(default=None, ge=1, le=120)
    gender: Gender | None = None
    height: float | None = Field(default=None, gt=0, le=300)
    weight: float | None = Field(default=None, gt=0, le=500)


class MealCreate(BaseModel):
    name: str = Field(min_length=1)
    type: MealType
    calories: float = Field(ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    foods: list[Food] = Field(default_factory=list)


class MealUpdate(BaseModel):
    """Explicit partial update of a meal; the meal id never changes."""

    name: str | None = Field(default=None, min_length=1)
    type: MealType | None = None
    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    foods: list[Food] | None = None
