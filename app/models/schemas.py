"""Pydantic models describing API payloads."""
from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.plan import Exercise, Meal


def _ensure_unique_ids(items: list, kind: str) -> list:
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate {kind} id '{item.id}'")
        seen.add(item.id)
    return items


# Plan Schemas
class DayPlanUpsert(BaseModel):
    """Schema for creating or overwriting a day's plan."""

    exercises: list[Exercise] = Field(default_factory=list)
    meals: list[Meal] = Field(default_factory=list)

    @field_validator("exercises")
    @classmethod
    def unique_exercise_ids(cls, value: list[Exercise]) -> list[Exercise]:
        return _ensure_unique_ids(value, "exercise")

    @field_validator("meals")
    @classmethod
    def unique_meal_ids(cls, value: list[Meal]) -> list[Meal]:
        return _ensure_unique_ids(value, "meal")


class ExerciseListUpdate(BaseModel):
    """Schema for replacing a day's exercises without touching its meals."""

    exercises: list[Exercise]

    @field_validator("exercises")
    @classmethod
    def unique_exercise_ids(cls, value: list[Exercise]) -> list[Exercise]:
        return _ensure_unique_ids(value, "exercise")


class CompletionUpdate(BaseModel):
    """Schema for toggling one exercise or one meal on a day."""

    exercise_id: str | None = None
    meal_id: str | None = None
    completed: bool

    @model_validator(mode="after")
    def exactly_one_target(self) -> "CompletionUpdate":
        if (self.exercise_id is None) == (self.meal_id is None):
            raise ValueError("provide exactly one of exercise_id or meal_id")
        return self


class ExerciseCompletion(BaseModel):
    exercise_id: str
    completed: bool = True


class MealConsumption(BaseModel):
    meal_id: str
    consumed: bool = True


class GoalUpdate(BaseModel):
    """Goal is validated by the service so that unknown values map to INVALID_GOAL."""

    goal: str


# Progress Schemas
class WeeklyProgressResponse(BaseModel):
    total_days: int
    completed_days: int
    completed_exercises: int
    total_exercises: int
    completed_meals: int
    total_meals: int
    exercise_completion_rate: int = Field(ge=0, le=100)
    meal_completion_rate: int = Field(ge=0, le=100)


class StreaksResponse(BaseModel):
    current_streak: int = Field(ge=0, le=7)
    longest_streak: int = Field(ge=0, le=7)


class GoalProgressResponse(BaseModel):
    goal_type: str
    progress_towards_goal: int = Field(ge=0, le=100)
    estimated_time_to_goal: int = Field(ge=0, description="Weeks")
    recommendations: list[str] = []


class TimeProgressResponse(BaseModel):
    total_workout_time: int = Field(description="Seconds")
    average_workout_time: int = Field(description="Seconds")
    workout_frequency: int


class NutritionGoalsResponse(BaseModel):
    calories: int
    protein: int
    carbs: int
    fat: int


class ExerciseRecommendationsResponse(BaseModel):
    completion_rate: int
    difficulty: str
    exercises: list[Exercise]
