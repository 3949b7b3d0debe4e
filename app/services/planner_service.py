"""Operations exposed to callers: plan generation, edits, completion and analytics."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.models.plan import (
    WEEKDAYS,
    DayPlan,
    Exercise,
    Meal,
    MealCreate,
    MealUpdate,
    UserProfile,
    parse_day,
)
from app.services.errors import MealNotFound
from app.services.plan_generator import PlanGenerator, difficulty_for
from app.services.progress_analyzer import ProgressAnalyzer
from app.services.repository import PlanRepository, ProfileRepository


logger = logging.getLogger(__name__)


class PlannerService:
    """Load a user's data, run the generator or analyzer over it, and persist the result."""

    def __init__(
        self,
        db: Session | None = None,
        generator: PlanGenerator | None = None,
        analyzer: ProgressAnalyzer | None = None,
    ):
        """Initialize with optional database session and collaborators."""
        self.db = db or SessionLocal()
        self.profiles = ProfileRepository(self.db)
        self.plans = PlanRepository(self.db)
        self.generator = generator or PlanGenerator()
        self.analyzer = analyzer or ProgressAnalyzer()

    def _load(self, user_id: int) -> tuple[UserProfile, list[DayPlan]]:
        """Profile plus every stored day, read together before any analytics run."""
        profile = self.profiles.find_profile(user_id)
        return profile, self.plans.find_day_plans(user_id)

    def generate_week(self, user_id: int) -> list[DayPlan]:
        """Generate and store a fresh seven-day plan (completion is reset on every day)."""
        profile = self.profiles.find_profile(user_id)
        saved = [
            self._upsert(user_id, plan.day, plan.exercises, plan.meals)
            for plan in self.generator.generate_week(profile)
        ]
        logger.info("Generated week for user %d (%d days)", user_id, len(saved))
        return saved

    def generate_meal_plan(self, user_id: int) -> list[DayPlan]:
        """Regenerate meals for every day, keeping each day's exercises."""
        profile, existing = self._load(user_id)
        if not existing:
            logger.info("No plans for user %d - generating a full week first", user_id)
            existing = self.generate_week(user_id)

        exercises_by_day = {plan.day: plan.exercises for plan in existing}
        saved = [
            self._upsert(
                user_id,
                day,
                exercises_by_day.get(day, []),
                self.generator.generate_day_meals(profile, day),
            )
            for day in WEEKDAYS
        ]
        logger.info("Generated meal plan for user %d", user_id)
        return saved

    def regenerate_intensity(self, user_id: int) -> list[DayPlan]:
        """Scale each day's exercises by that day's completion percentage."""
        _, plans = self._load(user_id)
        stats = self.analyzer.daily_workout_stats(plans)

        adjusted = []
        for plan in plans:
            completion = stats[plan.day]["completion_percentage"]
            exercises = self.generator.adjust_intensity(plan.exercises, completion)
            adjusted.append(self._upsert(user_id, plan.day, exercises, plan.meals))

        logger.info("Regenerated workout intensity for user %d (%d days)", user_id, len(adjusted))
        return adjusted

    def upsert_day(self, user_id: int, day: str, exercises: list[Exercise], meals: list[Meal]) -> DayPlan:
        """
        Create or overwrite one day's plan.

        Any previous completion state for the day is discarded.

        Raises:
            ProfileNotFound: Unknown user
            InvalidDay: ``day`` is not a weekday name
        """
        self.profiles.find_profile(user_id)
        return self._upsert(user_id, day, exercises, meals)

    def _upsert(self, user_id: int, day: str, exercises: list[Exercise], meals: list[Meal]) -> DayPlan:
        day = parse_day(day)
        plan = DayPlan(
            user_id=user_id,
            day=day,
            exercises=exercises,
            meals=meals,
        )
        saved = self.plans.save_day_plan(plan)
        logger.info(
            "Upserted %s for user %d (%d exercises, %d meals)",
            day,
            user_id,
            len(exercises),
            len(meals),
        )
        return saved

    def get_plans(self, user_id: int) -> list[DayPlan]:
        _, plans = self._load(user_id)
        return plans

    def get_plan(self, user_id: int, day: str) -> DayPlan:
        self.profiles.find_profile(user_id)
        return self.plans.find_day_plan(user_id, day)

    def delete_plan(self, user_id: int, day: str) -> None:
        plan = self.get_plan(user_id, day)
        self.plans.delete_day_plan(plan.id, user_id)
        logger.info("Deleted %s plan for user %d", plan.day, user_id)

    def set_exercise_completed(self, user_id: int, day: str, exercise_id: str, completed: bool) -> DayPlan:
        plan = self.get_plan(user_id, day)
        plan.set_exercise_completed(exercise_id, completed)
        logger.info(
            "Exercise %s marked as %s for user %d on %s",
            exercise_id,
            "completed" if completed else "incomplete",
            user_id,
            plan.day,
        )
        return self.plans.save_day_plan(plan)

    def set_meal_completed(self, user_id: int, day: str, meal_id: str, completed: bool) -> DayPlan:
        plan = self.get_plan(user_id, day)
        plan.set_meal_completed(meal_id, completed)
        logger.info(
            "Meal %s marked as %s for user %d on %s",
            meal_id,
            "consumed" if completed else "not consumed",
            user_id,
            plan.day,
        )
        return self.plans.save_day_plan(plan)

    def reset_workout_progress(self, user_id: int) -> list[DayPlan]:
        """Clear every exercise completion flag; meal flags are kept."""
        _, plans = self._load(user_id)
        saved = []
        for plan in plans:
            plan.completed_status.exercises = {}
            plan.refresh_completion()
            saved.append(self.plans.save_day_plan(plan))

        logger.info("Reset workout progress for user %d", user_id)
        return saved

    def replace_exercises(self, user_id: int, day: str, exercises: list[Exercise]) -> DayPlan:
        plan = self.get_plan(user_id, day)
        plan.exercises = exercises
        plan.prune_completion()
        return self.plans.save_day_plan(plan)

    def add_meal(self, user_id: int, day: str, meal: MealCreate) -> DayPlan:
        """Append a meal with a new id; the day is no longer fully completed until it is consumed."""
        plan = self.get_plan(user_id, day)
        existing_ids = {m.id for m in plan.meals}
        suffix = len(plan.meals) + 1
        while f"{plan.day.lower()}-{meal.type}-custom-{suffix}" in existing_ids:
            suffix += 1
        meal_id = f"{plan.day.lower()}-{meal.type}-custom-{suffix}"

        plan.meals.append(Meal(id=meal_id, **meal.model_dump()))
        plan.refresh_completion()
        logger.info("Added meal %s for user %d on %s", meal_id, user_id, plan.day)
        return self.plans.save_day_plan(plan)

    def update_meal(self, user_id: int, day: str, meal_id: str, update: MealUpdate) -> DayPlan:
        plan = self.get_plan(user_id, day)
        for index, meal in enumerate(plan.meals):
            if meal.id == meal_id:
                changes = update.model_dump(exclude_unset=True, exclude_none=True)
                plan.meals[index] = Meal.model_validate({**meal.model_dump(), **changes, "id": meal_id})
                break
        else:
            raise MealNotFound(f"Meal {meal_id} not found on {plan.day}")

        plan.refresh_completion()
        return self.plans.save_day_plan(plan)

    def delete_meal(self, user_id: int, day: str, meal_id: str) -> DayPlan:
        plan = self.get_plan(user_id, day)
        remaining = [meal for meal in plan.meals if meal.id != meal_id]
        if len(remaining) == len(plan.meals):
            raise MealNotFound(f"Meal {meal_id} not found on {plan.day}")

        plan.meals = remaining
        plan.prune_completion()
        logger.info("Deleted meal %s for user %d on %s", meal_id, user_id, plan.day)
        return self.plans.save_day_plan(plan)

    def get_weekly_progress(self, user_id: int) -> dict[str, int]:
        _, plans = self._load(user_id)
        return self.analyzer.weekly_progress(plans)

    def get_exercise_progress(self, user_id: int) -> dict[str, Any]:
        _, plans = self._load(user_id)
        return self.analyzer.exercise_progress(plans)

    def get_meal_progress(self, user_id: int) -> dict[str, Any]:
        _, plans = self._load(user_id)
        return self.analyzer.meal_progress(plans)

    def get_goal_progress(self, user_id: int) -> dict[str, Any]:
        profile, plans = self._load(user_id)
        return self.analyzer.goal_progress(profile, plans)

    def get_streaks(self, user_id: int) -> dict[str, int]:
        _, plans = self._load(user_id)
        return self.analyzer.streaks(self.analyzer.workout_completion(plans))

    def get_time_progress(self, user_id: int) -> dict[str, int]:
        _, plans = self._load(user_id)
        return self.analyzer.time_progress(plans)

    def get_workout_progress(self, user_id: int) -> dict[str, Any]:
        """Workout summary together with per-day exercise stats."""
        _, plans = self._load(user_id)
        return {
            **self.analyzer.workout_progress(plans),
            "daily_stats": self.analyzer.daily_workout_stats(plans),
        }

    def get_workout_statistics(self, user_id: int) -> dict[str, Any]:
        _, plans = self._load(user_id)
        return self.analyzer.workout_statistics(plans)

    def get_progress_metrics(self, user_id: int) -> dict[str, Any]:
        profile, plans = self._load(user_id)
        return self.analyzer.progress_metrics(profile, plans)

    def get_weekly_report(self, user_id: int, today: date | None = None) -> dict[str, Any]:
        profile, plans = self._load(user_id)
        return self.analyzer.weekly_report(profile, plans, today=today)

    def get_nutrition_goals(self, user_id: int) -> dict[str, int]:
        return self.generator.nutrition_goals(self.profiles.find_profile(user_id))

    def get_meal_statistics(self, user_id: int) -> dict[str, Any]:
        profile, plans = self._load(user_id)
        return self.analyzer.meal_statistics(
            self.analyzer.meal_progress(plans),
            self.generator.nutrition_goals(profile),
        )

    def get_meal_recommendations(self, user_id: int, day: str) -> dict[str, Any]:
        profile, plans = self._load(user_id)
        return self.analyzer.meal_recommendations(
            day,
            self.analyzer.meal_progress(plans),
            self.generator.nutrition_goals(profile),
        )

    def get_exercise_recommendations(self, user_id: int) -> dict[str, Any]:
        """Exercises sized to the user's overall exercise completion rate."""
        profile, plans = self._load(user_id)
        completion = self.analyzer.exercise_progress(plans)["completion_rate"]
        exercises = self.generator.exercise_recommendations(profile.goal, completion)
        return {
            "completion_rate": completion,
            "difficulty": difficulty_for(completion),
            "exercises": exercises,
        }
