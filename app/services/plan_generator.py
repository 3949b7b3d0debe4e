"""Deterministic weekly exercise and meal plan generation."""
from __future__ import annotations

import logging
import re
from typing import Callable
from uuid import uuid4

from app.models.meal_library import MEAL_LIBRARY, MealTemplate
from app.models.plan import (
    MEAL_TYPES,
    WEEKDAYS,
    DayPlan,
    Exercise,
    Food,
    Meal,
    UserProfile,
    parse_day,
    resolve_goal,
)
from app.models.workout_library import (
    DAY_FOCUS_AREAS,
    DEFAULT_FOCUS_AREA,
    DIFFICULTY_LEVELS,
    EXERCISE_LIBRARY,
    GOAL_RELEVANT_GROUPS,
    RECOMMENDATION_LIBRARY,
)
from app.services import nutrition
from app.services.nutrition import round_half_up, round_one_decimal


logger = logging.getLogger(__name__)

# Bounds applied when intensity is regenerated from completion rates.
SETS_RANGE = (1, 5)
REPS_RANGE = (5, 25)
DURATION_RANGE = (30, 300)  # seconds

INCREASE_THRESHOLD = 80
DECREASE_THRESHOLD = 40


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(value, high))


def difficulty_for(completion_percentage: float) -> str:
    """Map an overall completion percentage to a difficulty level."""
    if completion_percentage > 70:
        return "advanced"
    if completion_percentage > 40:
        return "intermediate"
    return "beginner"


class PlanGenerator:
    """
    Build exercise and meal plans from static templates.

    Plan content is a pure function of the profile and weekday. Only the
    generated ids vary between calls: each generation pass tags its ids with
    a fresh run id so that they never collide within a day or across days.
    """

    def __init__(self, run_id_factory: Callable[[], str] | None = None):
        self._run_id_factory = run_id_factory or (lambda: uuid4().hex[:8])

    def estimate_base_calories(self, profile: UserProfile) -> int:
        return nutrition.estimate_base_calories(profile)

    def nutrition_goals(self, profile: UserProfile) -> dict[str, int]:
        return nutrition.calculate_nutrition_goals(profile)

    def generate_week(self, profile: UserProfile) -> list[DayPlan]:
        """
        Produce seven DayPlans, Monday through Sunday, with empty completion.

        Args:
            profile: User profile; a missing or unknown goal plans for maintenance

        Returns:
            DayPlans in canonical weekday order (not yet persisted)
        """
        run_id = self._run_id_factory()
        plans = [
            DayPlan(
                user_id=profile.id,
                day=day,
                exercises=self.generate_day_exercises(profile, day, run_id=run_id),
                meals=self.generate_day_meals(profile, day, run_id=run_id),
            )
            for day in WEEKDAYS
        ]
        logger.debug(
            "Generated week | user=%s run=%s exercises=%d meals=%d",
            profile.id,
            run_id,
            sum(len(plan.exercises) for plan in plans),
            sum(len(plan.meals) for plan in plans),
        )
        return plans

    def generate_day_exercises(self, profile: UserProfile, day: str, run_id: str | None = None) -> list[Exercise]:
        """Expand the day's focus areas into catalog exercises, adjusted for the goal."""
        day = parse_day(day)
        goal = resolve_goal(profile.goal)
        run_id = run_id or self._run_id_factory()
        focus_areas = DAY_FOCUS_AREAS[goal][WEEKDAYS.index(day)]

        exercises: list[Exercise] = []
        for group in focus_areas:
            templates = EXERCISE_LIBRARY.get(group) or EXERCISE_LIBRARY[DEFAULT_FOCUS_AREA]
            for template in templates:
                sets = template.sets + 1 if goal == "muscle_gain" else template.sets
                reps = template.reps + 5 if goal == "weight_loss" else template.reps
                exercises.append(
                    Exercise(
                        id=f"{day.lower()}-{group}-{_slug(template.name)}-{run_id}",
                        name=template.name,
                        sets=sets,
                        reps=reps,
                        duration=template.duration,
                        instructions=template.instructions,
                        muscle_group=template.muscle_group,
                    )
                )
        return exercises

    def generate_day_meals(self, profile: UserProfile, day: str, run_id: str | None = None) -> list[Meal]:
        """Breakfast, lunch, dinner and snack scaled to the day's calorie split."""
        day = parse_day(day)
        goal = resolve_goal(profile.goal)
        run_id = run_id or self._run_id_factory()
        day_index = WEEKDAYS.index(day)
        allocation = nutrition.split_meal_calories(self.estimate_base_calories(profile))
        # Extreme profiles can estimate below zero; meals never carry negative amounts.
        allocation = {meal_type: max(calories, 0) for meal_type, calories in allocation.items()}

        meals = []
        for meal_type in MEAL_TYPES:
            variations = MEAL_LIBRARY[goal][meal_type]
            template = variations[day_index % len(variations)]
            meals.append(
                self._scale_meal(
                    template,
                    meal_id=f"{day.lower()}-{meal_type}-{run_id}",
                    meal_type=meal_type,
                    target_calories=allocation[meal_type],
                )
            )
        return meals

    @staticmethod
    def _scale_meal(template: MealTemplate, meal_id: str, meal_type: str, target_calories: int) -> Meal:
        factor = target_calories / template.calories

        def scaled(value: float | None) -> float | None:
            return None if value is None else round_one_decimal(value * factor)

        foods = [
            Food(
                name=food.name,
                quantity=round_one_decimal(food.quantity * factor),
                unit=food.unit,
                calories=round_half_up(food.calories * factor),
                protein=scaled(food.protein),
                carbs=scaled(food.carbs),
                fat=scaled(food.fat),
            )
            for food in template.foods
        ]
        return Meal(
            id=meal_id,
            name=template.name,
            type=meal_type,
            calories=target_calories,
            protein=round_half_up(template.protein * factor),
            carbs=round_half_up(template.carbs * factor),
            fat=round_half_up(template.fat * factor),
            foods=foods,
        )

    def exercise_recommendations(self, goal: str | None, completion_percentage: float) -> list[Exercise]:
        """
        Difficulty-scaled exercises for the muscle groups relevant to a goal.

        Args:
            goal: User goal (resolved with the maintenance fallback)
            completion_percentage: Overall workout completion rate (0-100)

        Returns:
            Exercises sized for beginner (<=40), intermediate (<=70) or advanced
        """
        difficulty = difficulty_for(completion_percentage)
        level = DIFFICULTY_LEVELS.index(difficulty)
        relevant = GOAL_RELEVANT_GROUPS[resolve_goal(goal)]

        return [
            Exercise(
                id=f"rec-{difficulty}-{_slug(template.name)}",
                name=template.name,
                sets=template.sets[level],
                reps=template.reps[level],
                instructions=template.instructions,
                muscle_group=template.muscle_group,
            )
            for template in RECOMMENDATION_LIBRARY
            if template.muscle_group in relevant
        ]

    def adjust_intensity(self, exercises: list[Exercise], completion_percentage: float) -> list[Exercise]:
        """
        Scale a day's exercises by how much of it was completed.

        Above 80% every exercise gets +1 set, +2 reps and +15 s duration;
        below 40% the same amounts are removed. Results are clamped into the
        bounds above. Anything in between is returned unchanged.
        """
        if completion_percentage > INCREASE_THRESHOLD:
            step = 1
        elif completion_percentage < DECREASE_THRESHOLD:
            step = -1
        else:
            return [exercise.model_copy() for exercise in exercises]

        adjusted = []
        for exercise in exercises:
            update = {"sets": _clamp(exercise.sets + step, SETS_RANGE)}
            if exercise.reps:
                update["reps"] = _clamp(exercise.reps + 2 * step, REPS_RANGE)
            if exercise.duration:
                update["duration"] = _clamp(exercise.duration + 15 * step, DURATION_RANGE)
            adjusted.append(exercise.model_copy(update=update))
        return adjusted
