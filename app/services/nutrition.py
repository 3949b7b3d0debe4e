"""Calorie and macronutrient estimates derived from a user profile."""

from __future__ import annotations

import logging
import math

from app.models.plan import UserProfile, resolve_goal


logger = logging.getLogger(__name__)

# Fallbacks for profiles that have not filled in their measurements yet.
DEFAULT_WEIGHT_KG = {"male": 70.0, "female": 60.0}
DEFAULT_HEIGHT_CM = {"male": 175.0, "female": 165.0}
DEFAULT_AGE = 25

# Share of the day's calories per meal slot.
MEAL_CALORIE_SPLIT: dict[str, float] = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.30,
    "snack": 0.10,
}

# (protein, carbs, fat) share of calories per goal.
MACRO_SPLIT: dict[str, tuple[float, float, float]] = {
    "weight_loss": (0.30, 0.35, 0.35),
    "muscle_gain": (0.25, 0.50, 0.25),
    "maintenance": (0.25, 0.45, 0.30),
}

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties going up (towards +inf, so -2.5 gives -2).

    Python's built-in ``round`` uses banker's rounding, which would turn
    346.5 into 346; calorie targets are expected to round 0.5 upwards.

    Example:
        >>> round_half_up(346.5)
        347
    """
    return int(math.floor(value + 0.5))


def round_one_decimal(value: float) -> float:
    """Round to one decimal place with ties going up."""
    return math.floor(value * 10 + 0.5) / 10


def calculate_bmr(profile: UserProfile) -> float:
    """
    Estimate basal metabolic rate (kcal/day) with the revised Harris-Benedict formula.

    Men use ``88.362 + 13.397*kg + 4.799*cm - 5.677*age``; everyone else uses
    ``447.593 + 9.247*kg + 3.098*cm - 4.330*age``. Missing (or zero)
    measurements fall back to 70 kg / 175 cm for men, 60 kg / 165 cm
    otherwise, and 25 years.

    Args:
        profile: User profile with optional weight, height, age and gender

    Returns:
        Unrounded BMR in kcal/day
    """
    if profile.gender == "male":
        weight = profile.weight or DEFAULT_WEIGHT_KG["male"]
        height = profile.height or DEFAULT_HEIGHT_CM["male"]
        age = profile.age or DEFAULT_AGE
        return 88.362 + (13.397 * weight) + (4.799 * height) - (5.677 * age)

    weight = profile.weight or DEFAULT_WEIGHT_KG["female"]
    height = profile.height or DEFAULT_HEIGHT_CM["female"]
    age = profile.age or DEFAULT_AGE
    return 447.593 + (9.247 * weight) + (3.098 * height) - (4.330 * age)


def estimate_base_calories(profile: UserProfile) -> int:
    """
    Daily calorie target for the user's goal.

    - weight_loss: ``bmr * 1.2 - 300``
    - muscle_gain: ``bmr * 1.5 + 300``
    - maintenance (also missing or unknown goals): ``bmr * 1.3``

    There is no floor; extreme inputs can in principle produce a negative
    target.

    Args:
        profile: User profile

    Returns:
        Calories per day, rounded half-up to an integer
    """
    bmr = calculate_bmr(profile)
    goal = resolve_goal(profile.goal)

    if goal == "weight_loss":
        calories = bmr * 1.2 - 300
    elif goal == "muscle_gain":
        calories = bmr * 1.5 + 300
    else:
        calories = bmr * 1.3

    logger.debug("Base calories | user=%s goal=%s bmr=%.1f calories=%.1f", profile.id, goal, bmr, calories)
    return round_half_up(calories)


def split_meal_calories(calories: int) -> dict[str, int]:
    """Allocate a day's calories across breakfast, lunch, dinner and snack."""
    return {meal_type: round_half_up(calories * share) for meal_type, share in MEAL_CALORIE_SPLIT.items()}


def calculate_nutrition_goals(profile: UserProfile) -> dict[str, int]:
    """
    Daily calorie and macro targets in grams.

    Returns:
        {"calories": int, "protein": int, "carbs": int, "fat": int}
    """
    calories = estimate_base_calories(profile)
    protein_share, carbs_share, fat_share = MACRO_SPLIT[resolve_goal(profile.goal)]

    return {
        "calories": calories,
        "protein": round_half_up(calories * protein_share / KCAL_PER_GRAM_PROTEIN),
        "carbs": round_half_up(calories * carbs_share / KCAL_PER_GRAM_CARBS),
        "fat": round_half_up(calories * fat_share / KCAL_PER_GRAM_FAT),
    }
