"""Tests for calorie and macronutrient estimates."""

import pytest

from app.services.nutrition import (
    calculate_bmr,
    calculate_nutrition_goals,
    estimate_base_calories,
    round_half_up,
    round_one_decimal,
    split_meal_calories,
)


class TestRounding:
    """Test half-up rounding helpers."""

    def test_ties_round_up(self):
        assert round_half_up(346.5) == 347
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3

    def test_negative_ties_round_toward_positive(self):
        assert round_half_up(-2.5) == -2
        assert round_half_up(-371.6) == -372

    def test_non_ties_round_to_nearest(self):
        assert round_half_up(485.1) == 485
        assert round_half_up(415.8) == 416

    def test_one_decimal(self):
        assert round_one_decimal(115.6666) == 115.7
        assert round_one_decimal(13.88) == 13.9
        assert round_one_decimal(2.0) == 2.0


class TestBMR:
    """Test basal metabolic rate estimation."""

    def test_female_formula(self, profile_factory):
        bmr = calculate_bmr(profile_factory(gender="female", weight=60, height=165, age=25))
        assert bmr == pytest.approx(1405.333, abs=0.001)

    def test_male_uses_defaults_for_missing_measurements(self, profile_factory):
        bmr = calculate_bmr(profile_factory(gender="male", weight=None, height=None, age=None))
        # 88.362 + 13.397*70 + 4.799*175 - 5.677*25
        assert bmr == pytest.approx(1724.052, abs=0.001)

    def test_unspecified_gender_uses_female_formula(self, profile_factory):
        assert calculate_bmr(profile_factory(gender=None)) == calculate_bmr(profile_factory(gender="female"))
        assert calculate_bmr(profile_factory(gender="other")) == calculate_bmr(profile_factory(gender="female"))


class TestBaseCalories:
    """Test daily calorie targets per goal."""

    @pytest.mark.parametrize(
        "goal, expected",
        [
            ("weight_loss", 1386),
            ("muscle_gain", 2408),
            ("maintenance", 1827),
        ],
    )
    def test_goal_multipliers(self, profile_factory, goal, expected):
        assert estimate_base_calories(profile_factory(goal=goal)) == expected

    def test_missing_goal_plans_for_maintenance(self, profile_factory):
        assert estimate_base_calories(profile_factory(goal=None)) == 1827

    def test_unknown_goal_falls_back_with_warning(self, profile_factory, caplog):
        with caplog.at_level("WARNING"):
            calories = estimate_base_calories(profile_factory(goal="bulking"))

        assert calories == 1827
        assert "bulking" in caplog.text

    def test_male_defaults_maintenance(self, profile_factory):
        profile = profile_factory(gender="male", weight=None, height=None, age=None, goal="maintenance")
        assert estimate_base_calories(profile) == 2241


class TestMealSplit:
    """Test allocation of calories to meal slots."""

    def test_split_rounds_each_slot(self):
        split = split_meal_calories(1386)

        assert split == {"breakfast": 347, "lunch": 485, "dinner": 416, "snack": 139}
        # Independent rounding may drift from the daily total by a calorie
        assert abs(sum(split.values()) - 1386) <= 2


class TestNutritionGoals:
    """Test daily macro targets."""

    def test_weight_loss_goals(self, profile_factory):
        goals = calculate_nutrition_goals(profile_factory(goal="weight_loss"))
        assert goals == {"calories": 1386, "protein": 104, "carbs": 121, "fat": 54}

    def test_muscle_gain_goals(self, profile_factory):
        goals = calculate_nutrition_goals(profile_factory(goal="muscle_gain"))

        assert goals["calories"] == 2408
        assert goals["protein"] == 151  # 2408 * 0.25 / 4 = 150.5
        assert goals["carbs"] == 301
        assert goals["fat"] == 67  # 2408 * 0.25 / 9 = 66.9
