"""Read-only analytics over a user's weekly DayPlans."""
from __future__ import annotations

import copy
import logging
from datetime import date, timedelta
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable

import yaml

from app.config import get_settings
from app.models.plan import WEEKDAYS, DayPlan, Exercise, UserProfile, parse_day, resolve_goal
from app.services.errors import PlanNotFound
from app.services.nutrition import round_half_up


logger = logging.getLogger(__name__)

MACROS = ("protein", "carbs", "fat")

# Seconds per rep and rest per set used when an exercise has no duration.
SECONDS_PER_REP = 2
REST_SECONDS_PER_SET = 30

DEFAULT_RULES: dict[str, Any] = {
    "goal_progress": {
        "weight_loss": {
            "base_weeks": 12,
            "min_weeks": 1,
            "weeks_divisor": 10,
            "low_workout_rate": {"below": 70, "message": "Increase cardio workout frequency"},
            "low_exercise_rate": {"below": 60, "message": "Focus on completing high-intensity exercises"},
        },
        "muscle_gain": {
            "base_weeks": 16,
            "min_weeks": 2,
            "weeks_divisor": 8,
            "short_streak": {"below": 3, "message": "Maintain consistent workout schedule"},
            "weak_group": {"group": "chest", "ratio_below": 0.7, "message": "Focus on strength training exercises"},
        },
        "maintenance": {
            "low_workout_rate": {"below": 50, "message": "Maintain regular exercise routine"},
            "always": "Continue balanced approach to fitness",
        },
    },
    "achievements": {
        "perfect_week": {"at_least": 100, "message": "Perfect Week! Completed all workouts"},
        "excellent_week": {"at_least": 80, "message": "Excellent Progress! Completed most workouts"},
        "streak": {"at_least": 5, "message": "Amazing Streak! {streak} days in a row"},
        "exercise_master": {"at_least": 90, "message": "Exercise Master! Completed almost all exercises"},
        "fallback": "Keep going! Every step counts towards your goal",
    },
    "improvements": {
        "low_workout_rate": {"below": 50, "message": "Try to complete at least 4 workouts per week"},
        "low_exercise_rate": {"below": 60, "message": "Focus on completing individual exercises within workouts"},
        "short_streak": {"below": 2, "message": "Aim for consecutive workout days to build momentum"},
        "muscle_balance": {"ratio_below": 0.5, "message": "Focus more on: {groups} exercises"},
    },
    "next_week_goals": {
        "completion_step": 20,
        "completion_message": "Achieve {rate}% workout completion rate",
        "streak_target": 3,
        "build_streak_message": "Build a 3-day workout streak",
        "streak_extension": 2,
        "extend_streak_message": "Extend current streak to {days} days",
        "by_goal": {
            "weight_loss": ["Complete all cardio exercises", "Maintain consistent daily activity"],
            "muscle_gain": ["Focus on strength training consistency", "Complete all resistance exercises"],
            "maintenance": ["Maintain balanced workout routine", "Include flexibility exercises"],
        },
    },
    "meal_recommendations": {
        "min_remaining_calories": 100,
        "protein_snack": {
            "min_remaining": 10,
            "max_calories": 200,
            "max_grams": 20,
            "name": "Protein Snack",
            "suggestion": "Greek yogurt with nuts or protein shake",
        },
        "energy_snack": {
            "min_remaining": 15,
            "max_calories": 150,
            "max_grams": 30,
            "name": "Energy Snack",
            "suggestion": "Banana with peanut butter or oatmeal",
        },
    },
}


@lru_cache
def load_progress_rules(path: str | None = None) -> dict[str, Any]:
    """
    Load recommendation rules from YAML, section by section.

    A missing file or section falls back to the built-in defaults.

    Args:
        path: Rules file (defaults to ``settings.progress_rules_path``)

    Returns:
        Dictionary with one entry per rule section
    """
    config_path = Path(path or get_settings().progress_rules_path)
    if not config_path.exists():
        logger.warning("Progress rules file %s not found - using defaults", config_path)
        return copy.deepcopy(DEFAULT_RULES)

    with config_path.open("r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    rules: dict[str, Any] = {}
    for section, default in DEFAULT_RULES.items():
        if loaded.get(section):
            rules[section] = loaded[section]
        else:
            logger.warning("No %s section in %s - using defaults", section, config_path)
            rules[section] = copy.deepcopy(default)
    return rules


def percentage(part: float, whole: float) -> int:
    """Whole-number percentage; 0 when ``whole`` is 0."""
    if not whole:
        return 0
    return round_half_up(part / whole * 100)


def exercise_seconds(exercise: Exercise) -> int:
    """Explicit duration, or an estimate of 2 s per rep plus 30 s rest per set."""
    if exercise.duration:
        return exercise.duration
    return exercise.sets * exercise.reps * SECONDS_PER_REP + exercise.sets * REST_SECONDS_PER_SET


def _in_week_order(plans: Iterable[DayPlan]) -> list[DayPlan]:
    return sorted(plans, key=lambda plan: WEEKDAYS.index(plan.day))


class ProgressAnalyzer:
    """Stateless analytics; every call re-derives its result from the plans given."""

    def __init__(self, rules: dict[str, Any] | None = None):
        self.rules = rules or load_progress_rules()

    def weekly_progress(self, plans: list[DayPlan]) -> dict[str, int]:
        """Day, exercise and meal completion counts for the week."""
        total_exercises = sum(len(plan.exercises) for plan in plans)
        total_meals = sum(len(plan.meals) for plan in plans)
        completed_exercises = sum(plan.exercise_done(ex.id) for plan in plans for ex in plan.exercises)
        completed_meals = sum(plan.meal_done(meal.id) for plan in plans for meal in plan.meals)

        return {
            "total_days": len(plans),
            "completed_days": sum(1 for plan in plans if plan.completed_status.date_completed is not None),
            "completed_exercises": completed_exercises,
            "total_exercises": total_exercises,
            "completed_meals": completed_meals,
            "total_meals": total_meals,
            "exercise_completion_rate": percentage(completed_exercises, total_exercises),
            "meal_completion_rate": percentage(completed_meals, total_meals),
        }

    def exercise_progress(self, plans: list[DayPlan]) -> dict[str, Any]:
        """Exercise completion overall and per muscle group (untagged exercises count as ``other``)."""
        total = 0
        completed = 0
        groups: dict[str, dict[str, int]] = {}

        for plan in _in_week_order(plans):
            for exercise in plan.exercises:
                group = groups.setdefault(exercise.muscle_group or "other", {"completed": 0, "total": 0})
                total += 1
                group["total"] += 1
                if plan.exercise_done(exercise.id):
                    completed += 1
                    group["completed"] += 1

        return {
            "total_exercises": total,
            "completed_exercises": completed,
            "completion_rate": percentage(completed, total),
            "muscle_group_progress": groups,
        }

    def workout_completion(self, plans: list[DayPlan]) -> dict[str, bool]:
        """Map each planned day to whether all of its exercises are done (rest days count as done)."""
        return {
            plan.day: all(plan.exercise_done(ex.id) for ex in plan.exercises)
            for plan in _in_week_order(plans)
        }

    @staticmethod
    def streaks(weekly_completion: dict[str, bool]) -> dict[str, int]:
        """
        Current and longest runs of completed days, Monday through Sunday.

        The current streak is the run that ends on Sunday, so it is 0 when
        Sunday is incomplete. Days missing from the mapping count as
        incomplete.

        Example:
            >>> ProgressAnalyzer.streaks({"Monday": True, "Tuesday": True, "Thursday": True,
            ...     "Friday": True, "Saturday": True, "Sunday": True})
            {'current_streak': 4, 'longest_streak': 4}
        """
        run = 0
        longest = 0
        current = None
        for day in reversed(WEEKDAYS):
            if weekly_completion.get(day):
                run += 1
                continue
            if current is None:
                current = run
            longest = max(longest, run)
            run = 0

        longest = max(longest, run)
        if current is None:
            current = run
        return {"current_streak": current, "longest_streak": longest}

    def workout_progress(self, plans: list[DayPlan]) -> dict[str, Any]:
        weekly_completion = self.workout_completion(plans)
        completed = sum(1 for done in weekly_completion.values() if done)

        return {
            "total_workouts": len(plans),
            "completed_workouts": completed,
            "completion_rate": percentage(completed, len(plans)),
            **self.streaks(weekly_completion),
            "weekly_completion": weekly_completion,
        }

    def workout_statistics(self, plans: list[DayPlan]) -> dict[str, Any]:
        """
        Workout progress plus how the planned exercises are distributed.

        Durations only count exercises with an explicit ``duration``; the
        average is taken over every planned day, rest days included.
        """
        progress = self.workout_progress(plans)
        groups = self.exercise_progress(plans)["muscle_group_progress"]
        total_duration = sum(ex.duration or 0 for plan in plans for ex in plan.exercises)

        return {
            **progress,
            "muscle_group_distribution": {group: counts["total"] for group, counts in groups.items()},
            "total_workout_duration": total_duration,
            "average_workout_duration": round_half_up(total_duration / len(plans)) if plans else 0,
            "workout_frequency": progress["completed_workouts"],
        }

    def daily_workout_stats(self, plans: list[DayPlan]) -> dict[str, dict[str, Any]]:
        """Per-day exercise completion; a day without exercises reports 0% and not completed."""
        stats = {}
        for plan in _in_week_order(plans):
            total = len(plan.exercises)
            done = sum(1 for ex in plan.exercises if plan.exercise_done(ex.id))
            completion = percentage(done, total)
            stats[plan.day] = {
                "completed": completion == 100,
                "completion_percentage": completion,
                "exercises_completed": done,
                "total_exercises": total,
            }
        return stats

    def time_progress(self, plans: list[DayPlan]) -> dict[str, int]:
        """Planned workout seconds and how many days had at least one exercise done."""
        total_time = 0
        workout_days = 0
        for plan in plans:
            day_time = sum(exercise_seconds(ex) for ex in plan.exercises)
            if day_time > 0:
                total_time += day_time
                workout_days += 1

        return {
            "total_workout_time": total_time,
            "average_workout_time": round_half_up(total_time / workout_days) if workout_days else 0,
            "workout_frequency": sum(
                1 for plan in plans if any(plan.exercise_done(ex.id) for ex in plan.exercises)
            ),
        }

    def goal_progress(self, profile: UserProfile, plans: list[DayPlan]) -> dict[str, Any]:
        """
        Progress towards the user's goal with rule-based recommendations.

        - weight_loss: mean of workout and exercise completion rates; about
          12 weeks to goal, shrinking as progress grows (minimum 1)
        - muscle_gain: exercise completion rate; about 16 weeks (minimum 2)
        - maintenance: workout completion rate; no end date

        Returns:
            {"goal_type", "progress_towards_goal", "estimated_time_to_goal", "recommendations"}
        """
        goal = resolve_goal(profile.goal)
        rules = self.rules["goal_progress"][goal]
        workout = self.workout_progress(plans)
        exercise = self.exercise_progress(plans)
        recommendations: list[str] = []

        if goal == "weight_loss":
            progress = min(100, (workout["completion_rate"] + exercise["completion_rate"]) / 2)
            if workout["completion_rate"] < rules["low_workout_rate"]["below"]:
                recommendations.append(rules["low_workout_rate"]["message"])
            if exercise["completion_rate"] < rules["low_exercise_rate"]["below"]:
                recommendations.append(rules["low_exercise_rate"]["message"])
        elif goal == "muscle_gain":
            progress = min(100, exercise["completion_rate"])
            if workout["current_streak"] < rules["short_streak"]["below"]:
                recommendations.append(rules["short_streak"]["message"])
            weak = rules["weak_group"]
            group = exercise["muscle_group_progress"].get(weak["group"])
            if group and group["completed"] < group["total"] * weak["ratio_below"]:
                recommendations.append(weak["message"])
        else:
            progress = min(100, workout["completion_rate"])
            if workout["completion_rate"] < rules["low_workout_rate"]["below"]:
                recommendations.append(rules["low_workout_rate"]["message"])
            recommendations.append(rules["always"])

        if goal == "maintenance":
            weeks = 0.0
        elif progress > 0:
            weeks = max(rules["min_weeks"], rules["base_weeks"] - progress / rules["weeks_divisor"])
        else:
            weeks = rules["base_weeks"]

        return {
            "goal_type": goal,
            "progress_towards_goal": round_half_up(progress),
            "estimated_time_to_goal": round_half_up(weeks),
            "recommendations": recommendations,
        }

    def meal_progress(self, plans: list[DayPlan]) -> dict[str, Any]:
        """Meal, calorie and macro consumption for the week and per day."""
        totals = {"meals": 0, "consumed_meals": 0, "calories": 0.0, "consumed_calories": 0.0}
        breakdown = {macro: {"total": 0.0, "consumed": 0.0} for macro in MACROS}
        daily_stats: dict[str, dict[str, Any]] = {}

        for plan in _in_week_order(plans):
            day = {
                "total_calories": 0.0,
                "consumed_calories": 0.0,
                "meals_consumed": 0,
                "total_meals": len(plan.meals),
                **{f"consumed_{macro}": 0.0 for macro in MACROS},
            }
            for meal in plan.meals:
                consumed = plan.meal_done(meal.id)
                day["total_calories"] += meal.calories
                for macro in MACROS:
                    breakdown[macro]["total"] += getattr(meal, macro) or 0
                if consumed:
                    day["meals_consumed"] += 1
                    day["consumed_calories"] += meal.calories
                    for macro in MACROS:
                        amount = getattr(meal, macro) or 0
                        breakdown[macro]["consumed"] += amount
                        day[f"consumed_{macro}"] += amount

            day["consumption_percentage"] = percentage(day["consumed_calories"], day["total_calories"])
            daily_stats[plan.day] = day
            totals["meals"] += day["total_meals"]
            totals["consumed_meals"] += day["meals_consumed"]
            totals["calories"] += day["total_calories"]
            totals["consumed_calories"] += day["consumed_calories"]

        return {
            "total_meals": totals["meals"],
            "consumed_meals": totals["consumed_meals"],
            "total_calories": totals["calories"],
            "consumed_calories": totals["consumed_calories"],
            "consumption_percentage": percentage(totals["consumed_calories"], totals["calories"]),
            "daily_stats": daily_stats,
            "nutrition_breakdown": breakdown,
        }

    def progress_metrics(self, profile: UserProfile, plans: list[DayPlan]) -> dict[str, Any]:
        return {
            "workout_progress": self.workout_progress(plans),
            "exercise_progress": self.exercise_progress(plans),
            "time_progress": self.time_progress(plans),
            "goal_progress": self.goal_progress(profile, plans),
        }

    def weekly_report(self, profile: UserProfile, plans: list[DayPlan], today: date | None = None) -> dict[str, Any]:
        """
        Summary of the current week with achievements and goals for the next one.

        Args:
            profile: User profile
            plans: The user's DayPlans
            today: Reference date (defaults to today); the report spans its Monday to Sunday

        Returns:
            Dictionary with ISO week bounds, totals and three message lists
        """
        today = today or date.today()
        week_start = today - timedelta(days=today.weekday())
        metrics = self.progress_metrics(profile, plans)

        return {
            "week_start_date": week_start.isoformat(),
            "week_end_date": (week_start + timedelta(days=6)).isoformat(),
            "total_workouts": metrics["workout_progress"]["total_workouts"],
            "completed_workouts": metrics["workout_progress"]["completed_workouts"],
            "total_exercises": metrics["exercise_progress"]["total_exercises"],
            "completed_exercises": metrics["exercise_progress"]["completed_exercises"],
            "total_workout_time": metrics["time_progress"]["total_workout_time"],
            "achievements": self._achievements(metrics),
            "improvements": self._improvements(metrics),
            "next_week_goals": self._next_week_goals(profile, metrics),
        }

    def _achievements(self, metrics: dict[str, Any]) -> list[str]:
        rules = self.rules["achievements"]
        workout_rate = metrics["workout_progress"]["completion_rate"]
        streak = metrics["workout_progress"]["current_streak"]
        achievements = []

        if workout_rate >= rules["perfect_week"]["at_least"]:
            achievements.append(rules["perfect_week"]["message"])
        elif workout_rate >= rules["excellent_week"]["at_least"]:
            achievements.append(rules["excellent_week"]["message"])
        if streak >= rules["streak"]["at_least"]:
            achievements.append(rules["streak"]["message"].format(streak=streak))
        if metrics["exercise_progress"]["completion_rate"] >= rules["exercise_master"]["at_least"]:
            achievements.append(rules["exercise_master"]["message"])

        return achievements or [rules["fallback"]]

    def _improvements(self, metrics: dict[str, Any]) -> list[str]:
        rules = self.rules["improvements"]
        workout = metrics["workout_progress"]
        exercise = metrics["exercise_progress"]
        improvements = []

        if workout["completion_rate"] < rules["low_workout_rate"]["below"]:
            improvements.append(rules["low_workout_rate"]["message"])
        if exercise["completion_rate"] < rules["low_exercise_rate"]["below"]:
            improvements.append(rules["low_exercise_rate"]["message"])
        if workout["current_streak"] < rules["short_streak"]["below"]:
            improvements.append(rules["short_streak"]["message"])

        lagging = [
            name
            for name, group in exercise["muscle_group_progress"].items()
            if group["total"] > 0 and group["completed"] / group["total"] < rules["muscle_balance"]["ratio_below"]
        ]
        if lagging:
            improvements.append(rules["muscle_balance"]["message"].format(groups=", ".join(lagging)))

        return improvements

    def _next_week_goals(self, profile: UserProfile, metrics: dict[str, Any]) -> list[str]:
        rules = self.rules["next_week_goals"]
        workout = metrics["workout_progress"]
        target_rate = min(100, workout["completion_rate"] + rules["completion_step"])
        goals = [rules["completion_message"].format(rate=target_rate)]

        if workout["current_streak"] < rules["streak_target"]:
            goals.append(rules["build_streak_message"])
        else:
            goals.append(rules["extend_streak_message"].format(days=workout["current_streak"] + rules["streak_extension"]))

        goals.extend(rules["by_goal"].get(resolve_goal(profile.goal), []))
        return goals

    def meal_statistics(self, meal_progress: dict[str, Any], nutrition_goals: dict[str, int]) -> dict[str, Any]:
        """
        Compare consumption against the daily nutrition goals.

        ``adherence_score`` is the mean of the calorie consumption percentage
        and the consumed/goal percentage of each macro (0 for a zero goal).
        """
        breakdown = meal_progress["nutrition_breakdown"]
        deficits = {"calories": nutrition_goals["calories"] - meal_progress["consumed_calories"]}
        macro_scores = []
        for macro in MACROS:
            consumed = breakdown[macro]["consumed"]
            deficits[macro] = nutrition_goals[macro] - consumed
            macro_scores.append(consumed / nutrition_goals[macro] * 100 if nutrition_goals[macro] else 0)

        adherence = (meal_progress["consumption_percentage"] + sum(macro_scores)) / (len(macro_scores) + 1)
        return {
            **meal_progress,
            "nutrition_goals": nutrition_goals,
            "deficits": deficits,
            "adherence_score": round_half_up(adherence),
        }

    def meal_recommendations(
        self,
        day: str,
        meal_progress: dict[str, Any],
        nutrition_goals: dict[str, int],
    ) -> dict[str, Any]:
        """
        Snack suggestions from what is left of the day's nutrition goals.

        Raises:
            InvalidDay: ``day`` is not a weekday name
            PlanNotFound: there is no meal data for ``day``
        """
        day = parse_day(day)
        day_stats = meal_progress["daily_stats"].get(day)
        if day_stats is None:
            raise PlanNotFound(f"No meal data found for {day}")

        rules = self.rules["meal_recommendations"]
        remaining = {"calories": nutrition_goals["calories"] - day_stats["consumed_calories"]}
        for macro in MACROS:
            remaining[macro] = nutrition_goals[macro] - day_stats[f"consumed_{macro}"]

        recommendations = []
        if remaining["calories"] > rules["min_remaining_calories"]:
            for rule_name, macro in (("protein_snack", "protein"), ("energy_snack", "carbs")):
                rule = rules[rule_name]
                if remaining[macro] > rule["min_remaining"]:
                    recommendations.append({
                        "type": "snack",
                        "name": rule["name"],
                        "calories": min(remaining["calories"], rule["max_calories"]),
                        macro: min(remaining[macro], rule["max_grams"]),
                        "suggestion": rule["suggestion"],
                    })

        return {"day": day, "recommendations": recommendations, "remaining": remaining}
