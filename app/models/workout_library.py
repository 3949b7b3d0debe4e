"""Static exercise templates consumed by the plan generator."""
from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict


Difficulty = Literal["beginner", "intermediate", "advanced"]


class ExerciseTemplate(BaseModel):
    """Catalog entry; duration is in seconds."""

    model_config = ConfigDict(frozen=True)

    name: str
    sets: int
    reps: int
    instructions: str
    muscle_group: str
    duration: int | None = None


class RecommendationTemplate(BaseModel):
    """Exercise whose volume scales with the user's difficulty level."""

    model_config = ConfigDict(frozen=True)

    name: str
    instructions: str
    muscle_group: str
    sets: tuple[int, int, int]  # beginner, intermediate, advanced
    reps: tuple[int, int, int]


def _ex(name: str, sets: int, reps: int, instructions: str, group: str, duration: int | None = None) -> ExerciseTemplate:
    return ExerciseTemplate(
        name=name,
        sets=sets,
        reps=reps,
        instructions=instructions,
        muscle_group=group,
        duration=duration,
    )


EXERCISE_LIBRARY: Mapping[str, tuple[ExerciseTemplate, ...]] = MappingProxyType({
    "cardiovascular": (
        _ex("Jumping Jacks", 3, 20, "Full body cardio exercise", "cardiovascular"),
        _ex("High Knees", 3, 15, "Drive the knees to hip height at a running pace", "cardiovascular"),
        _ex("Burpees", 3, 8, "High intensity full body exercise", "cardiovascular"),
    ),
    "chest": (
        _ex("Push-ups", 3, 12, "Standard push-ups, body in a straight line", "chest"),
        _ex("Incline Push-ups", 3, 10, "Hands on a bench; easier push-up variation", "chest"),
        _ex("Chest Dips", 3, 8, "Lean forward on parallel bars to load the chest", "chest"),
    ),
    "legs": (
        _ex("Squats", 3, 15, "Hips back, knees over toes, full depth", "legs"),
        _ex("Lunges", 3, 12, "Alternating forward lunges", "legs"),
        _ex("Calf Raises", 3, 20, "Slow raise and lower on the balls of the feet", "legs"),
    ),
    "core": (
        _ex("Planks", 3, 1, "Hold a straight-arm or forearm plank", "core", duration=60),
        _ex("Crunches", 3, 15, "Basic abdominal crunches", "core"),
        _ex("Mountain Climbers", 3, 20, "Drive knees to chest from a plank", "core"),
    ),
    "arms": (
        _ex("Tricep Dips", 3, 10, "Dip from a bench, elbows pointing back", "arms"),
        _ex("Arm Circles", 3, 15, "Small to large circles, both directions", "arms"),
        _ex("Wall Push-ups", 3, 12, "Push-ups against a wall", "arms"),
    ),
    "back": (
        _ex("Superman", 3, 12, "Lift arms and legs off the floor while prone", "back"),
        _ex("Reverse Fly", 3, 10, "Hinge forward and raise the arms out to the side", "back"),
        _ex("Cat-Cow Stretch", 2, 10, "Alternate arching and rounding the spine", "back"),
    ),
    "shoulders": (
        _ex("Shoulder Rolls", 3, 15, "Roll the shoulders forward then back", "shoulders"),
        _ex("Pike Push-ups", 3, 8, "Hips high, lower the head towards the floor", "shoulders"),
        _ex("Arm Raises", 3, 12, "Lateral raises to shoulder height", "shoulders"),
    ),
    "full_body": (
        _ex("Burpees", 3, 8, "Full body high intensity exercise", "full_body"),
        _ex("Jumping Jacks", 3, 20, "Full body cardio exercise", "full_body"),
        _ex("Bear Crawl", 3, 10, "Crawl forward on hands and feet, knees low", "full_body"),
    ),
    "flexibility": (
        _ex("Forward Fold", 2, 1, "Hamstring and back stretch", "flexibility", duration=30),
        _ex("Hip Circles", 2, 10, "Hip mobility exercise", "flexibility"),
        _ex("Shoulder Stretch", 2, 1, "Pull each arm across the chest", "flexibility", duration=20),
    ),
})

DEFAULT_FOCUS_AREA = "full_body"

# Muscle groups trained on each weekday (Monday first), per goal.
DAY_FOCUS_AREAS: Mapping[str, tuple[tuple[str, ...], ...]] = MappingProxyType({
    "weight_loss": (
        ("cardiovascular", "full_body"),
        ("core", "legs"),
        ("cardiovascular", "arms"),
        ("full_body", "core"),
        ("cardiovascular", "legs"),
        ("flexibility", "core"),
        ("cardiovascular",),
    ),
    "muscle_gain": (
        ("chest", "arms"),
        ("legs", "core"),
        ("back", "shoulders"),
        ("arms", "core"),
        ("legs", "chest"),
        ("shoulders", "back"),
        ("flexibility", "core"),
    ),
    "maintenance": (
        ("full_body",),
        ("cardiovascular",),
        ("core", "flexibility"),
        ("full_body",),
        ("cardiovascular",),
        ("flexibility",),
        ("core",),
    ),
})

GOAL_RELEVANT_GROUPS: Mapping[str, frozenset[str]] = MappingProxyType({
    "weight_loss": frozenset({"cardiovascular", "full_body", "core"}),
    "muscle_gain": frozenset({"chest", "legs", "arms", "back", "shoulders"}),
    "maintenance": frozenset({"full_body", "core", "flexibility"}),
})

RECOMMENDATION_LIBRARY: tuple[RecommendationTemplate, ...] = (
    RecommendationTemplate(
        name="Push-ups", instructions="Standard push-up exercise", muscle_group="chest",
        sets=(2, 3, 4), reps=(8, 12, 15),
    ),
    RecommendationTemplate(
        name="Squats", instructions="Basic squat exercise", muscle_group="legs",
        sets=(2, 3, 4), reps=(10, 15, 20),
    ),
    RecommendationTemplate(
        name="Tricep Dips", instructions="Bench dips for the triceps", muscle_group="arms",
        sets=(2, 3, 4), reps=(8, 10, 12),
    ),
    RecommendationTemplate(
        name="Superman", instructions="Prone back extension hold", muscle_group="back",
        sets=(2, 3, 4), reps=(10, 12, 15),
    ),
    RecommendationTemplate(
        name="Pike Push-ups", instructions="Inverted push-up for the shoulders", muscle_group="shoulders",
        sets=(2, 3, 4), reps=(6, 8, 12),
    ),
    RecommendationTemplate(
        name="Jumping Jacks", instructions="Steady-pace cardio intervals", muscle_group="cardiovascular",
        sets=(2, 3, 4), reps=(20, 30, 40),
    ),
    RecommendationTemplate(
        name="Burpees", instructions="Squat, plank, push-up, jump", muscle_group="full_body",
        sets=(2, 3, 4), reps=(6, 10, 15),
    ),
    RecommendationTemplate(
        name="Mountain Climbers", instructions="Fast alternating knee drives from a plank", muscle_group="core",
        sets=(2, 3, 4), reps=(15, 20, 30),
    ),
    RecommendationTemplate(
        name="Hip Circles", instructions="Controlled hip mobility circles", muscle_group="flexibility",
        sets=(1, 2, 3), reps=(10, 10, 12),
    ),
)

DIFFICULTY_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")
