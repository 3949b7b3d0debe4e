"""API endpoints for workout adjustments and exercise tracking."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from app.models.plan import DayPlan
from app.models.schemas import ExerciseCompletion, ExerciseListUpdate, ExerciseRecommendationsResponse
from app.routers.common import Planner, http_error
from app.services.errors import PlannerError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}/workouts", tags=["workouts"])


@router.post("/adjust-intensity", response_model=list[DayPlan])
async def adjust_intensity(user_id: int, planner: Planner):
    """
    Regenerate exercise volume from each day's completion rate.

    Days above 80% completion get harder, days below 40% get easier.
    """
    try:
        return planner.regenerate_intensity(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to adjust intensity for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to adjust workout intensity: {str(e)}")


@router.post("/reset-progress", response_model=list[DayPlan])
async def reset_progress(user_id: int, planner: Planner):
    """Clear exercise completion on every day (meal tracking is kept)."""
    try:
        return planner.reset_workout_progress(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to reset workout progress for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to reset workout progress: {str(e)}")


@router.get("/progress")
async def get_workout_progress(user_id: int, planner: Planner) -> dict[str, Any]:
    try:
        return planner.get_workout_progress(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get workout progress for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get workout progress: {str(e)}")


@router.get("/statistics")
async def get_workout_statistics(user_id: int, planner: Planner) -> dict[str, Any]:
    """Workout progress with muscle group distribution and planned durations."""
    try:
        return planner.get_workout_statistics(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get workout statistics for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get workout statistics: {str(e)}")


@router.get("/recommendations", response_model=ExerciseRecommendationsResponse)
async def get_recommendations(user_id: int, planner: Planner):
    """Suggest exercises for the user's goal, sized to their completion rate."""
    try:
        return planner.get_exercise_recommendations(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get exercise recommendations for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get exercise recommendations: {str(e)}")


@router.put("/{day}", response_model=DayPlan)
async def replace_exercises(user_id: int, day: str, payload: ExerciseListUpdate, planner: Planner):
    """Replace a day's exercises; completion flags of exercises that remain are kept."""
    try:
        return planner.replace_exercises(user_id, day, payload.exercises)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to update exercises for user %d on %s", user_id, day)
        raise HTTPException(status_code=500, detail=f"Failed to update exercises: {str(e)}")


@router.post("/{day}/complete-exercise", response_model=DayPlan)
async def complete_exercise(user_id: int, day: str, payload: ExerciseCompletion, planner: Planner):
    try:
        return planner.set_exercise_completed(user_id, day, payload.exercise_id, payload.completed)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to mark exercise for user %d on %s", user_id, day)
        raise HTTPException(status_code=500, detail=f"Failed to mark exercise: {str(e)}")
