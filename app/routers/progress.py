"""API endpoints for progress analytics."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, HTTPException

from app.models.schemas import (
    GoalProgressResponse,
    StreaksResponse,
    TimeProgressResponse,
    WeeklyProgressResponse,
)
from app.routers.common import Planner, http_error
from app.services.errors import PlannerError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}/progress", tags=["progress"])


@router.get("/weekly", response_model=WeeklyProgressResponse)
async def get_weekly_progress(user_id: int, planner: Planner):
    try:
        return planner.get_weekly_progress(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get weekly progress for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get weekly progress: {str(e)}")


@router.get("/exercises")
async def get_exercise_progress(user_id: int, planner: Planner) -> dict[str, Any]:
    """Exercise completion overall and per muscle group."""
    try:
        return planner.get_exercise_progress(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get exercise progress for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get exercise progress: {str(e)}")


@router.get("/goal", response_model=GoalProgressResponse)
async def get_goal_progress(user_id: int, planner: Planner):
    try:
        return planner.get_goal_progress(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get goal progress for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get goal progress: {str(e)}")


@router.get("/streaks", response_model=StreaksResponse)
async def get_streaks(user_id: int, planner: Planner):
    try:
        return planner.get_streaks(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get streaks for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get streaks: {str(e)}")


@router.get("/time", response_model=TimeProgressResponse)
async def get_time_progress(user_id: int, planner: Planner):
    try:
        return planner.get_time_progress(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get time progress for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get time progress: {str(e)}")


@router.get("/metrics")
async def get_progress_metrics(user_id: int, planner: Planner) -> dict[str, Any]:
    """Workout, exercise, time and goal progress in one payload."""
    try:
        return planner.get_progress_metrics(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get progress metrics for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get progress metrics: {str(e)}")


@router.get("/weekly-report")
async def get_weekly_report(
    user_id: int,
    planner: Planner,
    reference_date: date | None = None,
) -> dict[str, Any]:
    """
    Weekly summary with achievements, improvements and next week's goals.

    Args:
        reference_date: Any date in the week to report on (default today)
    """
    try:
        return planner.get_weekly_report(user_id, today=reference_date)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to generate weekly report for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to generate weekly report: {str(e)}")
