"""API endpoints for weekly plans."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.models.plan import DayPlan
from app.models.schemas import CompletionUpdate, DayPlanUpsert
from app.routers.common import Planner, http_error
from app.services.errors import PlannerError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}/plans", tags=["plans"])


@router.get("", response_model=list[DayPlan])
async def list_plans(user_id: int, planner: Planner):
    """Return the user's stored days, Monday first."""
    try:
        return planner.get_plans(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to list plans for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to list plans: {str(e)}")


@router.post("/generate", response_model=list[DayPlan], status_code=201)
async def generate_plans(user_id: int, planner: Planner):
    """
    Generate a full week of exercises and meals.

    Existing days are overwritten and their completion state is cleared.
    """
    try:
        return planner.generate_week(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to generate plans for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to generate plans: {str(e)}")


@router.get("/{day}", response_model=DayPlan)
async def get_plan(user_id: int, day: str, planner: Planner):
    try:
        return planner.get_plan(user_id, day)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to retrieve %s plan for user %d", day, user_id)
        raise HTTPException(status_code=500, detail=f"Failed to retrieve plan: {str(e)}")


@router.put("/{day}", response_model=DayPlan)
async def upsert_plan(user_id: int, day: str, payload: DayPlanUpsert, planner: Planner):
    """Create or overwrite a day's plan; completion state for the day is reset."""
    try:
        return planner.upsert_day(user_id, day, payload.exercises, payload.meals)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to save %s plan for user %d", day, user_id)
        raise HTTPException(status_code=500, detail=f"Failed to save plan: {str(e)}")


@router.delete("/{day}", status_code=204)
async def delete_plan(user_id: int, day: str, planner: Planner) -> None:
    try:
        planner.delete_plan(user_id, day)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to delete %s plan for user %d", day, user_id)
        raise HTTPException(status_code=500, detail=f"Failed to delete plan: {str(e)}")


@router.put("/{day}/completed", response_model=DayPlan)
async def update_completion(user_id: int, day: str, payload: CompletionUpdate, planner: Planner):
    """Mark one exercise or one meal as done or not done."""
    try:
        if payload.exercise_id is not None:
            return planner.set_exercise_completed(user_id, day, payload.exercise_id, payload.completed)
        return planner.set_meal_completed(user_id, day, payload.meal_id, payload.completed)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to update completion for user %d on %s", user_id, day)
        raise HTTPException(status_code=500, detail=f"Failed to update completion: {str(e)}")
