"""API endpoints for meal plans and nutrition tracking."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from app.models.plan import DayPlan, MealCreate, MealUpdate
from app.models.schemas import MealConsumption, NutritionGoalsResponse
from app.routers.common import Planner, http_error
from app.services.errors import PlannerError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users/{user_id}/meals", tags=["meals"])


@router.post("/generate", response_model=list[DayPlan], status_code=201)
async def generate_meal_plan(user_id: int, planner: Planner):
    """Regenerate the week's meals, keeping each day's exercises."""
    try:
        return planner.generate_meal_plan(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to generate meal plan for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to generate meal plan: {str(e)}")


@router.get("/progress")
async def get_meal_progress(user_id: int, planner: Planner) -> dict[str, Any]:
    try:
        return planner.get_meal_progress(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get meal progress for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get meal progress: {str(e)}")


@router.get("/nutrition-goals", response_model=NutritionGoalsResponse)
async def get_nutrition_goals(user_id: int, planner: Planner):
    try:
        return planner.get_nutrition_goals(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get nutrition goals for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get nutrition goals: {str(e)}")


@router.get("/statistics")
async def get_meal_statistics(user_id: int, planner: Planner) -> dict[str, Any]:
    """Consumption totals compared against the daily nutrition goals."""
    try:
        return planner.get_meal_statistics(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get meal statistics for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to get meal statistics: {str(e)}")


@router.get("/{day}/recommendations")
async def get_meal_recommendations(user_id: int, day: str, planner: Planner) -> dict[str, Any]:
    """Snack suggestions based on what remains of the day's goals."""
    try:
        return planner.get_meal_recommendations(user_id, day)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to get meal recommendations for user %d on %s", user_id, day)
        raise HTTPException(status_code=500, detail=f"Failed to get meal recommendations: {str(e)}")


@router.post("/{day}", response_model=DayPlan, status_code=201)
async def add_meal(user_id: int, day: str, payload: MealCreate, planner: Planner):
    try:
        return planner.add_meal(user_id, day, payload)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to add meal for user %d on %s", user_id, day)
        raise HTTPException(status_code=500, detail=f"Failed to add meal: {str(e)}")


@router.post("/{day}/consume", response_model=DayPlan)
async def consume_meal(user_id: int, day: str, payload: MealConsumption, planner: Planner):
    try:
        return planner.set_meal_completed(user_id, day, payload.meal_id, payload.consumed)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to mark meal for user %d on %s", user_id, day)
        raise HTTPException(status_code=500, detail=f"Failed to mark meal: {str(e)}")


@router.put("/{day}/{meal_id}", response_model=DayPlan)
async def update_meal(user_id: int, day: str, meal_id: str, payload: MealUpdate, planner: Planner):
    try:
        return planner.update_meal(user_id, day, meal_id, payload)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to update meal %s for user %d", meal_id, user_id)
        raise HTTPException(status_code=500, detail=f"Failed to update meal: {str(e)}")


@router.delete("/{day}/{meal_id}", response_model=DayPlan)
async def delete_meal(user_id: int, day: str, meal_id: str, planner: Planner):
    try:
        return planner.delete_meal(user_id, day, meal_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to delete meal %s for user %d", meal_id, user_id)
        raise HTTPException(status_code=500, detail=f"Failed to delete meal: {str(e)}")
