"""API endpoints for user profiles."""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.models.plan import ProfileCreate, ProfileUpdate, UserProfile
from app.models.schemas import GoalUpdate
from app.routers.common import Planner, http_error
from app.services.errors import PlannerError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserProfile, status_code=201)
async def create_user(payload: ProfileCreate, planner: Planner):
    """Create a user profile; emails are unique and stored lower-cased."""
    try:
        return planner.profiles.create_profile(payload)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to create user")
        raise HTTPException(status_code=500, detail=f"Failed to create user: {str(e)}")


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(user_id: int, planner: Planner):
    try:
        return planner.profiles.find_profile(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to retrieve user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to retrieve user: {str(e)}")


@router.put("/{user_id}", response_model=UserProfile)
async def update_user(user_id: int, payload: ProfileUpdate, planner: Planner):
    """
    Update profile fields.

    Only name, age, gender, height and weight can be changed here; the goal
    has its own endpoint because it is validated strictly.
    """
    try:
        return planner.profiles.update_profile(user_id, payload)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to update user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to update user: {str(e)}")


@router.put("/{user_id}/goal", response_model=UserProfile)
async def update_goal(user_id: int, payload: GoalUpdate, planner: Planner):
    """Set the user's goal (weight_loss, muscle_gain or maintenance)."""
    try:
        return planner.profiles.update_goal(user_id, payload.goal)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to update goal for user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to update goal: {str(e)}")


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: int, planner: Planner) -> None:
    """Delete a user together with all of their plans."""
    try:
        planner.profiles.delete_profile(user_id)
    except HTTPException:
        raise
    except PlannerError as e:
        raise http_error(e)
    except Exception as e:
        logger.exception("Failed to delete user %d", user_id)
        raise HTTPException(status_code=500, detail=f"Failed to delete user: {str(e)}")
