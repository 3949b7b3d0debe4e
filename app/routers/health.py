"""Router exposing basic system endpoints."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.database_models import DayPlanRecord, UserRecord


logger = logging.getLogger(__name__)


router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/status")
async def get_status() -> dict[str, str]:
    """Return a minimal status payload."""
    return {"status": "online"}


@router.get("/db")
async def get_db_status(db: Annotated[Session, Depends(get_db)]) -> dict:
    """
    Check that the database answers and report row counts.

    Returns:
        dict: {
            "database": "ok",
            "users": int,
            "day_plans": int
        }
    """
    try:
        db.execute(text("SELECT 1"))
        return {
            "database": "ok",
            "users": db.query(UserRecord).count(),
            "day_plans": db.query(DayPlanRecord).count(),
        }
    except Exception:
        logger.exception("Database health check failed")
        raise HTTPException(status_code=503, detail="Database unavailable")
