"""Dependencies and error mapping shared by the planner routers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.services.errors import (
    EmailAlreadyExists,
    InvalidDay,
    InvalidGoal,
    NotFoundError,
    PlannerError,
)
from app.services.planner_service import PlannerService


def get_planner(db: Annotated[Session, Depends(get_db)]) -> PlannerService:
    """FastAPI dependency yielding a PlannerService bound to the request session."""
    return PlannerService(db)


def http_error(exc: PlannerError) -> HTTPException:
    """Translate a planner error into an HTTP error carrying its stable code."""
    if isinstance(exc, NotFoundError):
        status_code = 404
    elif isinstance(exc, (InvalidDay, InvalidGoal)):
        status_code = 400
    elif isinstance(exc, EmailAlreadyExists):
        status_code = 409
    else:
        status_code = 500
    return HTTPException(status_code=status_code, detail={"code": exc.code, "message": exc.message})


Planner = Annotated[PlannerService, Depends(get_planner)]
