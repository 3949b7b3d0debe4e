"""Storage for user profiles and day plans, including the JSON column codec."""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from app.models.database_models import DayPlanRecord, UserRecord
from app.models.plan import (
    WEEKDAYS,
    CompletedStatus,
    DayPlan,
    Exercise,
    Meal,
    ProfileCreate,
    ProfileUpdate,
    UserProfile,
    parse_day,
    parse_goal,
)
from app.services.errors import EmailAlreadyExists, MalformedStoredData, PlanNotFound, ProfileNotFound


logger = logging.getLogger(__name__)

EXERCISE_LIST = TypeAdapter(list[Exercise])
MEAL_LIST = TypeAdapter(list[Meal])
COMPLETED_STATUS = TypeAdapter(CompletedStatus)


def decode_blob(raw: str | None, adapter: TypeAdapter) -> Any:
    """
    Parse and validate a JSON column.

    Raises:
        MalformedStoredData: The text is not JSON or does not match the expected shape
    """
    if raw is None:
        raise MalformedStoredData("column is NULL")
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        raise MalformedStoredData(f"{exc.error_count()} validation error(s): {exc.errors()[0]['msg']}") from exc


def encode_blob(value: Any, adapter: TypeAdapter) -> str:
    return adapter.dump_json(value).decode("utf-8")


def _decode_column(record: DayPlanRecord, column: str, adapter: TypeAdapter, default: Callable[[], Any]) -> Any:
    try:
        return decode_blob(getattr(record, column), adapter)
    except MalformedStoredData as exc:
        logger.warning(
            "Malformed %s on day plan %s (user=%s): %s - using empty default",
            column,
            record.id,
            record.user_id,
            exc.message,
        )
        return default()


def to_profile(record: UserRecord) -> UserProfile:
    return UserProfile.model_validate(record, from_attributes=True)


def to_day_plan(record: DayPlanRecord) -> DayPlan:
    """Map a row to a DayPlan, replacing any unreadable JSON column by its empty default."""
    return DayPlan(
        id=record.id,
        user_id=record.user_id,
        day=record.day,
        exercises=_decode_column(record, "exercises", EXERCISE_LIST, list),
        meals=_decode_column(record, "meals", MEAL_LIST, list),
        completed_status=_decode_column(record, "completed_status", COMPLETED_STATUS, CompletedStatus),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


class ProfileRepository:
    """CRUD for user profiles."""

    def __init__(self, session: Session):
        self.session = session

    def _get_record(self, user_id: int) -> UserRecord:
        record = self.session.get(UserRecord, user_id)
        if record is None:
            raise ProfileNotFound(f"User {user_id} not found")
        return record

    def email_exists(self, email: str, exclude_user_id: int | None = None) -> bool:
        query = self.session.query(UserRecord.id).filter(UserRecord.email == email.strip().lower())
        if exclude_user_id is not None:
            query = query.filter(UserRecord.id != exclude_user_id)
        return query.first() is not None

    def create_profile(self, data: ProfileCreate) -> UserProfile:
        if self.email_exists(data.email):
            raise EmailAlreadyExists(f"Email {data.email} is already registered")

        record = UserRecord(**data.model_dump())
        self.session.add(record)
        self.session.flush()
        self.session.refresh(record)

        logger.info("Created user %d", record.id)
        return to_profile(record)

    def find_profile(self, user_id: int) -> UserProfile:
        return to_profile(self._get_record(user_id))

    def update_profile(self, user_id: int, update: ProfileUpdate) -> UserProfile:
        """Apply the fields present in ``update``; ``None`` values are ignored."""
        record = self._get_record(user_id)
        for field, value in update.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(record, field, value)
        record.updated_at = datetime.utcnow()
        self.session.flush()
        return to_profile(record)

    def update_goal(self, user_id: int, goal: str) -> UserProfile:
        """Set the goal after strict validation (raises ``InvalidGoal``)."""
        goal = parse_goal(goal)
        record = self._get_record(user_id)
        record.goal = goal
        record.updated_at = datetime.utcnow()
        self.session.flush()

        logger.info("Updated goal for user %d to %s", user_id, goal)
        return to_profile(record)

    def delete_profile(self, user_id: int) -> None:
        """Remove a user; the database cascades the delete to their day plans."""
        record = self._get_record(user_id)
        self.session.delete(record)
        self.session.flush()
        logger.info("Deleted user %d", user_id)


class PlanRepository:
    """Insert-or-replace storage for DayPlans keyed by (user_id, day)."""

    def __init__(self, session: Session):
        self.session = session

    def _query_day(self, user_id: int, day: str):
        return self.session.query(DayPlanRecord).filter_by(user_id=user_id, day=parse_day(day))

    def find_day_plans(self, user_id: int) -> list[DayPlan]:
        """All of a user's plans, Monday first."""
        records = self.session.query(DayPlanRecord).filter_by(user_id=user_id).all()
        plans = [to_day_plan(record) for record in records]
        return sorted(plans, key=lambda plan: WEEKDAYS.index(plan.day))

    def get_day_plan(self, user_id: int, day: str) -> DayPlan | None:
        record = self._query_day(user_id, day).first()
        return to_day_plan(record) if record else None

    def find_day_plan(self, user_id: int, day: str) -> DayPlan:
        plan = self.get_day_plan(user_id, day)
        if plan is None:
            raise PlanNotFound(f"No plan for user {user_id} on {parse_day(day)}")
        return plan

    def save_day_plan(self, plan: DayPlan) -> DayPlan:
        """Write ``plan`` over any existing row for its (user_id, day)."""
        record = self._query_day(plan.user_id, plan.day).first()
        if record is None:
            record = DayPlanRecord(user_id=plan.user_id, day=plan.day)
            self.session.add(record)
        else:
            record.updated_at = datetime.utcnow()

        record.exercises = encode_blob(plan.exercises, EXERCISE_LIST)
        record.meals = encode_blob(plan.meals, MEAL_LIST)
        record.completed_status = encode_blob(plan.completed_status, COMPLETED_STATUS)

        self.session.flush()
        self.session.refresh(record)
        return to_day_plan(record)

    def delete_day_plan(self, plan_id: int, user_id: int) -> None:
        record = self.session.query(DayPlanRecord).filter_by(id=plan_id, user_id=user_id).first()
        if record is None:
            raise PlanNotFound(f"Plan {plan_id} not found for user {user_id}")
        self.session.delete(record)
        self.session.flush()
