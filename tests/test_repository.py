"""Tests for profile and day plan storage."""

import pytest

from app.models.database_models import DayPlanRecord
from app.models.plan import ProfileCreate, ProfileUpdate
from app.services.errors import (
    EmailAlreadyExists,
    InvalidDay,
    InvalidGoal,
    MalformedStoredData,
    PlanNotFound,
    ProfileNotFound,
)
from app.services.repository import (
    EXERCISE_LIST,
    PlanRepository,
    ProfileRepository,
    decode_blob,
)
from factories import make_exercise, make_meal, make_plan


@pytest.fixture
def profiles(db_session):
    return ProfileRepository(db_session)


@pytest.fixture
def plans(db_session):
    return PlanRepository(db_session)


@pytest.fixture
def user(profiles):
    return profiles.create_profile(
        ProfileCreate(name="Ana", email="Ana@Example.com", gender="female", age=25, height=165, weight=60, goal="weight_loss")
    )


class TestProfileRepository:
    """Test profile CRUD."""

    def test_create_normalizes_email(self, user):
        assert user.id is not None
        assert user.email == "ana@example.com"
        assert user.role == "user"
        assert user.created_at is not None

    def test_duplicate_email_rejected(self, profiles, user):
        with pytest.raises(EmailAlreadyExists):
            profiles.create_profile(ProfileCreate(name="Other", email="ANA@example.com"))

    def test_find_missing_profile(self, profiles):
        with pytest.raises(ProfileNotFound) as exc_info:
            profiles.find_profile(999)
        assert exc_info.value.code == "PROFILE_NOT_FOUND"

    def test_partial_update_keeps_other_fields(self, profiles, user):
        updated = profiles.update_profile(user.id, ProfileUpdate(weight=58.5))

        assert updated.weight == 58.5
        assert updated.height == 165
        assert updated.name == "Ana"

    def test_update_goal(self, profiles, user):
        assert profiles.update_goal(user.id, "Muscle_Gain").goal == "muscle_gain"

    def test_update_goal_rejects_unknown(self, profiles, user):
        with pytest.raises(InvalidGoal):
            profiles.update_goal(user.id, "bulking")
        assert profiles.find_profile(user.id).goal == "weight_loss"

    def test_delete_cascades_to_plans(self, db_session, profiles, plans, user):
        plans.save_day_plan(make_plan("Monday", user_id=user.id))
        plans.save_day_plan(make_plan("Tuesday", user_id=user.id))

        profiles.delete_profile(user.id)

        assert db_session.query(DayPlanRecord).count() == 0
        with pytest.raises(ProfileNotFound):
            profiles.find_profile(user.id)


class TestPlanRepository:
    """Test insert-or-replace day plan storage."""

    def test_save_and_load(self, plans, user):
        plan = make_plan(
            "Monday",
            exercises=[make_exercise("e1", duration=60)],
            meals=[make_meal("m1", protein=20)],
            done_exercises={"e1"},
            user_id=user.id,
        )

        saved = plans.save_day_plan(plan)
        loaded = plans.find_day_plan(user.id, "monday")

        assert saved.id is not None
        assert loaded.exercises == plan.exercises
        assert loaded.meals == plan.meals
        assert loaded.completed_status.exercises == {"e1": True}

    def test_save_replaces_existing_day(self, db_session, plans, user):
        first = plans.save_day_plan(make_plan("Monday", exercises=[make_exercise("old")], user_id=user.id))
        second = plans.save_day_plan(make_plan("Monday", exercises=[make_exercise("new")], user_id=user.id))

        assert second.id == first.id
        assert [ex.id for ex in plans.find_day_plan(user.id, "Monday").exercises] == ["new"]
        assert db_session.query(DayPlanRecord).count() == 1

    def test_plans_sorted_monday_first(self, plans, user):
        for day in ("Sunday", "Wednesday", "Monday"):
            plans.save_day_plan(make_plan(day, user_id=user.id))

        assert [plan.day for plan in plans.find_day_plans(user.id)] == ["Monday", "Wednesday", "Sunday"]

    def test_missing_day(self, plans, user):
        assert plans.get_day_plan(user.id, "Friday") is None
        with pytest.raises(PlanNotFound):
            plans.find_day_plan(user.id, "Friday")

    def test_invalid_day(self, plans, user):
        with pytest.raises(InvalidDay):
            plans.get_day_plan(user.id, "Someday")

    def test_delete_day_plan(self, plans, user):
        saved = plans.save_day_plan(make_plan("Monday", user_id=user.id))

        plans.delete_day_plan(saved.id, user.id)

        assert plans.get_day_plan(user.id, "Monday") is None
        with pytest.raises(PlanNotFound):
            plans.delete_day_plan(saved.id, user.id)


class TestStoredBlobs:
    """Test tolerance of unreadable JSON columns."""

    def test_decode_blob_rejects_bad_json(self):
        with pytest.raises(MalformedStoredData):
            decode_blob("{not json", EXERCISE_LIST)

    def test_decode_blob_rejects_null(self):
        with pytest.raises(MalformedStoredData):
            decode_blob(None, EXERCISE_LIST)

    def test_malformed_columns_load_as_empty(self, db_session, plans, user, caplog):
        db_session.add(
            DayPlanRecord(
                user_id=user.id,
                day="Monday",
                exercises="{not json",
                meals='[{"id": 1}]',
                completed_status="null",
            )
        )
        db_session.flush()

        with caplog.at_level("WARNING"):
            plan = plans.find_day_plan(user.id, "Monday")

        assert plan.exercises == []
        assert plan.meals == []
        assert plan.completed_status.exercises == {}
        assert plan.completed_status.date_completed is None
        assert caplog.text.count("Malformed") == 3

    def test_one_bad_column_keeps_the_others(self, db_session, plans, user):
        good = plans.save_day_plan(make_plan("Monday", exercises=[make_exercise("e1")], user_id=user.id))
        record = db_session.get(DayPlanRecord, good.id)
        record.meals = "oops"
        db_session.flush()

        plan = plans.find_day_plan(user.id, "Monday")

        assert [ex.id for ex in plan.exercises] == ["e1"]
        assert plan.meals == []
