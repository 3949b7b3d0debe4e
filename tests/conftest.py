"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import os
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_LEVEL"] = os.environ.get("LOG_LEVEL") or "DEBUG"

from app.logging_config import configure_logging

configure_logging()

from app.database import Base, get_db
from app.main import app
from app.models import database_models  # noqa: F401
from app.models.plan import UserProfile
from app.services.plan_generator import PlanGenerator
from app.services.planner_service import PlannerService


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Iterator[Session]:
    """Create in-memory SQLite database for testing."""
    session = sessionmaker(bind=engine, autoflush=False)()
    yield session
    session.close()


@pytest.fixture
def test_client(engine) -> Iterator[TestClient]:
    """Provide a FastAPI test client backed by the per-test database."""
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def generator() -> PlanGenerator:
    """Generator with a fixed run id so that generated ids are predictable."""
    return PlanGenerator(run_id_factory=lambda: "run1")


@pytest.fixture
def planner(db_session, generator) -> PlannerService:
    return PlannerService(db_session, generator=generator)


@pytest.fixture
def profile_factory() -> Callable[..., UserProfile]:
    def make(**overrides) -> UserProfile:
        fields = {
            "id": 1,
            "name": "Ana",
            "email": "ana@example.com",
            "gender": "female",
            "age": 25,
            "height": 165,
            "weight": 60,
            "goal": "weight_loss",
        }
        fields.update(overrides)
        return UserProfile(**fields)

    return make


@pytest.fixture
def api_user(test_client: TestClient) -> dict:
    """A user created through the API."""
    response = test_client.post(
        "/api/users",
        json={
            "name": "Ana",
            "email": "ana@example.com",
            "gender": "female",
            "age": 25,
            "height": 165,
            "weight": 60,
            "goal": "weight_loss",
        },
    )
    assert response.status_code == 201
    return response.json()
