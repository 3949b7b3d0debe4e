"""SQLAlchemy ORM models for user profiles and weekly plans."""
from datetime import datetime
from sqlalchemy import Integer, DateTime, Float, String, Text, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class UserRecord(Base):
    """User profile used to personalise plans."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)  # stored lower-cased

    # Anthropometrics
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gender: Mapped[str | None] = mapped_column(String(10), nullable=True)  # male, female, other
    height: Mapped[float | None] = mapped_column(Float, nullable=True)  # cm
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)  # kg

    goal: Mapped[str | None] = mapped_column(String(20), nullable=True)  # weight_loss, muscle_gain, maintenance
    role: Mapped[str] = mapped_column(String(10), default="user", nullable=False)  # user, trainer, admin

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationship
    day_plans: Mapped[list["DayPlanRecord"]] = relationship(
        "DayPlanRecord",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class DayPlanRecord(Base):
    """One weekday of a user's plan; item lists and completion flags are JSON text."""

    __tablename__ = "day_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    day: Mapped[str] = mapped_column(String(10), nullable=False)  # Monday..Sunday

    exercises: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    meals: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    completed_status: Mapped[str] = mapped_column(Text, nullable=False, default="{}")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        # One plan per user and weekday
        Index("ix_day_plans_user_day", "user_id", "day", unique=True),
    )

    user: Mapped["UserRecord"] = relationship("UserRecord", back_populates="day_plans")
