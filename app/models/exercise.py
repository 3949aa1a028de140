"""
Exercise event database model.

An event carries a qualitative intensity for a calendar date.  An event
with neither ``start_time`` nor ``duration_min`` is the date's *daily
intensity* row: at most one exists per user and date, and logging another
one overwrites its intensity.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import CheckConstraint, Index, text
from sqlmodel import Field, SQLModel

_DAILY_ROW = "start_time IS NULL AND duration_min IS NULL"


class Intensity(str, Enum):
    """Exercise intensity, ordered none < light < hard."""

    NONE = "none"
    LIGHT = "light"
    HARD = "hard"

    @property
    def rank(self) -> int:
        return INTENSITY_ORDER.index(self)


INTENSITY_ORDER = [Intensity.NONE, Intensity.LIGHT, Intensity.HARD]


class ExerciseEvent(SQLModel, table=True):
    """A single exercise event, or the daily intensity row of a date."""

    __tablename__ = "exercise_events"
    __table_args__ = (
        CheckConstraint("intensity IN ('none', 'light', 'hard')", name="ck_exercise_intensity"),
        CheckConstraint("duration_min IS NULL OR duration_min > 0", name="ck_exercise_duration_positive"),
        Index("ix_exercise_events_user_date", "user_id", "date"),
        Index("uq_exercise_events_daily", "user_id", "date", unique=True, sqlite_where=text(_DAILY_ROW),
              postgresql_where=text(_DAILY_ROW)),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False)
    date: datetime.date = Field(nullable=False)
    intensity: str = Field(max_length=8, nullable=False)
    start_time: Optional[datetime.time] = Field(default=None)
    duration_min: Optional[int] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
