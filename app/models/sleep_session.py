"""
Sleep session database model.

One row per sleep interval.  ``duration_min`` is computed once at write
time and frozen together with the zone it was computed under; it is the
source of truth for display and summation.  The wall-clock fields stay
available so the duration can be re-derived and audited later.
"""

import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel


class SleepSession(SQLModel, table=True):
    """A single sleep session, keyed by its wake date."""

    __tablename__ = "sleep_sessions"
    __table_args__ = (
        CheckConstraint("quality BETWEEN 1 AND 5", name="ck_sleep_quality_range"),
        CheckConstraint("latency_min >= 0", name="ck_sleep_latency_non_negative"),
        CheckConstraint("awakenings >= 0", name="ck_sleep_awakenings_non_negative"),
        Index("ix_sleep_sessions_user_wake_date", "user_id", "wake_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    wake_date: datetime.date = Field(nullable=False)
    bed_time: datetime.time = Field(nullable=False)
    wake_time: datetime.time = Field(nullable=False)

    # Metrics
    latency_min: int = Field(nullable=False)
    awakenings: int = Field(nullable=False)
    quality: int = Field(nullable=False)

    # Cached projection, frozen at write time
    duration_min: int = Field(nullable=False)
    timezone: str = Field(nullable=False, max_length=64)
    approximate: bool = Field(default=False, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
