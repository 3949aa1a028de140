"""
Sleep session API schemas.

``wake_date`` is the grouping key of a session: the calendar date the
sleeper woke up.  ``bed_time`` / ``wake_time`` are wall-clock values in the
configured time zone and carry no date of their own.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SleepSessionCreate(BaseModel):
    """Schema for creating or fully replacing a sleep session."""

    wake_date: datetime.date = Field(..., description="Calendar date of waking up (grouping key)")
    bed_time: datetime.time = Field(..., description="Wall-clock time of going to bed (HH:MM)")
    wake_time: datetime.time = Field(..., description="Wall-clock time of waking up (HH:MM)")
    latency_min: int = Field(..., ge=0, le=600, description="Minutes needed to fall asleep")
    awakenings: int = Field(..., ge=0, le=100, description="Number of awakenings during the night")
    quality: int = Field(..., ge=1, le=5, description="Subjective sleep quality (1-5)")


class SleepSessionResponse(BaseModel):
    """Schema for a sleep session in API responses."""

    id: int
    user_id: int
    wake_date: datetime.date
    bed_time: datetime.time
    wake_time: datetime.time
    latency_min: int
    awakenings: int
    quality: int
    duration_min: int
    timezone: str
    approximate: bool = False
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class DailyAggregate(BaseModel):
    """All sessions of one wake date folded into a single daily figure."""

    wake_date: datetime.date
    bed_time: datetime.time = Field(..., description="Bed time of the session with the earliest bed instant")
    wake_time: datetime.time = Field(..., description="Wake time of the session with the latest wake instant")
    bed_session_id: Optional[int] = None
    wake_session_id: Optional[int] = None
    total_duration_min: int
    session_count: int
    avg_quality: int
    avg_latency_min: int
    total_awakenings: int
    approximate: bool = False


class DurationDrift(BaseModel):
    """A session whose cached duration no longer matches a recomputation."""

    session_id: int
    wake_date: datetime.date
    cached_duration_min: int
    recomputed_duration_min: Optional[int]
    cached_timezone: str
    current_timezone: str


class DurationAuditResponse(BaseModel):
    """Result of re-deriving every cached duration under the current zone."""

    timezone: str
    checked: int
    drifted: list[DurationDrift]
