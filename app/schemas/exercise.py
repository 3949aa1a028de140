"""
Exercise API schemas.

Omitting both ``start_time`` and ``duration_min`` logs the date's daily
intensity instead of a separate event.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.exercise import Intensity


class ExerciseCreate(BaseModel):
    """Schema for logging an exercise event."""

    date: datetime.date
    intensity: Intensity
    start_time: Optional[datetime.time] = Field(None, description="Wall-clock start time (HH:MM)")
    duration_min: Optional[int] = Field(None, ge=1, le=1440, description="Length of the event in minutes")


class ExerciseResponse(BaseModel):
    """Schema for an exercise event in API responses."""

    id: int
    user_id: int
    date: datetime.date
    intensity: Intensity
    start_time: Optional[datetime.time] = None
    duration_min: Optional[int] = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class DateIntensity(BaseModel):
    """Highest intensity logged on one date."""

    date: datetime.date
    intensity: Intensity
