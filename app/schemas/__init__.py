"""Pydantic schemas for request/response validation."""

from app.schemas.user import UserCreate, UserResponse
from app.schemas.sleep_session import (
    DailyAggregate,
    DurationAuditResponse,
    DurationDrift,
    SleepSessionCreate,
    SleepSessionResponse,
)
from app.schemas.settings import TimezoneSetting, TimezoneSettingResponse
from app.schemas.exercise import DateIntensity, ExerciseCreate, ExerciseResponse
from app.schemas.note import NoteCreate, NoteResponse

__all__ = [
    "UserCreate",
    "UserResponse",
    "DailyAggregate",
    "DurationAuditResponse",
    "DurationDrift",
    "SleepSessionCreate",
    "SleepSessionResponse",
    "TimezoneSetting",
    "TimezoneSettingResponse",
    "DateIntensity",
    "ExerciseCreate",
    "ExerciseResponse",
    "NoteCreate",
    "NoteResponse",
]
