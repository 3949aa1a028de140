"""SQLModel database models."""

from app.models.user import User
from app.models.sleep_session import SleepSession
from app.models.app_setting import AppSetting
from app.models.exercise import ExerciseEvent, Intensity
from app.models.note import Note

__all__ = [
    "User",
    "SleepSession",
    "AppSetting",
    "ExerciseEvent",
    "Intensity",
    "Note",
]
