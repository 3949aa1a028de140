"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.sleep_session import SleepSessionRepository
from app.db.repositories.app_setting import AppSettingRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.note import NoteRepository

__all__ = [
    "UserRepository",
    "SleepSessionRepository",
    "AppSettingRepository",
    "ExerciseRepository",
    "NoteRepository",
]
