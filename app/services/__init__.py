"""Business logic services."""

from app.services.user_service import UserService
from app.services.settings_service import SettingsService
from app.services.sleep_session_service import SleepSessionService
from app.services.exercise_service import ExerciseService
from app.services.note_service import NoteService

__all__ = [
    "UserService",
    "SettingsService",
    "SleepSessionService",
    "ExerciseService",
    "NoteService",
]
