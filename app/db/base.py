"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.sleep_session import SleepSession  # noqa: F401
from app.models.app_setting import AppSetting  # noqa: F401
from app.models.exercise import ExerciseEvent  # noqa: F401
from app.models.note import Note  # noqa: F401
