"""
Shared API dependencies.

Reusable FastAPI dependencies for user lookup, zone resolution and
database access.
"""

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.services.settings_service import SettingsService
from app.services.user_service import UserService
from app.sleeptime.zone import ZoneContext


def get_current_user(user_id: int, db: Session = Depends(get_db), ) -> User:
    """Load the user addressed by the ``{user_id}`` path segment."""
    user = UserService(db).get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found", )
    return user


def get_default_timezone() -> str:
    return settings.DEFAULT_TIMEZONE


def get_zone(db: Session = Depends(get_db), default_timezone: str = Depends(get_default_timezone), ) -> ZoneContext:
    """Resolve the zone in effect for this request."""
    return SettingsService(db, default_timezone).get_zone()
