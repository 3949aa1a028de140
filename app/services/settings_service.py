"""
Settings service.

Owns the single configured time zone.  This is the one place that decides
to fall back to the process default: the time engine itself only ever
receives an already resolved :class:`ZoneContext`.
"""

from typing import Optional

import structlog
from sqlmodel import Session

from app.db.repositories.app_setting import AppSettingRepository
from app.models.app_setting import USER_TIMEZONE_KEY
from app.sleeptime.errors import InvalidTimeZone
from app.sleeptime.zone import ZoneContext, ZoneSource, resolve_zone

logger = structlog.get_logger()


class SettingsService:
    """Service for application settings."""

    def __init__(self, session: Session, default_timezone: str):
        self.repository = AppSettingRepository(session)
        self.default_timezone = default_timezone

    def get_zone(self) -> ZoneContext:
        """Resolve the configured zone, falling back to the process default.

        A stored identifier the tz database no longer knows is logged and
        replaced by the default; an invalid *default* raises
        :class:`InvalidTimeZone`.
        """
        stored: Optional[str] = self.repository.get_value(USER_TIMEZONE_KEY)
        if stored:
            try:
                return resolve_zone(stored, ZoneSource.USER)
            except InvalidTimeZone:
                logger.warning("stored_timezone_invalid", stored=stored, fallback=self.default_timezone)
        return resolve_zone(self.default_timezone, ZoneSource.DEFAULT)

    def set_timezone(self, identifier: str) -> ZoneContext:
        """Validate and store *identifier*.  Raises :class:`InvalidTimeZone`."""
        zone = resolve_zone(identifier, ZoneSource.USER)
        self.repository.set_value(USER_TIMEZONE_KEY, zone.identifier)
        logger.info("timezone_updated", timezone=zone.identifier)
        return zone
