"""
Application setting repository.

Key/value reads and upserts on the ``app_settings`` table.
"""

from typing import Optional

from sqlmodel import Session

from app.models.app_setting import AppSetting


class AppSettingRepository:
    """Repository for AppSetting database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_value(self, key: str) -> Optional[str]:
        entry = self.session.get(AppSetting, key)
        return entry.value if entry else None

    def set_value(self, key: str, value: str) -> AppSetting:
        """Insert or overwrite the value stored under *key*."""
        entry = self.session.get(AppSetting, key)
        if entry is None:
            entry = AppSetting(key=key, value=value)
        else:
            entry.value = value
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
