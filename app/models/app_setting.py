"""
Application setting database model.

Key/value store for process-wide preferences such as the time zone
(``user_timezone``) used to interpret wall-clock sleep times.
"""

from sqlmodel import Field, SQLModel

USER_TIMEZONE_KEY = "user_timezone"


class AppSetting(SQLModel, table=True):
    __tablename__ = "app_settings"

    key: str = Field(primary_key=True, max_length=64)
    value: str = Field(nullable=False, max_length=255)
