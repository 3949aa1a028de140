"""Application settings API schemas."""

from pydantic import BaseModel, Field


class TimezoneSetting(BaseModel):
    """The zone used to interpret wall-clock bed and wake times."""

    timezone: str = Field(..., min_length=1, max_length=64, description="IANA identifier, e.g. 'Europe/Rome'")


class TimezoneSettingResponse(TimezoneSetting):
    source: str = Field(..., description="'user' when configured, 'default' when falling back")
