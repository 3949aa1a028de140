"""
Settings endpoints.

Read and change the time zone used to interpret wall-clock sleep times.
Changing it does not touch durations already stored.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_default_timezone
from app.db.session import get_db
from app.schemas.settings import TimezoneSetting, TimezoneSettingResponse
from app.services.settings_service import SettingsService

router = APIRouter()


@router.get("/timezone", summary="Get the configured time zone.", response_model=TimezoneSettingResponse, )
def get_timezone(db: Session = Depends(get_db), default_timezone: str = Depends(get_default_timezone), ):
    zone = SettingsService(db, default_timezone).get_zone()
    return TimezoneSettingResponse(timezone=zone.identifier, source=zone.source.value)


@router.put("/timezone", summary="Set the time zone.", response_model=TimezoneSettingResponse, )
def set_timezone(data: TimezoneSetting, db: Session = Depends(get_db),
                 default_timezone: str = Depends(get_default_timezone), ):
    zone = SettingsService(db, default_timezone).set_timezone(data.timezone)
    return TimezoneSettingResponse(timezone=zone.identifier, source=zone.source.value)
