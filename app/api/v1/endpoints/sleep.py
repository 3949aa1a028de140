"""
Sleep session endpoints.

CRUD for sleep sessions keyed by wake date, plus daily aggregate views.
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user, get_zone
from app.db.session import get_db
from app.models.user import User
from app.schemas.sleep_session import (DailyAggregate, DurationAuditResponse, SleepSessionCreate,
                                       SleepSessionResponse, )
from app.services.sleep_session_service import SleepSessionService
from app.sleeptime.zone import ZoneContext

router = APIRouter()


@router.post("", summary="Log a sleep session.", response_model=SleepSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(data: SleepSessionCreate, db: Session = Depends(get_db), zone: ZoneContext = Depends(get_zone),
                   user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.create(user.id, data)


@router.get("/date/{wake_date}", summary="Get all sleep sessions for a wake date.",
            response_model=list[SleepSessionResponse], )
def get_sessions_by_date(wake_date: datetime.date, db: Session = Depends(get_db),
                         zone: ZoneContext = Depends(get_zone), user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.get_by_wake_date(user.id, wake_date)


@router.get("/recent", summary="Daily aggregates of the most recent wake dates.",
            response_model=list[DailyAggregate], )
def recent_days(days: int = Query(7, ge=1, le=62, description="Number of wake dates to return"),
                db: Session = Depends(get_db), zone: ZoneContext = Depends(get_zone),
                user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.recent_days(user.id, days)


@router.get("/daily", summary="Daily aggregates in a wake-date range.", response_model=list[DailyAggregate], )
def daily_range(start: datetime.date = Query(..., description="Range start (inclusive)"),
                end: datetime.date = Query(..., description="Range end (inclusive)"), db: Session = Depends(get_db),
                zone: ZoneContext = Depends(get_zone), user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.daily_range(user.id, start, end)


@router.get("/daily/{wake_date}", summary="Daily aggregate for one wake date.", response_model=DailyAggregate, )
def daily_summary(wake_date: datetime.date, db: Session = Depends(get_db), zone: ZoneContext = Depends(get_zone),
                  user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.daily_summary(user.id, wake_date)


@router.get("/audit", summary="Compare cached durations with a recomputation.",
            response_model=DurationAuditResponse, )
def audit_durations(db: Session = Depends(get_db), zone: ZoneContext = Depends(get_zone),
                    user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.audit_durations(user.id)


@router.get("/{session_id}", summary="Get a sleep session.", response_model=SleepSessionResponse, )
def get_session(session_id: int, db: Session = Depends(get_db), zone: ZoneContext = Depends(get_zone),
                user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.get_by_id(user.id, session_id)


@router.put("/{session_id}", summary="Replace a sleep session.", response_model=SleepSessionResponse, )
def update_session(session_id: int, data: SleepSessionCreate, db: Session = Depends(get_db),
                   zone: ZoneContext = Depends(get_zone), user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    return service.update(user.id, session_id, data)


@router.delete("/{session_id}", summary="Delete a sleep session.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, db: Session = Depends(get_db), zone: ZoneContext = Depends(get_zone),
                   user: User = Depends(get_current_user), ):
    service = SleepSessionService(db, zone)
    service.delete(user.id, session_id)
