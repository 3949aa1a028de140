"""
Exercise endpoints.

Log exercise events and read the per-date intensity rollup.
"""

import datetime

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.exercise import DateIntensity, ExerciseCreate, ExerciseResponse
from app.services.exercise_service import ExerciseService

router = APIRouter()


@router.post("", summary="Log an exercise event or the daily intensity.", response_model=ExerciseResponse,
             status_code=status.HTTP_201_CREATED, )
def log_exercise(data: ExerciseCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.log(user.id, data)


@router.get("/intensity", summary="Highest exercise intensity per date.", response_model=list[DateIntensity], )
def get_intensity(start: datetime.date = Query(..., description="Range start (inclusive)"),
                  end: datetime.date = Query(..., description="Range end (inclusive)"), db: Session = Depends(get_db),
                  user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.intensity_range(user.id, start, end)
