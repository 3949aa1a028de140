"""
Exercise service.

Logs exercise events and rolls them up into one intensity per date.
"""

import datetime

import structlog
from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.models.exercise import ExerciseEvent
from app.schemas.exercise import DateIntensity, ExerciseCreate, ExerciseResponse

logger = structlog.get_logger()

# Longest date range the intensity rollup serves
MAX_RANGE_DAYS = 62


class ExerciseService:
    """Service for exercise business logic."""

    def __init__(self, session: Session):
        self.repository = ExerciseRepository(session)

    def log(self, user_id: int, data: ExerciseCreate) -> ExerciseResponse:
        """
        Log an exercise event.

        Without ``start_time`` and ``duration_min`` the date's daily
        intensity row is created or overwritten instead.

        Args:
            user_id: Owner of the event
            data: Event data

        Returns:
            The stored event
        """
        if data.start_time is None and data.duration_min is None:
            entry = self.repository.upsert_daily_intensity(user_id, data.date, data.intensity)
            logger.info("daily_intensity_set", user_id=user_id, date=str(data.date), intensity=entry.intensity)
        else:
            entry = self.repository.create(
                ExerciseEvent(user_id=user_id, date=data.date, intensity=data.intensity.value,
                              start_time=data.start_time, duration_min=data.duration_min, ))
            logger.info("exercise_logged", user_id=user_id, exercise_id=entry.id, date=str(data.date))
        return ExerciseResponse.model_validate(entry)

    def intensity_range(self, user_id: int, start: datetime.date, end: datetime.date) -> list[DateIntensity]:
        """
        Highest intensity per date in ``[start, end]``, oldest first.

        Raises:
            HTTPException: 400 if ``start > end`` or the range exceeds
                ``MAX_RANGE_DAYS`` days
        """
        if start > end:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must not be after end")
        if (end - start).days + 1 > MAX_RANGE_DAYS:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=f"range must be at most {MAX_RANGE_DAYS} days")
        return [DateIntensity(date=day, intensity=level) for day, level in
                self.repository.max_intensity_by_date(user_id, start, end)]
