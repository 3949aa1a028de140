"""
Exercise event repository.

Handles database operations for :class:`ExerciseEvent`, including the
upsert of the per-date daily intensity row and the max-intensity rollup.
"""

import datetime
from typing import Optional

from sqlalchemy import case, func
from sqlmodel import Session, select

from app.models.exercise import INTENSITY_ORDER, ExerciseEvent, Intensity


class ExerciseRepository:
    """Repository for ExerciseEvent database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: ExerciseEvent) -> ExerciseEvent:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_daily_row(self, user_id: int, date: datetime.date) -> Optional[ExerciseEvent]:
        statement = select(ExerciseEvent).where(ExerciseEvent.user_id == user_id, ExerciseEvent.date == date,
                                                ExerciseEvent.start_time.is_(None),
                                                ExerciseEvent.duration_min.is_(None), )
        return self.session.exec(statement).first()

    def upsert_daily_intensity(self, user_id: int, date: datetime.date, intensity: Intensity) -> ExerciseEvent:
        """
        Set the daily intensity of *date*, creating the row if needed.

        Args:
            user_id: Owner of the row
            date: Calendar date
            intensity: New intensity

        Returns:
            The single daily intensity row of that date
        """
        entry = self.get_daily_row(user_id, date)
        if entry is None:
            entry = ExerciseEvent(user_id=user_id, date=date, intensity=intensity.value)
        else:
            entry.intensity = intensity.value
        return self.create(entry)

    def max_intensity_by_date(self, user_id: int, start: datetime.date,
                              end: datetime.date, ) -> list[tuple[datetime.date, Intensity]]:
        """
        Highest intensity per date in ``[start, end]``.

        Dates without any event are omitted.

        Returns:
            ``(date, intensity)`` pairs ordered by date
        """
        rank = case(*[(ExerciseEvent.intensity == level.value, level.rank) for level in INTENSITY_ORDER[1:]],
                    else_=0)
        statement = (select(ExerciseEvent.date, func.max(rank)).where(ExerciseEvent.user_id == user_id,
                                                                      ExerciseEvent.date >= start,
                                                                      ExerciseEvent.date <= end, ).group_by(
            ExerciseEvent.date).order_by(ExerciseEvent.date))
        return [(day, INTENSITY_ORDER[top]) for day, top in self.session.exec(statement).all()]
