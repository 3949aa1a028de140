"""
Sleep session service.

Runs the write pipeline for a sleep session:

1. reject structurally invalid metrics (no time math on bad input),
2. take the explicit wake date,
3. compute the DST-aware duration under the request's zone,
4. advisory overlap pre-check against the user's neighbouring sessions,
5. transactional insert/replace, which repeats the overlap check under a
   per-user lock.

Reads fold same-day sessions into :class:`DailyAggregate` values.
"""

import datetime
from typing import Optional

import structlog
from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.sleep_session import SleepSessionRepository
from app.models.sleep_session import SleepSession
from app.schemas.sleep_session import (DailyAggregate, DurationAuditResponse, DurationDrift, SleepSessionCreate,
                                       SleepSessionResponse, )
from app.sleeptime.aggregate import aggregate, aggregate_by_wake_date
from app.sleeptime.duration import DurationResult, duration_min, resolve_interval
from app.sleeptime.errors import OverlapConflict, SleepValidationError
from app.sleeptime.overlap import check_overlap
from app.sleeptime.wake_date import assign_wake_date
from app.sleeptime.zone import ZoneContext

logger = structlog.get_logger()


class SleepSessionService:
    """Service for sleep session business logic."""

    def __init__(self, session: Session, zone: ZoneContext):
        self.repository = SleepSessionRepository(session)
        self.zone = zone

    def create(self, user_id: int, data: SleepSessionCreate) -> SleepSessionResponse:
        """
        Log a new sleep session.

        Args:
            user_id: Owner of the session
            data: Wall-clock times, wake date and metrics

        Returns:
            The stored session with its frozen duration

        Raises:
            SleepValidationError: Metrics out of range or non-positive duration
            OverlapConflict: The session shares an instant with another one
        """
        self._validate(data)
        wake_date = assign_wake_date(data)
        duration = self._duration(wake_date, data)
        self._precheck(user_id, wake_date, data)

        entry = SleepSession(user_id=user_id, wake_date=wake_date, bed_time=data.bed_time, wake_time=data.wake_time,
                             latency_min=data.latency_min, awakenings=data.awakenings, quality=data.quality,
                             duration_min=duration.minutes, timezone=self.zone.identifier,
                             approximate=duration.approximate, )
        entry = self._persist(self.repository.insert_checked, entry)
        logger.info("sleep_session_created", user_id=user_id, session_id=entry.id, wake_date=str(wake_date),
                    duration_min=entry.duration_min, approximate=entry.approximate)
        return self._to_response(entry)

    def update(self, user_id: int, entry_id: int, data: SleepSessionCreate) -> SleepSessionResponse:
        """
        Replace every field of a session.

        The fields are re-validated and the duration is recomputed under the
        current zone; the session's own previous interval is ignored by the
        overlap check.

        Args:
            user_id: Owner of the session
            entry_id: Session to replace
            data: New field values

        Returns:
            The updated session

        Raises:
            HTTPException: 404 if the session does not belong to the user
            SleepValidationError: Metrics out of range or non-positive duration
            OverlapConflict: The new interval collides with another session
        """
        entry = self._get_owned_entry(user_id, entry_id)
        self._validate(data)
        wake_date = assign_wake_date(data)
        duration = self._duration(wake_date, data)
        self._precheck(user_id, wake_date, data, exclude_id=entry_id)

        entry.wake_date = wake_date
        entry.bed_time = data.bed_time
        entry.wake_time = data.wake_time
        entry.latency_min = data.latency_min
        entry.awakenings = data.awakenings
        entry.quality = data.quality
        entry.duration_min = duration.minutes
        entry.timezone = self.zone.identifier
        entry.approximate = duration.approximate
        entry.updated_at = datetime.datetime.utcnow()

        entry = self._persist(self.repository.replace_checked, entry)
        logger.info("sleep_session_updated", user_id=user_id, session_id=entry.id, duration_min=entry.duration_min)
        return self._to_response(entry)

    def get_by_id(self, user_id: int, entry_id: int) -> SleepSessionResponse:
        return self._to_response(self._get_owned_entry(user_id, entry_id))

    def get_by_wake_date(self, user_id: int, wake_date: datetime.date) -> list[SleepSessionResponse]:
        return [self._to_response(e) for e in self.repository.get_by_user_and_wake_date(user_id, wake_date)]

    def delete(self, user_id: int, entry_id: int) -> None:
        """
        Delete a session of the user.

        Raises:
            HTTPException: 404 if the session does not belong to the user
        """
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("sleep_session_deleted", user_id=user_id, session_id=entry_id)

    # ------------------------------------------------------------------
    # Daily views
    # ------------------------------------------------------------------

    def daily_summary(self, user_id: int, wake_date: datetime.date) -> DailyAggregate:
        """
        Fold all sessions of one wake date into a daily figure.

        Args:
            user_id: Owner of the sessions
            wake_date: Grouping date

        Returns:
            The daily aggregate

        Raises:
            HTTPException: 404 if no session ends on that date
        """
        sessions = self.repository.get_by_user_and_wake_date(user_id, wake_date)
        if not sessions:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No sleep sessions for this date", )
        return aggregate(sessions, self.zone)

    def daily_range(self, user_id: int, start: datetime.date, end: datetime.date) -> list[DailyAggregate]:
        """
        Daily aggregates for every wake date in ``[start, end]`` holding a session.

        Raises:
            SleepValidationError: If ``start`` is after ``end``
        """
        if start > end:
            raise SleepValidationError("start must not be after end")
        sessions = self.repository.get_by_user_wake_date_range(user_id, start, end)
        return aggregate_by_wake_date(sessions, self.zone)

    def recent_days(self, user_id: int, days: int = 7) -> list[DailyAggregate]:
        """
        Daily aggregates of the last *days* wake dates holding a session.

        Args:
            user_id: Owner of the sessions
            days: Number of distinct wake dates to return

        Returns:
            Aggregates ordered newest first; empty when the user has no sessions
        """
        dates = self.repository.get_recent_wake_dates(user_id, days)
        if not dates:
            return []
        sessions = self.repository.get_by_user_wake_date_range(user_id, min(dates), max(dates))
        return list(reversed(aggregate_by_wake_date(sessions, self.zone)))

    def audit_durations(self, user_id: int) -> DurationAuditResponse:
        """Recompute every cached duration under the current zone.

        Reports rows whose frozen value disagrees with the recomputation;
        nothing is rewritten.

        Returns:
            The zone used, the number of rows checked and the drifted rows
        """
        drifted: list[DurationDrift] = []
        sessions = self.repository.get_all_by_user(user_id)
        for s in sessions:
            try:
                recomputed = duration_min(s.wake_date, s.bed_time, s.wake_time, self.zone).minutes
            except SleepValidationError:
                recomputed = None
            if recomputed != s.duration_min:
                drifted.append(DurationDrift(session_id=s.id, wake_date=s.wake_date,
                                             cached_duration_min=s.duration_min, recomputed_duration_min=recomputed,
                                             cached_timezone=s.timezone, current_timezone=self.zone.identifier, ))
        if drifted:
            logger.warning("duration_drift_detected", user_id=user_id, drifted=len(drifted),
                           timezone=self.zone.identifier)
        return DurationAuditResponse(timezone=self.zone.identifier, checked=len(sessions), drifted=drifted)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _validate(data: SleepSessionCreate) -> None:
        if not 1 <= data.quality <= 5:
            raise SleepValidationError("quality must be between 1 and 5")
        if data.latency_min < 0:
            raise SleepValidationError("latency_min must not be negative")
        if data.awakenings < 0:
            raise SleepValidationError("awakenings must not be negative")

    def _duration(self, wake_date: datetime.date, data: SleepSessionCreate) -> DurationResult:
        duration = duration_min(wake_date, data.bed_time, data.wake_time, self.zone)
        if duration.approximate:
            logger.warning("sleep_duration_approximate", wake_date=str(wake_date), timezone=self.zone.identifier)
        return duration

    def _precheck(self, user_id: int, wake_date: datetime.date, data: SleepSessionCreate,
                  exclude_id: Optional[int] = None, ) -> None:
        candidate = resolve_interval(wake_date, data.bed_time, data.wake_time, self.zone, session_id=exclude_id)
        existing = self.repository.neighbour_intervals(user_id, wake_date, self.zone)
        try:
            check_overlap(candidate, existing, exclude_id=exclude_id)
        except OverlapConflict as e:
            logger.info("sleep_overlap_rejected", user_id=user_id, conflicting_id=e.conflicting_id, stage="precheck")
            raise

    def _persist(self, write, entry: SleepSession) -> SleepSession:
        try:
            return write(entry, self.zone)
        except OverlapConflict as e:
            logger.info("sleep_overlap_rejected", user_id=entry.user_id, conflicting_id=e.conflicting_id,
                        stage="commit")
            raise

    def _get_owned_entry(self, user_id: int, entry_id: int) -> SleepSession:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sleep session not found", )
        return entry

    @staticmethod
    def _to_response(entry: SleepSession) -> SleepSessionResponse:
        return SleepSessionResponse.model_validate(entry)
