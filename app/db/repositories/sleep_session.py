"""
Sleep session repository.

Handles database operations for :class:`SleepSession`.

Writes go through :meth:`SleepSessionRepository.insert_checked` and
:meth:`SleepSessionRepository.replace_checked`, which re-evaluate the
no-overlap invariant inside the write transaction.  The transaction first
takes the per-user lock (``SELECT ... FOR UPDATE`` on Postgres, the
``BEGIN IMMEDIATE`` write lock on SQLite), so two writers for the same user
are serialised and the second one sees the first one's committed row when
it re-reads its neighbours.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.db.repositories.user import UserRepository
from app.models.sleep_session import SleepSession
from app.sleeptime.duration import ResolvedInterval, resolve_interval
from app.sleeptime.overlap import check_overlap
from app.sleeptime.zone import ZoneContext

# A session spans at most [wake_date - 1, wake_date + 1) of local time, plus
# the DST scan budget, so any overlapping session has a wake date within
# two days of the candidate's.
NEIGHBOUR_WINDOW_DAYS = 2


class SleepSessionRepository:
    """Repository for SleepSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, entry_id: int) -> Optional[SleepSession]:
        return self.session.get(SleepSession, entry_id)

    def get_by_user_and_wake_date(self, user_id: int, wake_date: datetime.date, ) -> list[SleepSession]:
        """
        All sessions of a user that ended on *wake_date*.

        Args:
            user_id: Owner of the sessions
            wake_date: Grouping date

        Returns:
            Sessions ordered by wake time, then id
        """
        statement = (select(SleepSession).where(SleepSession.user_id == user_id,
                                                SleepSession.wake_date == wake_date, ).order_by(SleepSession.wake_time,
                                                                                                SleepSession.id))
        return list(self.session.exec(statement).all())

    def get_by_user_wake_date_range(self, user_id: int, start: datetime.date,
                                    end: datetime.date, ) -> list[SleepSession]:
        """
        Sessions of a user with a wake date in ``[start, end]``.

        Args:
            user_id: Owner of the sessions
            start: First wake date (inclusive)
            end: Last wake date (inclusive)

        Returns:
            Sessions ordered by wake date, then id
        """
        statement = (select(SleepSession).where(SleepSession.user_id == user_id, SleepSession.wake_date >= start,
                                                SleepSession.wake_date <= end, ).order_by(SleepSession.wake_date,
                                                                                          SleepSession.id))
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: int) -> list[SleepSession]:
        statement = (select(SleepSession).where(SleepSession.user_id == user_id).order_by(SleepSession.wake_date,
                                                                                            SleepSession.id))
        return list(self.session.exec(statement).all())

    def get_recent_wake_dates(self, user_id: int, days: int) -> list[datetime.date]:
        """
        Most recent distinct wake dates that hold at least one session.

        Args:
            user_id: Owner of the sessions
            days: Maximum number of dates to return

        Returns:
            Wake dates, newest first
        """
        statement = (select(SleepSession.wake_date).where(SleepSession.user_id == user_id).group_by(
            SleepSession.wake_date).order_by(SleepSession.wake_date.desc()).limit(days))
        return list(self.session.exec(statement).all())

    def get_neighbours(self, user_id: int, wake_date: datetime.date,
                       window_days: int = NEIGHBOUR_WINDOW_DAYS, ) -> list[SleepSession]:
        """Sessions that could possibly overlap one ending on *wake_date*."""
        delta = datetime.timedelta(days=window_days)
        return self.get_by_user_wake_date_range(user_id, wake_date - delta, wake_date + delta)

    def neighbour_intervals(self, user_id: int, wake_date: datetime.date,
                            zone: ZoneContext, ) -> list[ResolvedInterval]:
        """
        Re-project neighbouring sessions under *zone*.

        Args:
            user_id: Owner of the sessions
            wake_date: Wake date of the candidate session
            zone: Zone in effect for this request

        Returns:
            One resolved interval per neighbouring session
        """
        return [resolve_interval(s.wake_date, s.bed_time, s.wake_time, zone, session_id=s.id) for s in
                self.get_neighbours(user_id, wake_date)]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert_checked(self, entry: SleepSession, zone: ZoneContext) -> SleepSession:
        """
        Insert *entry*, re-checking overlap under the user lock.

        Args:
            entry: New session, not yet added to the session
            zone: Zone used to re-project the neighbours

        Returns:
            The stored session with its generated id

        Raises:
            OverlapConflict: If a committed session of the same user overlaps
        """
        return self._save_checked(entry, zone)

    def replace_checked(self, entry: SleepSession, zone: ZoneContext) -> SleepSession:
        """
        Persist an edited *entry*, ignoring its own previous interval.

        Args:
            entry: Loaded session with its fields already replaced
            zone: Zone used to re-project the neighbours

        Returns:
            The refreshed session

        Raises:
            OverlapConflict: If another session of the same user overlaps
        """
        return self._save_checked(entry, zone)

    def delete(self, entry_id: int) -> bool:
        """
        Delete a session by id.

        Returns:
            True if a row was deleted, False if none existed
        """
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _recheck(self, entry: SleepSession, zone: ZoneContext) -> None:
        with self.session.no_autoflush:
            existing = self.neighbour_intervals(entry.user_id, entry.wake_date, zone)
        candidate = resolve_interval(entry.wake_date, entry.bed_time, entry.wake_time, zone, session_id=entry.id)
        check_overlap(candidate, existing, exclude_id=entry.id)

    def _save_checked(self, entry: SleepSession, zone: ZoneContext) -> SleepSession:
        try:
            UserRepository(self.session).lock(entry.user_id)
            self._recheck(entry, zone)
            self.session.add(entry)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(entry)
        return entry
