"""
Concurrent writers against a file-backed SQLite database.

Two sessions of the same user race between the overlap re-check and the
commit.  The write transaction must hold the database lock from the
re-check onwards, so exactly one of two overlapping nights is stored.
"""

import threading
from datetime import date
from datetime import time as t

import pytest
from sqlalchemy.exc import OperationalError
from sqlmodel import Session, SQLModel

import app.db.base  # noqa: F401
from app.db.repositories.sleep_session import SleepSessionRepository
from app.db.session import build_engine
from app.models.sleep_session import SleepSession
from app.models.user import User
from app.sleeptime.errors import OverlapConflict
from app.sleeptime.zone import resolve_zone

TOKYO = resolve_zone("Asia/Tokyo")

D = date(2025, 6, 1)


def _night(user_id: int, bed, wake) -> SleepSession:
    return SleepSession(user_id=user_id, wake_date=D, bed_time=bed, wake_time=wake, latency_min=10, awakenings=0,
                        quality=3, duration_min=480, timezone="Asia/Tokyo", )


@pytest.fixture
def file_engine_factory(tmp_path):
    engines = []

    def _build(busy_timeout: float):
        engine = build_engine(f"sqlite:///{tmp_path / 'sleep.db'}", busy_timeout=busy_timeout)
        SQLModel.metadata.create_all(engine)
        engines.append(engine)
        return engine

    yield _build
    for engine in engines:
        engine.dispose()


def _create_user(engine) -> int:
    with Session(engine) as session:
        user = User(email="racer@example.com")
        session.add(user)
        session.commit()
        return user.id


def _stored_nights(engine, user_id: int) -> list[tuple]:
    with Session(engine) as session:
        return [(s.bed_time, s.wake_time) for s in SleepSessionRepository(session).get_all_by_user(user_id)]


# ======================================================================
# Interleaved writers
# ======================================================================


class TestConcurrentInsert:
    def test_waiting_writer_sees_committed_night(self, file_engine_factory, monkeypatch):
        """The second writer blocks on the lock, then re-checks and conflicts."""
        engine = file_engine_factory(busy_timeout=10.0)
        user_id = _create_user(engine)
        outcome = []

        def write_second():
            with Session(engine) as session:
                try:
                    SleepSessionRepository(session).insert_checked(_night(user_id, t(22, 0), t(6, 0)), TOKYO)
                    outcome.append("stored")
                except OverlapConflict as e:
                    outcome.append(e)

        second = threading.Thread(target=write_second)

        with Session(engine) as session:
            repository = SleepSessionRepository(session)
            recheck = repository._recheck

            def recheck_then_start_second(entry, zone):
                recheck(entry, zone)
                second.start()
                second.join(timeout=0.3)

            monkeypatch.setattr(repository, "_recheck", recheck_then_start_second)
            first = repository.insert_checked(_night(user_id, t(23, 0), t(7, 0)), TOKYO)
            first_id = first.id

        second.join(timeout=10.0)
        assert not second.is_alive()
        assert len(outcome) == 1
        assert isinstance(outcome[0], OverlapConflict)
        assert outcome[0].conflicting_id == first_id
        assert _stored_nights(engine, user_id) == [(t(23, 0), t(7, 0))]

    def test_writer_cannot_commit_inside_open_recheck(self, file_engine_factory, monkeypatch):
        """While one transaction holds the lock a second write fails instead of slipping in."""
        engine = file_engine_factory(busy_timeout=0.1)
        user_id = _create_user(engine)
        errors = []

        with Session(engine) as session:
            repository = SleepSessionRepository(session)
            recheck = repository._recheck

            def recheck_then_write_second(entry, zone):
                recheck(entry, zone)
                with Session(engine) as other:
                    try:
                        SleepSessionRepository(other).insert_checked(_night(user_id, t(22, 0), t(6, 0)), TOKYO)
                    except OperationalError as e:
                        errors.append(e)

            monkeypatch.setattr(repository, "_recheck", recheck_then_write_second)
            repository.insert_checked(_night(user_id, t(23, 0), t(7, 0)), TOKYO)

        assert len(errors) == 1
        assert "locked" in str(errors[0])
        assert _stored_nights(engine, user_id) == [(t(23, 0), t(7, 0))]
