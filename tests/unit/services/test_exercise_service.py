"""Tests for exercise logging and the per-date intensity rollup."""

import datetime
from datetime import time as t

import pytest
from fastapi import HTTPException

from app.models.exercise import Intensity
from app.schemas.exercise import ExerciseCreate
from app.services.exercise_service import MAX_RANGE_DAYS, ExerciseService

D = datetime.date(2025, 6, 1)


@pytest.fixture
def exercise_service(db) -> ExerciseService:
    return ExerciseService(db)


def _daily(intensity: str, date=D) -> ExerciseCreate:
    return ExerciseCreate(date=date, intensity=intensity)


# ======================================================================
# Logging
# ======================================================================


class TestLog:
    def test_daily_intensity_is_upserted(self, exercise_service, user):
        first = exercise_service.log(user.id, _daily("light"))
        second = exercise_service.log(user.id, _daily("hard"))
        assert second.id == first.id
        assert second.intensity is Intensity.HARD
        assert exercise_service.repository.get_daily_row(user.id, D).intensity == "hard"

    def test_timed_events_are_separate_rows(self, exercise_service, user):
        a = exercise_service.log(user.id, ExerciseCreate(date=D, intensity="light", start_time=t(7, 0),
                                                         duration_min=30))
        b = exercise_service.log(user.id, ExerciseCreate(date=D, intensity="light", duration_min=45))
        daily = exercise_service.log(user.id, _daily("none"))
        assert len({a.id, b.id, daily.id}) == 3
        assert a.start_time == t(7, 0)
        assert b.start_time is None and b.duration_min == 45

    def test_daily_rows_are_per_user(self, exercise_service, user, other_user):
        mine = exercise_service.log(user.id, _daily("light"))
        theirs = exercise_service.log(other_user.id, _daily("hard"))
        assert mine.id != theirs.id
        assert exercise_service.repository.get_daily_row(user.id, D).intensity == "light"

    @pytest.mark.parametrize("payload", [{"intensity": "extreme"}, {"intensity": "light", "duration_min": 0},
                                         {"intensity": "light", "duration_min": 2000}, ])
    def test_invalid_input_is_rejected_by_schema(self, payload):
        with pytest.raises(ValueError):
            ExerciseCreate(date=D, **payload)


# ======================================================================
# Intensity rollup
# ======================================================================


class TestIntensityRange:
    def test_highest_intensity_per_date(self, exercise_service, user):
        exercise_service.log(user.id, _daily("none"))
        exercise_service.log(user.id, ExerciseCreate(date=D, intensity="hard", duration_min=20))
        exercise_service.log(user.id, ExerciseCreate(date=D, intensity="light", duration_min=40))
        exercise_service.log(user.id, _daily("light", date=D + datetime.timedelta(days=2)))

        days = exercise_service.intensity_range(user.id, D, D + datetime.timedelta(days=6))
        assert [(d.date, d.intensity) for d in days] == [(D, Intensity.HARD),
                                                         (D + datetime.timedelta(days=2), Intensity.LIGHT), ]

    def test_only_none_reports_none(self, exercise_service, user):
        exercise_service.log(user.id, _daily("none"))
        assert exercise_service.intensity_range(user.id, D, D)[0].intensity is Intensity.NONE

    def test_other_users_events_are_ignored(self, exercise_service, user, other_user):
        exercise_service.log(other_user.id, _daily("hard"))
        assert exercise_service.intensity_range(user.id, D, D) == []

    def test_range_bounds_are_inclusive(self, exercise_service, user):
        exercise_service.log(user.id, _daily("light", date=D))
        exercise_service.log(user.id, _daily("light", date=D + datetime.timedelta(days=3)))
        days = exercise_service.intensity_range(user.id, D, D + datetime.timedelta(days=3))
        assert len(days) == 2

    def test_reversed_range_is_rejected(self, exercise_service, user):
        with pytest.raises(HTTPException) as excinfo:
            exercise_service.intensity_range(user.id, D, D - datetime.timedelta(days=1))
        assert excinfo.value.status_code == 400

    def test_range_limit(self, exercise_service, user):
        last_allowed = D + datetime.timedelta(days=MAX_RANGE_DAYS - 1)
        assert exercise_service.intensity_range(user.id, D, last_allowed) == []
        with pytest.raises(HTTPException) as excinfo:
            exercise_service.intensity_range(user.id, D, last_allowed + datetime.timedelta(days=1))
        assert excinfo.value.status_code == 400


class TestIntensityOrder:
    def test_rank(self):
        assert Intensity.NONE.rank < Intensity.LIGHT.rank < Intensity.HARD.rank
