"""Tests for wake-date duration calculation."""

import datetime
from datetime import time as t

import pytest

from app.sleeptime.duration import DurationResult, bed_date_for, duration_min, resolve_interval
from app.sleeptime.errors import SleepValidationError
from app.sleeptime.zone import UTC, ZoneContext, resolve_zone

NEW_YORK = resolve_zone("America/New_York")
TOKYO = resolve_zone("Asia/Tokyo")

D = datetime.date(2025, 6, 1)
SPRING_FORWARD = datetime.date(2025, 3, 9)
FALL_BACK = datetime.date(2025, 11, 2)


class _AlwaysGapZone(ZoneContext):
    def instants_for(self, local):
        return []


# ======================================================================
# bed_date_for
# ======================================================================


class TestBedDate:
    def test_cross_midnight_uses_previous_day(self):
        assert bed_date_for(D, t(23, 0), t(6, 0)) == datetime.date(2025, 5, 31)

    def test_same_day(self):
        assert bed_date_for(D, t(1, 0), t(8, 0)) == D

    def test_equal_times_stay_on_wake_date(self):
        assert bed_date_for(D, t(1, 30), t(1, 30)) == D

    def test_month_and_year_boundaries(self):
        assert bed_date_for(datetime.date(2025, 1, 1), t(22, 0), t(6, 0)) == datetime.date(2024, 12, 31)
        assert bed_date_for(datetime.date(2024, 3, 1), t(22, 0), t(6, 0)) == datetime.date(2024, 2, 29)

    def test_underflow_is_rejected(self):
        with pytest.raises(SleepValidationError):
            bed_date_for(datetime.date.min, t(23, 0), t(6, 0))


# ======================================================================
# duration_min: plain days
# ======================================================================


class TestDurationPlainDays:
    def test_cross_midnight(self):
        assert duration_min(D, t(23, 0), t(6, 0), TOKYO) == DurationResult(420, False)

    def test_cross_midnight_with_minutes(self):
        # 23:30 → 07:15 is 7h45m
        assert duration_min(D, t(23, 30), t(7, 15), TOKYO).minutes == 465

    def test_same_day_nap(self):
        assert duration_min(D, t(14, 0), t(15, 30), TOKYO).minutes == 90

    def test_after_midnight_bed(self):
        assert duration_min(D, t(1, 0), t(8, 0), TOKYO).minutes == 420

    def test_result_unpacks_as_pair(self):
        minutes, approximate = duration_min(D, t(22, 0), t(6, 0), TOKYO)
        assert (minutes, approximate) == (480, False)

    def test_equal_times_outside_dst_rejected(self):
        with pytest.raises(SleepValidationError, match="positive"):
            duration_min(D, t(7, 0), t(7, 0), TOKYO)

    @pytest.mark.parametrize("bed", [t(0, 0), t(3, 15), t(12, 0), t(21, 45), t(23, 59)])
    @pytest.mark.parametrize("wake", [t(0, 1), t(5, 30), t(12, 1), t(18, 0), t(23, 58)])
    def test_always_at_least_one_minute(self, bed, wake):
        assert duration_min(D, bed, wake, TOKYO).minutes >= 1

    def test_seconds_round_to_nearest_minute(self):
        assert duration_min(D, t(23, 0, 0), t(6, 0, 40), TOKYO).minutes == 421


# ======================================================================
# duration_min: DST transitions
# ======================================================================


class TestDurationDST:
    def test_fall_back_repeated_hour_counts_both(self):
        assert duration_min(FALL_BACK, t(1, 30), t(1, 30), NEW_YORK) == DurationResult(60, False)

    def test_fall_back_night_is_one_hour_longer(self):
        assert duration_min(FALL_BACK, t(23, 0), t(7, 0), NEW_YORK).minutes == 540

    def test_spring_forward_night_is_one_hour_shorter(self):
        assert duration_min(SPRING_FORWARD, t(23, 0), t(7, 0), NEW_YORK).minutes == 420

    def test_bed_inside_gap_is_shifted(self):
        # 02:30 does not exist; bed resolves to 03:00 EDT
        assert duration_min(SPRING_FORWARD, t(2, 30), t(7, 0), NEW_YORK) == DurationResult(240, False)

    def test_wake_inside_gap_is_shifted(self):
        # 23:00 EST → 03:00 EDT
        assert duration_min(SPRING_FORWARD, t(23, 0), t(2, 30), NEW_YORK).minutes == 180

    def test_both_ends_in_gap_collapse(self):
        with pytest.raises(SleepValidationError):
            duration_min(SPRING_FORWARD, t(2, 10), t(2, 50), NEW_YORK)

    @pytest.mark.parametrize("wake_date", [SPRING_FORWARD, FALL_BACK])
    @pytest.mark.parametrize("bed, wake", [(t(22, 0), t(6, 0)), (t(0, 30), t(1, 30)), (t(1, 0), t(3, 0)),
                                           (t(1, 59), t(2, 1)), (t(23, 59), t(0, 0)), (t(1, 30), t(1, 31)), ])
    def test_never_negative_across_transitions(self, wake_date, bed, wake):
        assert duration_min(wake_date, bed, wake, NEW_YORK).minutes >= 1

    def test_approximate_propagates(self):
        result = duration_min(D, t(23, 0), t(6, 0), _AlwaysGapZone("UTC"))
        assert result == DurationResult(420, True)


# ======================================================================
# resolve_interval
# ======================================================================


class TestResolveInterval:
    def test_instants_and_id(self):
        iv = resolve_interval(D, t(23, 0), t(6, 0), TOKYO, session_id=7)
        assert iv.bed_instant == datetime.datetime(2025, 5, 31, 14, 0, tzinfo=UTC)
        assert iv.wake_instant == datetime.datetime(2025, 5, 31, 21, 0, tzinfo=UTC)
        assert iv.session_id == 7
        assert iv.minutes == 420
        assert iv.approximate is False

    def test_zero_length_interval_is_not_rejected(self):
        iv = resolve_interval(D, t(7, 0), t(7, 0), TOKYO)
        assert iv.minutes == 0
