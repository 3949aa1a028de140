"""
Tests for the overlap guard.

Intervals are built from wall-clock fields through ``resolve_interval`` so
every case exercises the same path the service uses.
"""

import datetime
from datetime import time as t

import pytest

from app.sleeptime.duration import resolve_interval
from app.sleeptime.errors import OverlapConflict
from app.sleeptime.overlap import check_overlap, find_conflict, intervals_overlap
from app.sleeptime.zone import resolve_zone

TOKYO = resolve_zone("Asia/Tokyo")
NEW_YORK = resolve_zone("America/New_York")

D = datetime.date(2025, 6, 1)


def _iv(bed, wake, wake_date=D, session_id=None, zone=TOKYO):
    return resolve_interval(wake_date, bed, wake, zone, session_id=session_id)


# ======================================================================
# intervals_overlap
# ======================================================================


class TestIntervalsOverlap:
    def test_boundary_touch_counts(self):
        a = _iv(t(22, 0), t(6, 0))
        b = _iv(t(6, 0), t(9, 0))
        assert intervals_overlap(a, b)
        assert intervals_overlap(b, a)

    def test_interior_overlap(self):
        assert intervals_overlap(_iv(t(22, 0), t(6, 0)), _iv(t(5, 0), t(9, 0)))

    def test_containment(self):
        assert intervals_overlap(_iv(t(22, 0), t(6, 0)), _iv(t(1, 0), t(2, 0)))

    def test_disjoint(self):
        assert not intervals_overlap(_iv(t(22, 0), t(6, 0)), _iv(t(6, 1), t(9, 0)))

    def test_consecutive_nights_do_not_overlap(self):
        night_1 = _iv(t(23, 0), t(7, 0), wake_date=D)
        night_2 = _iv(t(23, 0), t(7, 0), wake_date=D + datetime.timedelta(days=1))
        assert not intervals_overlap(night_1, night_2)

    def test_previous_evening_nap_touches_next_night(self):
        # Nap on D-1 ending 22:00 vs night starting 22:00 on D-1
        nap = _iv(t(20, 0), t(22, 0), wake_date=D - datetime.timedelta(days=1))
        night = _iv(t(22, 0), t(6, 0), wake_date=D)
        assert intervals_overlap(nap, night)

    def test_compares_instants_not_wall_clock(self):
        """On the fall-back night 01:45 (first pass) precedes 01:30 (second pass)."""
        fall_back = datetime.date(2025, 11, 2)
        early = _iv(t(0, 30), t(1, 30), wake_date=fall_back, zone=NEW_YORK)
        late = _iv(t(1, 45), t(3, 0), wake_date=fall_back, zone=NEW_YORK)
        assert late.bed_instant < early.wake_instant
        assert intervals_overlap(early, late)


# ======================================================================
# check_overlap / find_conflict
# ======================================================================


class TestCheckOverlap:
    def test_boundary_touch_is_rejected(self):
        existing = [_iv(t(22, 0), t(6, 0), session_id=1)]
        with pytest.raises(OverlapConflict) as excinfo:
            check_overlap(_iv(t(6, 0), t(9, 0)), existing)
        assert excinfo.value.conflicting_id == 1

    def test_interior_overlap_is_rejected(self):
        existing = [_iv(t(22, 0), t(6, 0), session_id=1)]
        with pytest.raises(OverlapConflict):
            check_overlap(_iv(t(5, 0), t(9, 0)), existing)

    def test_no_existing_sessions(self):
        check_overlap(_iv(t(22, 0), t(6, 0)), [])

    def test_disjoint_is_accepted(self):
        existing = [_iv(t(22, 0), t(6, 0), session_id=1), _iv(t(14, 0), t(15, 0), session_id=2)]
        check_overlap(_iv(t(7, 0), t(9, 0)), existing)

    def test_own_interval_is_excluded_on_update(self):
        existing = [_iv(t(22, 0), t(6, 0), session_id=1)]
        check_overlap(_iv(t(22, 30), t(6, 30), session_id=1), existing, exclude_id=1)

    def test_exclusion_only_drops_that_id(self):
        existing = [_iv(t(22, 0), t(6, 0), session_id=1), _iv(t(6, 30), t(8, 0), session_id=2)]
        with pytest.raises(OverlapConflict) as excinfo:
            check_overlap(_iv(t(22, 0), t(7, 0), session_id=1), existing, exclude_id=1)
        assert excinfo.value.conflicting_id == 2

    def test_lowest_conflicting_id_is_reported(self):
        existing = [_iv(t(3, 0), t(4, 0), session_id=9), _iv(t(1, 0), t(2, 0), session_id=4)]
        conflict = find_conflict(_iv(t(0, 0), t(5, 0)), existing)
        assert conflict.session_id == 4

    def test_find_conflict_returns_none(self):
        assert find_conflict(_iv(t(7, 0), t(9, 0)), [_iv(t(22, 0), t(6, 0), session_id=1)]) is None
