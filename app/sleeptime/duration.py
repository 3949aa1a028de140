"""
Duration calculation with wake-date semantics.

A session is keyed by the date the sleeper woke up.  When the bed time is
later on the clock than the wake time, the session crossed midnight and
the bed event belongs to the previous calendar day:

    bed 23:00, wake 06:00, wake_date D  →  bed on D-1, 420 minutes
    bed 01:00, wake 08:00, wake_date D  →  bed on D,   420 minutes

Both endpoints go through :func:`app.sleeptime.projector.project` (bed
role, then wake role) and the elapsed minutes are taken between the two
UTC instants, so DST transitions are accounted for.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import NamedTuple, Optional

from app.sleeptime.errors import SleepValidationError
from app.sleeptime.projector import Projection, Role, project
from app.sleeptime.zone import ZoneContext


class DurationResult(NamedTuple):
    minutes: int
    approximate: bool


@dataclass(frozen=True)
class ResolvedInterval:
    """Instant interval of one session.  Never persisted."""

    bed_instant: datetime.datetime
    wake_instant: datetime.datetime
    session_id: Optional[int] = None
    approximate: bool = False

    @property
    def minutes(self) -> int:
        return round((self.wake_instant - self.bed_instant).total_seconds() / 60)


def bed_date_for(wake_date: datetime.date, bed_time: datetime.time, wake_time: datetime.time) -> datetime.date:
    """Calendar date of the bed event."""
    if bed_time > wake_time:
        if wake_date == datetime.date.min:
            raise SleepValidationError("invalid date (underflow)")
        return wake_date - datetime.timedelta(days=1)
    return wake_date


def project_endpoints(wake_date: datetime.date, bed_time: datetime.time, wake_time: datetime.time,
                      zone: ZoneContext, ) -> tuple[Projection, Projection]:
    bed = project(bed_date_for(wake_date, bed_time, wake_time), bed_time, zone, Role.BED)
    wake = project(wake_date, wake_time, zone, Role.WAKE)
    return bed, wake


def resolve_interval(wake_date: datetime.date, bed_time: datetime.time, wake_time: datetime.time, zone: ZoneContext,
                     session_id: Optional[int] = None, ) -> ResolvedInterval:
    """Resolve a session's wall-clock fields into a :class:`ResolvedInterval`."""
    bed, wake = project_endpoints(wake_date, bed_time, wake_time, zone)
    return ResolvedInterval(bed_instant=bed.instant, wake_instant=wake.instant, session_id=session_id,
                            approximate=bed.approximate or wake.approximate, )


def duration_min(wake_date: datetime.date, bed_time: datetime.time, wake_time: datetime.time,
                 zone: ZoneContext, ) -> DurationResult:
    """Elapsed minutes between bed and wake, DST-aware.

    Returns ``(minutes, approximate)``.  Raises
    :class:`SleepValidationError` when the result is not positive, which
    only happens for ``bed_time == wake_time`` outside a fall-back night or
    when both endpoints collapse onto the same gap edge.
    """
    interval = resolve_interval(wake_date, bed_time, wake_time, zone)
    minutes = interval.minutes
    if minutes <= 0:
        raise SleepValidationError("Duration must be positive")
    return DurationResult(minutes=minutes, approximate=interval.approximate)
