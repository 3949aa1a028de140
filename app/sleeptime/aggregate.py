"""
Daily aggregation: fold all sessions sharing one wake date.

The daily figure is a read-time projection, rebuilt on every query:

- ``total_duration_min`` sums the cached per-session durations,
- ``avg_quality`` / ``avg_latency_min`` are means rounded half-up,
- ``total_awakenings`` is a plain sum.

The representative bed/wake pair is picked by **instant**, not by
comparing wall-clock strings: a nap at 14:00 and a night that started at
23:00 the day before must report 23:00 as the earliest bed time.  Ties on
the instant go to the lowest session id.
"""

from __future__ import annotations

import datetime
import math
from collections import defaultdict
from typing import Iterable, Optional, Protocol, Sequence

from app.schemas.sleep_session import DailyAggregate
from app.sleeptime.duration import ResolvedInterval, resolve_interval
from app.sleeptime.zone import ZoneContext


class SessionLike(Protocol):
    id: Optional[int]
    wake_date: datetime.date
    bed_time: datetime.time
    wake_time: datetime.time
    latency_min: int
    awakenings: int
    quality: int
    duration_min: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _session_key(session: SessionLike) -> int:
    return session.id if session.id is not None else 0


def aggregate(sessions: Sequence[SessionLike], zone: ZoneContext) -> DailyAggregate:
    """Summarise the sessions of one wake date.

    Raises :class:`ValueError` for an empty list or mixed wake dates.
    """
    if not sessions:
        raise ValueError("cannot aggregate an empty list of sessions")

    wake_dates = {s.wake_date for s in sessions}
    if len(wake_dates) != 1:
        raise ValueError(f"sessions span several wake dates: {sorted(wake_dates)}")
    wake_date = wake_dates.pop()

    resolved: list[tuple[SessionLike, ResolvedInterval]] = [
        (s, resolve_interval(s.wake_date, s.bed_time, s.wake_time, zone, session_id=s.id)) for s in sessions]

    earliest_bed, _ = min(resolved, key=lambda pair: (pair[1].bed_instant, _session_key(pair[0])))
    # Latest wake wins; among equal instants the lowest id.
    latest_wake, _ = min(resolved, key=lambda pair: (-pair[1].wake_instant.timestamp(), _session_key(pair[0])))

    count = len(sessions)
    return DailyAggregate(wake_date=wake_date, bed_time=earliest_bed.bed_time, wake_time=latest_wake.wake_time,
                          bed_session_id=earliest_bed.id, wake_session_id=latest_wake.id,
                          total_duration_min=sum(s.duration_min for s in sessions), session_count=count,
                          avg_quality=_round_half_up(sum(s.quality for s in sessions) / count),
                          avg_latency_min=_round_half_up(sum(s.latency_min for s in sessions) / count),
                          total_awakenings=sum(s.awakenings for s in sessions),
                          approximate=any(iv.approximate for _, iv in resolved), )


def aggregate_by_wake_date(sessions: Iterable[SessionLike], zone: ZoneContext) -> list[DailyAggregate]:
    """Group *sessions* by wake date and aggregate each day, oldest first."""
    by_day: dict[datetime.date, list[SessionLike]] = defaultdict(list)
    for s in sessions:
        by_day[s.wake_date].append(s)
    return [aggregate(by_day[day], zone) for day in sorted(by_day)]
