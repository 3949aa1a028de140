"""
Local time projection: (date, time-of-day, zone) to an absolute instant.

Three cases are handled:

1. **Unambiguous**: one UTC offset applies, use it.
2. **Ambiguous** (fall-back): the wall-clock value occurs twice.  A *bed*
   endpoint takes the earliest instant and a *wake* endpoint the latest,
   so the transition night never yields a negative or truncated duration.
3. **Nonexistent** (spring-forward): the wall-clock value was skipped.
   Scan forward one minute at a time, for at most three hours, and use the
   first valid minute.  If the scan runs out, read the wall-clock value as
   if it were UTC and flag the result ``approximate``.  That is a warning,
   not an error: the write still goes through.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum

import structlog

from app.sleeptime.zone import UTC, ZoneContext

logger = structlog.get_logger()

# Forward scan budget for spring-forward gaps.
MAX_DST_GAP_MINUTES = 3 * 60

_ONE_MINUTE = datetime.timedelta(minutes=1)


class Role(str, Enum):
    """Which end of a sleep session is being projected."""

    BED = "bed"
    WAKE = "wake"


class ProjectionOutcome(str, Enum):
    UNAMBIGUOUS = "unambiguous"
    AMBIGUOUS = "ambiguous"
    SHIFTED = "shifted"
    APPROXIMATE = "approximate"


@dataclass(frozen=True)
class Projection:
    """Result of projecting one wall-clock endpoint."""

    instant: datetime.datetime
    outcome: ProjectionOutcome
    local: datetime.datetime

    @property
    def approximate(self) -> bool:
        return self.outcome is ProjectionOutcome.APPROXIMATE


def _pick(instants: list[datetime.datetime], role: Role) -> datetime.datetime:
    return instants[0] if role is Role.BED else instants[-1]


def project(date: datetime.date, time_of_day: datetime.time, zone: ZoneContext, role: Role) -> Projection:
    """Resolve a wall-clock endpoint into an aware UTC instant."""
    local = datetime.datetime.combine(date, time_of_day.replace(tzinfo=None))

    instants = zone.instants_for(local)
    if len(instants) == 1:
        return Projection(instant=instants[0], outcome=ProjectionOutcome.UNAMBIGUOUS, local=local)
    if instants:
        return Projection(instant=_pick(instants, role), outcome=ProjectionOutcome.AMBIGUOUS, local=local)

    cursor = local
    for _ in range(MAX_DST_GAP_MINUTES):
        cursor += _ONE_MINUTE
        instants = zone.instants_for(cursor)
        if instants:
            return Projection(instant=_pick(instants, role), outcome=ProjectionOutcome.SHIFTED, local=local)

    logger.warning("projection_fallback_to_utc", timezone=zone.identifier, local=local.isoformat(),
                   role=role.value, scanned_minutes=MAX_DST_GAP_MINUTES)
    return Projection(instant=local.replace(tzinfo=UTC), outcome=ProjectionOutcome.APPROXIMATE, local=local)
