"""Sleep time engine: zone resolution, DST-aware durations, overlap guard, daily aggregation."""

from app.sleeptime.aggregate import aggregate, aggregate_by_wake_date
from app.sleeptime.duration import DurationResult, ResolvedInterval, duration_min, resolve_interval
from app.sleeptime.errors import InvalidTimeZone, OverlapConflict, SleepEngineError, SleepValidationError
from app.sleeptime.overlap import check_overlap, find_conflict
from app.sleeptime.projector import Projection, ProjectionOutcome, Role, project
from app.sleeptime.wake_date import assign_wake_date
from app.sleeptime.zone import ZoneContext, ZoneSource, resolve_zone

__all__ = [
    "aggregate",
    "aggregate_by_wake_date",
    "assign_wake_date",
    "check_overlap",
    "duration_min",
    "find_conflict",
    "project",
    "resolve_interval",
    "resolve_zone",
    "DurationResult",
    "InvalidTimeZone",
    "OverlapConflict",
    "Projection",
    "ProjectionOutcome",
    "ResolvedInterval",
    "Role",
    "SleepEngineError",
    "SleepValidationError",
    "ZoneContext",
    "ZoneSource",
]
