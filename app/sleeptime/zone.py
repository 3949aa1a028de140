"""
Zone context: one IANA time zone plus where it came from.

The engine never looks a zone up on its own.  Callers resolve the user's
configured identifier (or the process default) into a :class:`ZoneContext`
and thread it into every call.

Transition queries
------------------
A naive local datetime maps to zero, one or two instants:

- **0**: the wall-clock value was skipped by a spring-forward gap,
- **1**: the normal case,
- **2**: the wall-clock value repeats during a fall-back transition.

``zoneinfo`` answers this through the ``fold`` attribute: both folds are
tried and a candidate is kept only if converting it to UTC and back gives
the same wall-clock value.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.sleeptime.errors import InvalidTimeZone

UTC = datetime.timezone.utc


class ZoneSource(str, Enum):
    """Where the zone identifier came from."""

    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class ZoneContext:
    """A validated IANA zone."""

    identifier: str
    source: ZoneSource = ZoneSource.USER
    tz: ZoneInfo = field(repr=False, compare=False, default=None)

    def __post_init__(self):
        if self.tz is None:
            object.__setattr__(self, "tz", _load(self.identifier))

    # ------------------------------------------------------------------
    # Transition queries
    # ------------------------------------------------------------------

    def instants_for(self, local: datetime.datetime) -> list[datetime.datetime]:
        """Return every UTC instant whose wall-clock value is *local*.

        The result is sorted ascending and holds 0, 1 or 2 entries.
        """
        naive = local.replace(tzinfo=None, fold=0)
        found: list[datetime.datetime] = []
        for fold in (0, 1):
            candidate = naive.replace(tzinfo=self.tz, fold=fold)
            instant = candidate.astimezone(UTC)
            if instant.astimezone(self.tz).replace(tzinfo=None) != naive:
                continue
            if instant not in found:
                found.append(instant)
        return sorted(found)

    def is_ambiguous(self, local: datetime.datetime) -> bool:
        return len(self.instants_for(local)) > 1

    def is_nonexistent(self, local: datetime.datetime) -> bool:
        return not self.instants_for(local)


def _load(identifier: str) -> ZoneInfo:
    if not identifier or not identifier.strip():
        raise InvalidTimeZone(identifier)
    try:
        return ZoneInfo(identifier)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise InvalidTimeZone(identifier) from None


def resolve_zone(identifier: str, source: ZoneSource = ZoneSource.USER) -> ZoneContext:
    """Validate *identifier* against the tz database.

    Raises :class:`InvalidTimeZone` for empty, malformed or unknown
    identifiers.  No fallback zone is ever substituted here.
    """
    name = identifier.strip() if identifier else identifier
    tz = _load(name)
    return ZoneContext(identifier=tz.key, source=source, tz=tz)
