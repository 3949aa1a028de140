"""
Overlap guard: no two sessions of a user may share any instant.

Two resolved intervals ``a`` and ``b`` conflict when::

    a.bed_instant <= b.wake_instant and b.bed_instant <= a.wake_instant

The comparison is inclusive on both sides: a session ending at exactly
the instant another starts is a conflict too.

The guard runs twice per write.  The service calls it before persisting
to give a clean error, and the repository calls it again inside the write
transaction, after locking the owning user row, so that a concurrent
writer cannot slip an overlapping session in between.
"""

from __future__ import annotations

from typing import Iterable, Optional

from app.sleeptime.duration import ResolvedInterval
from app.sleeptime.errors import OverlapConflict


def intervals_overlap(a: ResolvedInterval, b: ResolvedInterval) -> bool:
    return a.bed_instant <= b.wake_instant and b.bed_instant <= a.wake_instant


def find_conflict(candidate: ResolvedInterval, existing: Iterable[ResolvedInterval],
                  exclude_id: Optional[int] = None, ) -> Optional[ResolvedInterval]:
    """Return the conflicting interval with the lowest id, or ``None``."""
    conflicts = []
    for other in existing:
        if exclude_id is not None and other.session_id == exclude_id:
            continue
        if intervals_overlap(candidate, other):
            conflicts.append(other)

    if not conflicts:
        return None
    return min(conflicts, key=lambda iv: (iv.session_id is None, iv.session_id or 0))


def check_overlap(candidate: ResolvedInterval, existing: Iterable[ResolvedInterval],
                  exclude_id: Optional[int] = None, ) -> None:
    """Raise :class:`OverlapConflict` if *candidate* collides with *existing*.

    ``exclude_id`` drops the session's own previous interval on update.
    """
    conflict = find_conflict(candidate, existing, exclude_id)
    if conflict is not None:
        raise OverlapConflict(conflict.session_id)
