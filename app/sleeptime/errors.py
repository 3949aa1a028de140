"""
Typed errors raised by the sleep time engine.

Every expected bad input maps to one of these.  The API layer translates
them to HTTP responses; nothing inside the engine catches them.
"""

from __future__ import annotations

from typing import Optional


class SleepEngineError(Exception):
    """Base class for all engine errors."""


class InvalidTimeZone(SleepEngineError):
    """The zone identifier is not known to the tz database."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"invalid timezone: {identifier!r}")


class OverlapConflict(SleepEngineError):
    """A candidate session collides with an existing one."""

    def __init__(self, conflicting_id: Optional[int]):
        self.conflicting_id = conflicting_id
        super().__init__("sleep session overlaps existing session")


class SleepValidationError(SleepEngineError):
    """Structurally invalid input; time math is never attempted on it."""
