"""
Wake date assignment.

The wake date is supplied explicitly with every session and is the only
grouping key used for storage, lookup and daily aggregation.  It is never
derived from the bed time, even when the bed event falls on the previous
calendar day.
"""

from __future__ import annotations

import datetime
from typing import Protocol


class HasWakeDate(Protocol):
    wake_date: datetime.date


def assign_wake_date(payload: HasWakeDate) -> datetime.date:
    """Return the grouping date of *payload* unchanged."""
    return payload.wake_date
