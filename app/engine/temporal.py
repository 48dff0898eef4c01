"""
Temporal helpers and the shared rounding primitive.

Every comparison takes the reference instant ``now`` explicitly; nothing
here reads the wall clock.
"""

from __future__ import annotations

import datetime
import math


def is_past(moment: datetime.datetime, now: datetime.datetime) -> bool:
    """Strictly before *now*."""
    return moment < now


def is_future(moment: datetime.datetime, now: datetime.datetime) -> bool:
    """Strictly after *now*."""
    return moment > now


def has_started(moment: datetime.datetime, now: datetime.datetime) -> bool:
    """At or before *now* (a slot starting exactly now is no longer bookable)."""
    return moment <= now


def same_day(a: datetime.datetime | datetime.date, b: datetime.datetime | datetime.date) -> bool:
    """Compare calendar dates only, ignoring the time of day."""
    if isinstance(a, datetime.datetime):
        a = a.date()
    if isinstance(b, datetime.datetime):
        b = b.date()
    return a == b


def window_start(now: datetime.datetime, days: int) -> datetime.datetime:
    """Start of the trailing window of *days* x 24h ending at *now*."""
    return now - datetime.timedelta(days=days)


def hour_range(start_hour: int, end_hour: int) -> range:
    """Hours in ``[start_hour, end_hour)``."""
    return range(start_hour, end_hour)


def at_hour(date: datetime.date, hour: int, tz: datetime.tzinfo) -> datetime.datetime:
    """*date* at ``hour:00:00`` in *tz*."""
    return datetime.datetime.combine(date, datetime.time(hour=hour), tzinfo=tz)


def compute_age(dob: datetime.date, today: datetime.date) -> int:
    """Age in whole years on *today*."""
    age = today.year - dob.year
    if (today.month, today.day) < (dob.month, dob.day):
        age -= 1
    return age


def round_half_up(value: float, places: int) -> float:
    """Round *value* to *places* decimals, halves rounded upwards.

    Scales by ``10 ** places``, rounds to the nearest integer with
    ``.5`` going up, and scales back.  Used for every averaged metric.
    """
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor
