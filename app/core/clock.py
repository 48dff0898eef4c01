"""
Clock abstraction.

Past/future filtering is always relative to "now".  The engines take
``now`` as an explicit argument; the API layer obtains it from a
:class:`Clock` dependency so tests can pin the instant.
"""

from __future__ import annotations

import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current instant (timezone-aware)."""

    def now(self) -> datetime.datetime:
        ...


class SystemClock:
    """Wall-clock time in UTC."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc)


class FixedClock:
    """Always returns the same instant.  Naive instants are taken as UTC."""

    def __init__(self, instant: datetime.datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=datetime.timezone.utc)
        self.instant = instant

    def now(self) -> datetime.datetime:
        return self.instant
