"""
Time filters for session and appointment listings.
"""

from enum import Enum


class SessionFilter(str, Enum):
    """``past`` keeps sessions that started before now; ``all`` keeps every session."""

    PAST = "past"
    ALL = "all"


class AppointmentFilter(str, Enum):
    """``future`` keeps appointments starting after now; ``all`` keeps every appointment."""

    FUTURE = "future"
    ALL = "all"
