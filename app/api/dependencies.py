"""
Shared API dependencies.

Reusable FastAPI dependencies for the record store, the clock and the
engine configurations.  Tests replace ``get_store`` and ``get_clock``
through ``app.dependency_overrides``.
"""

from app.core.clock import Clock, SystemClock
from app.core.config import settings
from app.db.session import get_store
from app.engine.scheduling import ScheduleConfig
from app.engine.summary import SummaryConfig

_system_clock = SystemClock()


def get_clock() -> Clock:
    """Wall-clock source of "now"."""
    return _system_clock


def get_schedule_config() -> ScheduleConfig:
    return ScheduleConfig(start_hour=settings.SCHEDULE_START_HOUR, end_hour=settings.SCHEDULE_END_HOUR,
                          timezone=settings.SCHEDULE_TIMEZONE, )


def get_summary_config() -> SummaryConfig:
    return SummaryConfig(window_days=settings.SUMMARY_WINDOW_DAYS)
