"""
Trainer scheduling — fixed operating-hour grid with availability.

Each day is cut into one-hour slots between ``start_hour`` and
``end_hour`` (9 to 17 by default, i.e. eight slots).  A slot is
available when it has not started yet and no appointment of the same
trainer overlaps it.

Overlap is half-open: an appointment ``[a_start, a_end)`` overlaps a slot
``[s_start, s_end)`` iff ``a_start < s_end and a_end > s_start``.  Two
intervals that only touch (one ends when the other starts) do not
overlap, so back-to-back bookings are allowed.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, Field, model_validator

from app.db.repositories.appointment import AppointmentRepository
from app.db.repositories.trainer import TrainerRepository
from app.db.store import DataStore
from app.engine.temporal import at_hour, has_started, hour_range
from app.models.appointment import Appointment
from app.schemas.schedule import TimeSlot, TrainerSchedule

# ======================================================================
# Configuration
# ======================================================================


class ScheduleConfig(BaseModel):
    """Operating-hour grid.

    ``timezone`` is the IANA zone in which the grid hours are read.
    """

    start_hour: int = Field(9, ge=0, le=23)
    end_hour: int = Field(17, ge=1, le=24)
    timezone: str = Field("UTC", description="IANA timezone of the grid, e.g. 'Europe/Rome'")

    @model_validator(mode="after")
    def check_hours(self) -> ScheduleConfig:
        if self.end_hour <= self.start_hour:
            raise ValueError("end_hour must be greater than start_hour")
        return self

    @property
    def tzinfo(self) -> datetime.tzinfo:
        if self.timezone.upper() == "UTC":
            return datetime.timezone.utc
        return ZoneInfo(self.timezone)


DEFAULT_SCHEDULE_CONFIG = ScheduleConfig()

SLOT_LENGTH = datetime.timedelta(hours=1)


# ======================================================================
# Overlap
# ======================================================================


def overlaps(a_start: datetime.datetime, a_end: datetime.datetime, b_start: datetime.datetime,
             b_end: datetime.datetime, ) -> bool:
    """Half-open interval overlap; touching endpoints do not count."""
    return a_start < b_end and a_end > b_start


def find_conflicts(store: DataStore, trainer_name: str, start: datetime.datetime,
                   end: datetime.datetime, ) -> list[Appointment]:
    """Appointments of *trainer_name* overlapping ``[start, end)``."""
    return [a for a in AppointmentRepository(store).get_for_trainer(trainer_name) if
            overlaps(a.start_time, a.end_time, start, end)]


# ======================================================================
# Slot generation
# ======================================================================


def _build_slots(date: datetime.date, booked: Iterable[Appointment], now: datetime.datetime,
                 cfg: ScheduleConfig, ) -> list[TimeSlot]:
    booked = list(booked)
    slots: list[TimeSlot] = []
    for hour in hour_range(cfg.start_hour, cfg.end_hour):
        start = at_hour(date, hour, cfg.tzinfo)
        end = start + SLOT_LENGTH

        is_past = has_started(start, now)
        is_booked = any(overlaps(a.start_time, a.end_time, start, end) for a in booked)

        slots.append(TimeSlot(start_time=start, end_time=end, available=not is_past and not is_booked))
    return slots


# ======================================================================
# Main entry points
# ======================================================================


def compute_trainer_schedule(store: DataStore, trainer_name: str, date: datetime.date, now: datetime.datetime,
                             config: Optional[ScheduleConfig] = None, ) -> TrainerSchedule:
    """Compute the slot grid of one trainer on *date*.

    Any trainer name is accepted, including one with no records yet:
    its grid is simply free apart from slots already in the past.
    """
    cfg = config or DEFAULT_SCHEDULE_CONFIG
    booked = AppointmentRepository(store).get_for_trainer(trainer_name)
    return TrainerSchedule(trainer_name=trainer_name, date=date, slots=_build_slots(date, booked, now, cfg))


def compute_all_trainer_schedules(store: DataStore, date: datetime.date, now: datetime.datetime,
                                  config: Optional[ScheduleConfig] = None, ) -> list[TrainerSchedule]:
    """One schedule per known trainer, ordered by trainer name."""
    return [compute_trainer_schedule(store, name, date, now, config) for name in TrainerRepository(store).get_names()]
