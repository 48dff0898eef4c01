"""
Trainer schedule schemas.
"""

import datetime

from app.models.base import CamelModel


class TimeSlot(CamelModel):
    """A bookable window of the operating-hour grid."""

    start_time: datetime.datetime
    end_time: datetime.datetime
    available: bool


class TrainerSchedule(CamelModel):
    """All grid slots of one trainer on one calendar date, in time order."""

    trainer_name: str
    date: datetime.date
    slots: list[TimeSlot]
