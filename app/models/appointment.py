"""
Appointment record.

Appointments are created and deleted by the booking operations; there is
no update in place.
"""

import datetime

from pydantic import field_validator

from app.models.base import CamelModel, as_utc


class Appointment(CamelModel):
    """A booked one-to-one slot between a player and a trainer."""

    id: str
    player_id: str
    trainer_name: str
    start_time: datetime.datetime
    end_time: datetime.datetime

    @field_validator("start_time", "end_time")
    @classmethod
    def ensure_utc(cls, value: datetime.datetime) -> datetime.datetime:
        return as_utc(value)
