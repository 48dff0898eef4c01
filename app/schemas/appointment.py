"""
Appointment API schemas.

Chronological checks (end after start, start in the future) happen in the
booking service, where the current instant is known.
"""

import datetime

from pydantic import Field, field_validator

from app.models.base import CamelModel, as_utc


class AppointmentCreate(CamelModel):
    """Schema for booking an appointment."""

    trainer_name: str = Field(..., min_length=1, max_length=200, description="Trainer to book")
    start_time: datetime.datetime = Field(..., description="Slot start (ISO 8601)")
    end_time: datetime.datetime = Field(..., description="Slot end (ISO 8601)")

    @field_validator("trainer_name")
    @classmethod
    def strip_trainer_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Trainer name is required")
        return value

    @field_validator("start_time", "end_time")
    @classmethod
    def ensure_utc(cls, value: datetime.datetime) -> datetime.datetime:
        return as_utc(value)
