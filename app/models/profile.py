"""
Player profile record.
"""

import datetime

from pydantic import field_validator

from app.models.base import CamelModel, as_utc


class PlayerProfile(CamelModel):
    """
    A registered player.

    ``email`` is the case-insensitive unique key used for sign-in lookups.
    """

    id: str
    email: str
    first_name: str
    last_name: str
    phone: str = ""
    gender: str = ""
    dob: datetime.date
    center_name: str
    created_at: datetime.datetime

    @field_validator("created_at")
    @classmethod
    def ensure_utc(cls, value: datetime.datetime) -> datetime.datetime:
        return as_utc(value)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
