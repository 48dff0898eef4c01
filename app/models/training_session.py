"""
Training session record.

Sessions are write-once history.  Whether a session is "past" is not
stored: it is decided against the current instant at query time.
"""

import datetime

from pydantic import field_validator

from app.models.base import CamelModel, as_utc


class TrainingSession(CamelModel):
    """A single completed (or scheduled) training session with its metrics.

    ``trainer_name`` is a free-text label; trainers are derived from the
    names found in sessions and appointments, not stored separately.
    """

    id: str
    player_id: str
    trainer_name: str
    start_time: datetime.datetime
    end_time: datetime.datetime

    # Session metrics
    score: float
    number_of_goals: int
    number_of_balls: int
    best_streak: int
    avg_speed_of_play: float
    number_of_exercises: int

    @field_validator("start_time", "end_time")
    @classmethod
    def ensure_utc(cls, value: datetime.datetime) -> datetime.datetime:
        return as_utc(value)
