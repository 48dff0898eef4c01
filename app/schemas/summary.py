"""
Player dashboard summary schemas.

All values are derived from the player's past training sessions at
request time; nothing here is stored.
"""

import datetime
from typing import Optional

from pydantic import Field

from app.models.base import CamelModel


class LastSessionSnapshot(CamelModel):
    """The most recent past session, reduced to what the dashboard shows."""

    id: str
    date: datetime.datetime = Field(..., description="Start time of the session")
    score: float
    trainer_name: str


class RecentWindowStats(CamelModel):
    """Aggregates over the trailing window (30 days by default)."""

    total_sessions: int = 0
    total_balls: int = 0
    avg_score: float = Field(0.0, description="Mean score, one decimal")
    total_goals: int = 0


class PlayerSummary(CamelModel):
    """Dashboard summary of a player's training history.

    A player without past sessions (or an unknown player id) gets the
    all-zero summary with ``last_session = None``.
    """

    total_sessions: int = 0
    avg_score: float = Field(0.0, description="Mean score over all past sessions, one decimal")
    best_streak_record: int = 0
    last_session: Optional[LastSessionSnapshot] = None
    last_30_days: RecentWindowStats = Field(default_factory=RecentWindowStats, alias="last30Days")
