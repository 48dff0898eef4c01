"""Pydantic schemas for request/response validation."""

from app.schemas.filters import AppointmentFilter, SessionFilter
from app.schemas.profile import PlayerProfileResponse
from app.schemas.summary import LastSessionSnapshot, PlayerSummary, RecentWindowStats
from app.schemas.leaderboard import LeaderboardEntry
from app.schemas.schedule import TimeSlot, TrainerSchedule
from app.schemas.appointment import AppointmentCreate
from app.schemas.training_session import SessionTag, TrainingSessionDetail

__all__ = [
    "AppointmentFilter",
    "SessionFilter",
    "PlayerProfileResponse",
    "LastSessionSnapshot",
    "PlayerSummary",
    "RecentWindowStats",
    "LeaderboardEntry",
    "TimeSlot",
    "TrainerSchedule",
    "AppointmentCreate",
    "SessionTag",
    "TrainingSessionDetail",
]
