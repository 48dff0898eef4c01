"""Record models for the in-memory store."""

from app.models.profile import PlayerProfile
from app.models.training_session import TrainingSession
from app.models.appointment import Appointment

__all__ = [
    "PlayerProfile",
    "TrainingSession",
    "Appointment",
]
