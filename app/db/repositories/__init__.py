"""Record repositories (query layer)."""

from app.db.repositories.profile import ProfileRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.repositories.appointment import AppointmentRepository
from app.db.repositories.trainer import TrainerRepository

__all__ = [
    "ProfileRepository",
    "TrainingSessionRepository",
    "AppointmentRepository",
    "TrainerRepository",
]
